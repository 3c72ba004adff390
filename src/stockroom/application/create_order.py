"""Application service: Create Order use case.

Resolves the requested products, builds the line items through an
OrderDraft (so repeated ``(product, state)`` pairs are merged), lets the
domain service reserve stock and only then stores the order.  Any
validation failure happens before the first stock mutation.
"""

from __future__ import annotations

import logging

from stockroom.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.draft import OrderDraft
from stockroom.domain.model.order import CustomerOrder
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        customer_name: str,
        group: str,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Create a pending order and reserve its stock.

        Steps:
        1. Resolve each product ID (fail if not found).
        2. Build line items with *current* prices (snapshot), merged.
        3. Let the CustomerOrder aggregate validate header and items.
        4. Reserve stock (all-or-nothing), then persist.
        """
        draft = OrderDraft()
        for spec in item_specs:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise NotFoundError(f"Product with ID '{spec.product_id}' not found")
            draft.add_line(product, spec.state, spec.quantity)

        order = CustomerOrder.create(
            customer_name=customer_name,
            group=group,
            items=draft.to_items(),
        )

        svc = InventoryReservationService(self._product_repo)
        svc.reserve_for_order(order.items)

        order = self._order_repo.add(order)
        logger.info(
            "Created order #%s for %s with %d line(s)",
            order.id, order.customer_name, len(order.items),
        )
        return to_order_dto(order)
