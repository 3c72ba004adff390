"""Application service: Edit Order use case.

Replaces a pending order's customer name, group and line items.  The
stock held by the order is swapped from the old lines to the new ones
by the reservation service, which validates the new lines against
``on_hand + this order's original reservation`` before touching stock.
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


class EditOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        order_id: int,
        customer_name: str,
        group: str,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        order = self._load_editable(order_id)
        return self._commit(order, customer_name, group, self._build_draft(order, item_specs))

    def handle_draft(
        self,
        order_id: int,
        customer_name: str,
        group: str,
        draft: OrderDraft,
    ) -> OrderDTO:
        """Commit lines already prepared in *draft* (see ``ReviseOrderLineHandler``)."""
        order = self._load_editable(order_id)
        return self._commit(order, customer_name, group, draft)

    def _load_editable(self, order_id: int) -> CustomerOrder:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        order.ensure_editable()
        return order

    def _commit(
        self,
        order: CustomerOrder,
        customer_name: str,
        group: str,
        draft: OrderDraft,
    ) -> OrderDTO:
        order_id = order.id
        customer_name, group, new_items = CustomerOrder.validate_contents(
            customer_name, group, draft.to_items()
        )

        svc = InventoryReservationService(self._product_repo)
        svc.rereserve_for_edit(order.items, new_items)

        self._order_repo.replace_items_and_header(order_id, customer_name, group, new_items)
        logger.info("Edited order #%s (%d line(s))", order_id, len(new_items))

        updated = self._order_repo.get_by_id(order_id)
        return to_order_dto(updated)  # type: ignore[arg-type]

    def _build_draft(
        self,
        order: CustomerOrder,
        item_specs: list[OrderItemSpec],
    ) -> OrderDraft:
        """Build the candidate lines.

        A ``(product, state)`` pair already on the order keeps its
        snapshot name and price; a new pair is priced from the catalog.
        """
        draft = OrderDraft()
        for spec in item_specs:
            existing = order.find_item(spec.product_id, spec.state)
            if existing is not None:
                draft.keep_line(existing, spec.quantity)
                continue

            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise NotFoundError(f"Product with ID '{spec.product_id}' not found")
            draft.add_line(product, spec.state, spec.quantity)
        return draft
