"""Domain service: Inventory Reservation.

This service is the only code allowed to move catalog stock in response
to order lifecycle events.  It lives in the domain layer because the
logic is a core business rule, not just orchestration.

Every operation is two-phase (validate-then-mutate): availability is
checked for every product before any quantity is touched, so a failure
never leaves the catalog in a partially reserved state.  The catalog
store clamps quantities at zero, which would hide an over-decrement, so
the validation phase here is what actually prevents over-commitment.
"""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError, ValidationError
from stockroom.domain.model.order import OrderItem, reserved_by_product
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve_for_order(self, items: list[OrderItem]) -> None:
        """Deduct stock for the lines of a new order.

        Demand is summed per product across both states, since raw and
        cooked variants share one stock pool.
          Phase 1 — every product's demand must fit its on-hand quantity.
          Phase 2 — deduct each line.
        """
        demand = reserved_by_product(items)
        products = self._load_products(demand)
        ceilings = {pid: product.quantity for pid, product in products.items()}

        self._check_demand(demand, ceilings, products)

        for line in items:
            self._product_repo.adjust_quantity(line.product_id, -line.quantity.value)

    def rereserve_for_edit(
        self,
        original_items: list[OrderItem],
        new_items: list[OrderItem],
    ) -> None:
        """Swap an order's reservation from *original_items* to *new_items*.

        The ceiling for each product is what would be on hand if this
        order's original reservation were returned first:
        ``on_hand + original_reserved``.  The new demand is validated
        against that ceiling; only then is every original line restocked
        and every new line deducted.  Reversing and reapplying in full
        handles added, removed and re-stated lines alike, which a
        per-line delta cannot validate correctly.
        """
        original = reserved_by_product(original_items)
        demand = reserved_by_product(new_items)
        products = self._load_products(demand)
        ceilings = {
            pid: product.quantity + original.get(pid, 0)
            for pid, product in products.items()
        }
        logger.debug("Reservation ceilings for edit: %s", ceilings)

        self._check_demand(demand, ceilings, products)

        for line in original_items:
            if self._product_repo.get_by_id(line.product_id) is None:
                logger.info(
                    "Skipping restock of %d x %s: product no longer in catalog",
                    line.quantity.value, line.product_name,
                )
                continue
            self._product_repo.adjust_quantity(line.product_id, line.quantity.value)
        for line in new_items:
            self._product_repo.adjust_quantity(line.product_id, -line.quantity.value)

    # --- Internal helpers -----------------------------------------------------

    def _load_products(self, demand: dict[str, int]) -> dict[str, Product]:
        products: dict[str, Product] = {}
        for product_id in demand:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product with ID '{product_id}' not found")
            products[product_id] = product
        return products

    @staticmethod
    def _check_demand(
        demand: dict[str, int],
        ceilings: dict[str, int],
        products: dict[str, Product],
    ) -> None:
        for product_id, requested in demand.items():
            available = ceilings[product_id]
            if requested > available:
                raise ValidationError(
                    f"Insufficient stock for {products[product_id].name} "
                    f"(requested {requested}, only {available} available)"
                )
