"""CustomerOrder aggregate.

The order owns its line items.  Each line is a snapshot: product name
and price are copied from the catalog when the line is added, so later
catalog edits (or deletes) never change an existing order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import Money, ProductState, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class OrderItem:
    """A single line of an order, keyed by ``(product_id, state)``."""

    product_id: str
    product_name: str
    quantity: Quantity
    price: Money  # locked when the line was added
    state: ProductState

    @property
    def key(self) -> tuple[str, ProductState]:
        return self.product_id, self.state

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


def merge_items(items: list[OrderItem]) -> list[OrderItem]:
    """Collapse lines that share ``(product_id, state)`` into one.

    Quantities are summed; the first line's name and price win and the
    first-seen order of lines is kept.
    """
    merged: dict[tuple[str, ProductState], OrderItem] = {}
    for item in items:
        existing = merged.get(item.key)
        if existing is None:
            merged[item.key] = item
        else:
            merged[item.key] = replace(existing, quantity=existing.quantity + item.quantity)
    return list(merged.values())


def reserved_by_product(items: list[OrderItem]) -> dict[str, int]:
    """Sum line quantities per product id, across both states."""
    totals: dict[str, int] = {}
    for item in items:
        totals[item.product_id] = totals.get(item.product_id, 0) + item.quantity.value
    return totals


@dataclass
class CustomerOrder:
    """Aggregate root for customer orders.

    Use the ``CustomerOrder.create()`` factory for new orders — it enforces
    all business rules.  The ``__init__`` stays simple so the order store
    can hand out copies without re-validating.
    """

    id: int | None
    customer_name: str
    group: str
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_name: str, group: str, items: list[OrderItem]) -> CustomerOrder:
        """Create a new pending order, enforcing all invariants."""
        customer_name, group, items = CustomerOrder.validate_contents(
            customer_name, group, items
        )
        return CustomerOrder(id=None, customer_name=customer_name, group=group, items=items)

    @staticmethod
    def validate_contents(
        customer_name: str,
        group: str,
        items: list[OrderItem],
    ) -> tuple[str, str, list[OrderItem]]:
        """Validate header fields and line items; return normalised values."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not group or not group.strip():
            raise ValidationError("Order group is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        return customer_name.strip(), group.strip(), merge_items(items)

    # --- State transitions ----------------------------------------------------

    def complete(self) -> None:
        """Transition PENDING -> COMPLETED.

        Stock was already committed when the order was created or last
        edited, so completion has no inventory effect.
        """
        if self.status is not OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot complete order #{self.id} — current status is "
                f"{self.status.value}, expected PENDING"
            )
        self.status = OrderStatus.COMPLETED

    def ensure_editable(self) -> None:
        if self.status is not OrderStatus.PENDING:
            raise ValidationError(
                f"Order #{self.id} is {self.status.value} and can no longer be edited"
            )

    # --- Computed properties --------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self.status is OrderStatus.PENDING

    def reserved_quantities(self) -> dict[str, int]:
        return reserved_by_product(self.items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    def find_item(self, product_id: str, state: ProductState) -> OrderItem | None:
        for item in self.items:
            if item.key == (product_id, state):
                return item
        return None
