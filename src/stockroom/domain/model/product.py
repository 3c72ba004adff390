"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is counted in and out, products are added and
removed from the catalog. Deleting a product never touches orders
because order lines carry their own name and price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import Money, ProductState

LOW_STOCK_THRESHOLD = 10


class StockStatus(Enum):
    IN_STOCK = "IN_STOCK"
    LOW_STOCK = "LOW_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is the on-hand stock: units not yet reserved by any
    order.  It only changes through the catalog store, either by a
    manual stock adjustment or by the reservation service.
    """

    id: str | None
    name: str
    sku: str
    category: str
    quantity: int
    price_raw: Money
    price_cooked: Money
    description: str = ""

    # --- Factory (used for NEW or fully replaced products) --------------------

    @staticmethod
    def create(
        name: str,
        sku: str,
        category: str,
        quantity: int,
        price_raw: Money,
        price_cooked: Money,
        description: str = "",
        product_id: str | None = None,
    ) -> Product:
        """Create a product, enforcing all field rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not sku or not sku.strip():
            raise ValidationError("SKU is required")
        if not category or not category.strip():
            raise ValidationError("Category is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("Quantity must be an integer")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if not price_raw.is_positive:
            raise ValidationError("Raw price must be greater than zero")
        if not price_cooked.is_positive:
            raise ValidationError("Cooked price must be greater than zero")

        return Product(
            id=product_id,
            name=name.strip(),
            sku=sku.strip(),
            category=category.strip(),
            quantity=quantity,
            price_raw=price_raw,
            price_cooked=price_cooked,
            description=description.strip(),
        )

    # --- Behaviour ------------------------------------------------------------

    def price_for(self, state: ProductState) -> Money:
        if state is ProductState.RAW:
            return self.price_raw
        return self.price_cooked

    def adjust_quantity(self, delta: int) -> int:
        """Apply a stock delta, clamping at zero.

        The clamp is a last-resort safety net.  It silently drops the part
        of a decrement that would go below zero, so callers that reserve
        stock must validate availability first.
        """
        self.quantity = max(0, self.quantity + delta)
        return self.quantity

    def stock_status(self, threshold: int = LOW_STOCK_THRESHOLD) -> StockStatus:
        if self.quantity == 0:
            return StockStatus.OUT_OF_STOCK
        if self.quantity <= threshold:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK

    def is_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        return self.stock_status(threshold) is StockStatus.LOW_STOCK

    @property
    def stock_value(self) -> Money:
        """Value of on-hand stock at the raw price."""
        return self.price_raw * self.quantity
