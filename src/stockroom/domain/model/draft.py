"""Draft structures for data that is still being edited.

A draft may hold partial or temporarily invalid values while the user
fills in a form.  It only becomes a domain entity through an explicit
conversion that runs full validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.order import OrderItem
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money, ProductState, Quantity


@dataclass
class DraftLine:
    product_id: str
    product_name: str
    price: Money
    state: ProductState
    quantity: int

    @property
    def key(self) -> tuple[str, ProductState]:
        return self.product_id, self.state


@dataclass
class OrderDraft:
    """Working copy of an order's line items.

    Lines are unique per ``(product_id, state)``: every operation that
    could produce a duplicate pair merges it into the existing line.
    """

    lines: list[DraftLine] = field(default_factory=list)

    @staticmethod
    def from_items(items: list[OrderItem]) -> OrderDraft:
        draft = OrderDraft()
        for item in items:
            draft.keep_line(item, item.quantity.value)
        return draft

    def keep_line(self, item: OrderItem, quantity: int) -> None:
        """Add an existing order line, keeping its name and price snapshot."""
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        self._merge_in(
            DraftLine(
                product_id=item.product_id,
                product_name=item.product_name,
                price=item.price,
                state=item.state,
                quantity=quantity,
            )
        )

    def add_line(self, product: Product, state: ProductState, quantity: int) -> None:
        """Add *quantity* of *product* in *state*, merging with an existing line."""
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        self._merge_in(
            DraftLine(
                product_id=product.id,  # type: ignore[arg-type]
                product_name=product.name,
                price=product.price_for(state),
                state=state,
                quantity=quantity,
            )
        )

    def set_quantity(self, index: int, quantity: int) -> None:
        """Change a line's quantity; zero removes the line."""
        line = self.line_at(index)
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if quantity == 0:
            del self.lines[index]
        else:
            line.quantity = quantity

    def change_state(self, index: int, state: ProductState, product: Product) -> None:
        """Switch a line to the other variant, re-pricing it from *product*.

        If a line for the new ``(product_id, state)`` already exists the
        two are merged.
        """
        line = self.line_at(index)
        if line.state is state:
            return
        del self.lines[index]
        line.state = state
        line.price = product.price_for(state)
        self._merge_in(line, position=index)

    def to_items(self) -> list[OrderItem]:
        """Convert to validated order lines, dropping empty ones."""
        return [
            OrderItem(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=Quantity(line.quantity),
                price=line.price,
                state=line.state,
            )
            for line in self.lines
            if line.quantity > 0
        ]

    def line_at(self, index: int) -> DraftLine:
        if not 0 <= index < len(self.lines):
            raise ValidationError(f"No order line #{index + 1}")
        return self.lines[index]

    # --- Internal helpers -----------------------------------------------------

    def _merge_in(self, new_line: DraftLine, position: int | None = None) -> None:
        for line in self.lines:
            if line.key == new_line.key:
                line.quantity += new_line.quantity
                return
        if position is None:
            self.lines.append(new_line)
        else:
            self.lines.insert(position, new_line)


@dataclass
class ProductDraft:
    """Raw product form input, not yet validated."""

    name: str = ""
    sku: str = ""
    category: str = ""
    quantity: int | str = 0
    price_raw: str | int = ""
    price_cooked: str | int = ""
    description: str = ""

    def to_product(self, product_id: str | None = None) -> Product:
        try:
            quantity = int(self.quantity)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid quantity: {self.quantity!r}") from exc
        return Product.create(
            name=self.name,
            sku=self.sku,
            category=self.category,
            quantity=quantity,
            price_raw=Money.of(self.price_raw),
            price_cooked=Money.of(self.price_cooked),
            description=self.description,
            product_id=product_id,
        )
