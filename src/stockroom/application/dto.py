"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.order import CustomerOrder
from stockroom.domain.model.product import LOW_STOCK_THRESHOLD, Product
from stockroom.domain.model.value_objects import ProductState


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product, variant, quantity)."""

    product_id: str
    state: ProductState
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    state: str
    quantity: int
    price: str  # formatted, e.g. "299,000 VND"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    group: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    sku: str
    category: str
    quantity: int
    price_raw: str
    price_cooked: str
    description: str
    stock_status: str


def to_order_dto(order: CustomerOrder) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        group=order.group,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                state=item.state.value,
                quantity=item.quantity.value,
                price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def to_product_dto(product: Product, threshold: int = LOW_STOCK_THRESHOLD) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        sku=product.sku,
        category=product.category,
        quantity=product.quantity,
        price_raw=str(product.price_raw),
        price_cooked=str(product.price_cooked),
        description=product.description,
        stock_status=product.stock_status(threshold).value,
    )
