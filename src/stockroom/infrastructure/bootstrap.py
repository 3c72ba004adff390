"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

State is process-lifetime only: the stores built here are shared by
every command run in the same process (see ``stockroom shell``).
"""

from __future__ import annotations

import logging

from stockroom.application.complete_order import CompleteOrderHandler
from stockroom.application.create_order import CreateOrderHandler
from stockroom.application.dto import OrderItemSpec
from stockroom.domain.model.draft import ProductDraft
from stockroom.domain.model.value_objects import ProductState
from stockroom.infrastructure.advisory.openai_advisory_service import (
    OpenAIAdvisoryService,
)
from stockroom.infrastructure.config import settings
from stockroom.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from stockroom.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    ProductDraft("Organic Green Tea", "TXH-001", "Beverages", 85, 299000, 329000,
                 "Fresh, healthy organic green tea picked from the finest gardens."),
    ProductDraft("Handmade Sourdough Bread", "BMS-002", "Bakery", 8, 85000, 95000,
                 "Handmade sourdough with a crisp crust and a soft, chewy crumb."),
    ProductDraft("Premium Olive Oil", "DOL-003", "Dry Goods", 41, 550000, 550000,
                 "Cold-pressed extra virgin olive oil from hand-picked olives."),
    ProductDraft("Gourmet Coffee Beans", "HCP-004", "Beverages", 0, 450000, 480000,
                 "Single-origin Arabica beans with notes of chocolate and citrus."),
    ProductDraft("Aged Cheddar", "PMC-005", "Dairy", 16, 350000, 350000,
                 "Sharp, crumbly aged cheddar for cheese boards or cooking."),
    ProductDraft("Stainless Steel Pan", "CIK-006", "Cookware", 23, 1200000, 1200000,
                 "Durable 10-inch stainless steel frying pan."),
]

_products: InMemoryProductRepository | None = None
_orders: InMemoryOrderRepository | None = None


def product_repository() -> InMemoryProductRepository:
    _ensure_stores()
    return _products  # type: ignore[return-value]


def order_repository() -> InMemoryOrderRepository:
    _ensure_stores()
    return _orders  # type: ignore[return-value]


def advisory_service() -> OpenAIAdvisoryService:
    return OpenAIAdvisoryService(
        api_key=settings.OPENAI_API_KEY,
        model=settings.ADVISORY_MODEL,
    )


def reset(seed: bool | None = None) -> None:
    """Drop all in-process state and rebuild the stores."""
    global _products, _orders
    _products = InMemoryProductRepository()
    _orders = InMemoryOrderRepository()
    if seed is None:
        seed = settings.SEED_DEMO
    if seed:
        seed_demo_data(_products, _orders)


def seed_demo_data(
    products: InMemoryProductRepository,
    orders: InMemoryOrderRepository,
) -> None:
    """Load a small demo catalog and a few orders placed against it.

    Orders go through the normal handlers so their stock is reserved.
    """
    for draft in DEMO_PRODUCTS:
        products.add(draft.to_product())

    create = CreateOrderHandler(orders, products)
    create.handle("Nguyen Van An", "Walk-in", [
        OrderItemSpec("1", ProductState.RAW, 2),
        OrderItemSpec("3", ProductState.RAW, 1),
    ])
    catering = create.handle("Tran Thi Bich", "Sen Restaurant", [
        OrderItemSpec("2", ProductState.COOKED, 5),
    ])
    CompleteOrderHandler(orders).handle(catering.id)
    create.handle("Le Hoang Cuong", "Wedding Events", [
        OrderItemSpec("5", ProductState.RAW, 1),
        OrderItemSpec("6", ProductState.RAW, 1),
    ])
    logger.debug("Seeded demo catalog with %d products", len(DEMO_PRODUCTS))


def _ensure_stores() -> None:
    if _products is None or _orders is None:
        reset()
