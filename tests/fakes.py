"""Test doubles and builders.

The in-memory repositories are the real stores, so only the OpenAI
client needs faking.  ``FakeOpenAIClient`` mimics the
``client.chat.completions.create(...)`` call chain.
"""

from __future__ import annotations

from types import SimpleNamespace

from stockroom.domain.model.draft import ProductDraft
from stockroom.domain.model.product import Product
from stockroom.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from stockroom.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


class _FakeCompletions:

    def __init__(self, reply: str | None, error: Exception | None, drop_message: bool) -> None:
        self._reply = reply
        self._error = error
        self._drop_message = drop_message
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        message = None if self._drop_message else SimpleNamespace(content=self._reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAIClient:

    def __init__(
        self,
        reply: str | None = "",
        error: Exception | None = None,
        drop_message: bool = False,
    ) -> None:
        self.completions = _FakeCompletions(reply, error, drop_message)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> list[dict]:
        return self.completions.calls


def make_product(
    name: str = "Widget",
    sku: str | None = None,
    quantity: int = 10,
    price_raw: str = "100",
    price_cooked: str = "120",
    category: str = "General",
) -> Product:
    return ProductDraft(
        name=name,
        sku=sku or name.upper()[:3] + "-001",
        category=category,
        quantity=quantity,
        price_raw=price_raw,
        price_cooked=price_cooked,
    ).to_product()


def make_stores(
    *stock: tuple[str, int],
) -> tuple[InMemoryProductRepository, InMemoryOrderRepository]:
    """Build stores with products named and stocked as given.

    Products get IDs "1", "2", ... in argument order.
    """
    products = InMemoryProductRepository(
        [make_product(name, sku=f"SKU-{i}", quantity=qty) for i, (name, qty) in enumerate(stock, 1)]
    )
    return products, InMemoryOrderRepository()
