"""In-memory implementation of ProductRepository.

State lives for the lifetime of the process.  Products are copied on
the way in and out so callers can only change stored state through the
repository methods.
"""

from __future__ import annotations

import logging
from copy import deepcopy

from stockroom.domain.exceptions import NotFoundError, ValidationError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._last_id = 0
        for product in products or []:
            self.add(product)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        product = self._store.get(product_id)
        return deepcopy(product) if product is not None else None

    def get_by_sku(self, sku: str) -> Product | None:
        for product in self._store.values():
            if product.sku == sku:
                return deepcopy(product)
        return None

    def list_all(self) -> list[Product]:
        return [deepcopy(p) for p in self._store.values()]

    def add(self, product: Product) -> Product:
        self._assert_sku_free(product.sku, product_id=None)
        stored = deepcopy(product)
        stored.id = self._next_id()
        self._store[stored.id] = stored
        return deepcopy(stored)

    def update(self, product: Product) -> None:
        if product.id is None or product.id not in self._store:
            raise NotFoundError(f"Product with ID '{product.id}' not found")
        self._assert_sku_free(product.sku, product_id=product.id)
        self._store[product.id] = deepcopy(product)

    def delete(self, product_id: str) -> None:
        if product_id not in self._store:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        del self._store[product_id]

    def adjust_quantity(self, product_id: str, delta: int) -> int:
        product = self._require(product_id)
        before = product.quantity
        after = product.adjust_quantity(delta)
        if before + delta < 0:
            logger.warning(
                "Stock of %s clamped at zero (had %d, delta %d)",
                product.name, before, delta,
            )
        return after

    def get_quantity(self, product_id: str) -> int:
        return self._require(product_id).quantity

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: str) -> Product:
        product = self._store.get(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def _next_id(self) -> str:
        # IDs are never reused, even after a delete
        self._last_id += 1
        while str(self._last_id) in self._store:
            self._last_id += 1
        return str(self._last_id)

    def _assert_sku_free(self, sku: str, product_id: str | None) -> None:
        for existing in self._store.values():
            if existing.sku == sku and existing.id != product_id:
                raise ValidationError(f"SKU '{sku}' already exists")
