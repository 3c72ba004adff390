"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return the product with exactly this SKU (case-sensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Store a new product under a fresh ID and return it.

        Raises ValidationError if another product already uses the SKU.
        """

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored product with the same ID in full.

        Raises NotFoundError for an unknown ID and ValidationError if the
        SKU collides with a different product.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Orders referencing it are left untouched."""

    @abstractmethod
    def adjust_quantity(self, product_id: str, delta: int) -> int:
        """Apply ``quantity = max(0, quantity + delta)`` and return the result.

        Never rejects an over-decrement; callers must validate first.
        """

    @abstractmethod
    def get_quantity(self, product_id: str) -> int:
        """Return the on-hand quantity of a product."""
