"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from stockroom.application.dto import ProductDTO, to_product_dto
from stockroom.domain.model.product import LOW_STOCK_THRESHOLD
from stockroom.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        threshold: int = LOW_STOCK_THRESHOLD,
        category: str | None = None,
    ) -> list[ProductDTO]:
        return [
            to_product_dto(product, threshold)
            for product in self._product_repo.list_all()
            if category is None or product.category == category
        ]
