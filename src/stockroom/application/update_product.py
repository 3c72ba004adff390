"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from stockroom.application.dto import ProductDTO, to_product_dto
from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.draft import ProductDraft
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, draft: ProductDraft) -> ProductDTO:
        """Replace every field of a product.

        This does NOT affect any existing orders — they captured a
        name and price snapshot when each line was added.
        """
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product = draft.to_product(product_id=product_id)
        self._product_repo.update(product)
        logger.info("Updated product #%s", product_id)
        return to_product_dto(product)
