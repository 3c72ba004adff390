"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from stockroom.application.dto import ProductDTO, to_product_dto
from stockroom.domain.model.draft import ProductDraft
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, draft: ProductDraft) -> ProductDTO:
        """Validate the form input and add the product to the catalog.

        SKU uniqueness is enforced by the repository.
        """
        product = self._product_repo.add(draft.to_product())
        logger.info("Added product #%s '%s' (sku %s)", product.id, product.name, product.sku)
        return to_product_dto(product)
