"""Application service: Delete Product use case.

No referential check against orders: their lines keep a self-contained
snapshot of the product name and price.
"""

from __future__ import annotations

import logging

from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        self._product_repo.delete(product_id)
        logger.info("Deleted product #%s", product_id)
