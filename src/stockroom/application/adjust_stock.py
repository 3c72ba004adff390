"""Application service: manual stock adjustment (count in / count out)."""

from __future__ import annotations

import logging

from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> int:
        """Apply *delta* to the on-hand quantity and return the new value.

        Removing more than is on hand leaves the product at zero; a zero
        delta changes nothing.
        """
        quantity = self._product_repo.adjust_quantity(product_id, delta)
        logger.info("Adjusted stock of product #%s by %+d (now %d)", product_id, delta, quantity)
        return quantity
