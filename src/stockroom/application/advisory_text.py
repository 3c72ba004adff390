"""Application services: advisory text (product descriptions, restock hints).

Neither handler touches inventory; they only gather input for the
advisory service and return whatever text it produces.
"""

from __future__ import annotations

from stockroom.application.advisory import AdvisoryService
from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.product import LOW_STOCK_THRESHOLD
from stockroom.domain.repository.product_repository import ProductRepository


class GenerateDescriptionHandler:

    def __init__(self, advisory: AdvisoryService) -> None:
        self._advisory = advisory

    def handle(self, name: str, category: str, keywords: str = "") -> str:
        if not name or not name.strip():
            raise ValidationError("A product name is required to generate a description")
        if not category or not category.strip():
            raise ValidationError("A category is required to generate a description")
        return self._advisory.generate_description(name.strip(), category.strip(), keywords.strip())


class SuggestRestockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        advisory: AdvisoryService,
    ) -> None:
        self._product_repo = product_repo
        self._advisory = advisory

    def handle(self, threshold: int = LOW_STOCK_THRESHOLD) -> str:
        """Ask for restock priorities among products that are low but not out."""
        low_stock = [
            p for p in self._product_repo.list_all() if p.is_low_stock(threshold)
        ]
        return self._advisory.suggest_restock(low_stock)
