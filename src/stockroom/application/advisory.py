"""Port for the advisory text service.

Advisory text is free-form help for the user (product descriptions,
restock suggestions).  It never feeds back into inventory state, and
implementations must return a fallback string rather than raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product

NOT_CONFIGURED_TEXT = "AI features are not configured. Please check the API key."
DESCRIPTION_FAILED_TEXT = "Could not generate a description. Please check the logs."
RESTOCK_FAILED_TEXT = "Could not generate restock suggestions. Please check the logs."
NOTHING_TO_RESTOCK_TEXT = "No items are running low, so there is nothing to suggest."


class AdvisoryService(ABC):

    @abstractmethod
    def generate_description(self, name: str, category: str, keywords: str) -> str:
        """Return a short marketing description for a product."""

    @abstractmethod
    def suggest_restock(self, low_stock_items: list[Product]) -> str:
        """Return a short restock-priority summary for low-stock products."""
