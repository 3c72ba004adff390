"""Tests for the advisory text handlers."""

import pytest

from stockroom.application.advisory import AdvisoryService
from stockroom.application.advisory_text import (
    GenerateDescriptionHandler,
    SuggestRestockHandler,
)
from stockroom.domain.exceptions import ValidationError
from tests.fakes import make_stores


class RecordingAdvisory(AdvisoryService):

    def __init__(self) -> None:
        self.descriptions: list[tuple[str, str, str]] = []
        self.restock_requests: list[list[str]] = []

    def generate_description(self, name, category, keywords):
        self.descriptions.append((name, category, keywords))
        return "A lovely product."

    def suggest_restock(self, low_stock_items):
        self.restock_requests.append([p.name for p in low_stock_items])
        return "Restock bread."


class TestGenerateDescription:

    def test_passes_trimmed_input(self):
        advisory = RecordingAdvisory()
        text = GenerateDescriptionHandler(advisory).handle(" Tea ", " Beverages ", " green ")
        assert text == "A lovely product."
        assert advisory.descriptions == [("Tea", "Beverages", "green")]

    @pytest.mark.parametrize("name,category", [("", "Beverages"), ("Tea", " ")])
    def test_name_and_category_required(self, name, category):
        with pytest.raises(ValidationError, match="required to generate"):
            GenerateDescriptionHandler(RecordingAdvisory()).handle(name, category)


class TestSuggestRestock:

    def test_only_low_but_not_empty_products(self):
        products, _ = make_stores(("Plenty", 50), ("Low", 4), ("Empty", 0), ("Edge", 10))
        advisory = RecordingAdvisory()
        text = SuggestRestockHandler(products, advisory).handle()
        assert text == "Restock bread."
        assert advisory.restock_requests == [["Low", "Edge"]]

    def test_does_not_touch_stock(self):
        products, _ = make_stores(("Low", 4))
        SuggestRestockHandler(products, RecordingAdvisory()).handle()
        assert products.get_quantity("1") == 4
