"""Unit tests for the Product aggregate."""

import pytest

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.draft import ProductDraft
from stockroom.domain.model.product import Product, StockStatus
from stockroom.domain.model.value_objects import Money, ProductState
from tests.fakes import make_product


def _create(**overrides) -> Product:
    fields = dict(
        name="Green Tea",
        sku="TXH-001",
        category="Beverages",
        quantity=5,
        price_raw=Money.of("299000"),
        price_cooked=Money.of("329000"),
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path_strips_text(self):
        product = _create(name="  Green Tea ", sku=" TXH-001 ")
        assert product.name == "Green Tea"
        assert product.sku == "TXH-001"
        assert product.id is None

    @pytest.mark.parametrize("field,message", [
        ("name", "name is required"),
        ("sku", "SKU is required"),
        ("category", "Category is required"),
    ])
    def test_blank_text_fields_rejected(self, field, message):
        with pytest.raises(ValidationError, match=message):
            _create(**{field: "   "})

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(quantity=-1)

    def test_zero_quantity_accepted(self):
        assert _create(quantity=0).quantity == 0

    def test_zero_raw_price_rejected(self):
        with pytest.raises(ValidationError, match="Raw price"):
            _create(price_raw=Money.of("0"))

    def test_zero_cooked_price_rejected(self):
        with pytest.raises(ValidationError, match="Cooked price"):
            _create(price_cooked=Money.of("0"))


class TestProductStock:

    def test_adjust_up_and_down(self):
        product = make_product(quantity=10)
        assert product.adjust_quantity(5) == 15
        assert product.adjust_quantity(-7) == 8

    def test_adjust_clamps_at_zero(self):
        product = make_product(quantity=3)
        assert product.adjust_quantity(-10) == 0
        assert product.quantity == 0

    @pytest.mark.parametrize("quantity,status", [
        (0, StockStatus.OUT_OF_STOCK),
        (1, StockStatus.LOW_STOCK),
        (10, StockStatus.LOW_STOCK),
        (11, StockStatus.IN_STOCK),
    ])
    def test_stock_status(self, quantity, status):
        assert make_product(quantity=quantity).stock_status() is status

    def test_custom_threshold(self):
        assert make_product(quantity=15).stock_status(threshold=20) is StockStatus.LOW_STOCK

    def test_stock_value_uses_raw_price(self):
        assert make_product(quantity=4, price_raw="100").stock_value == Money.of("400")

    def test_price_for_state(self):
        product = make_product(price_raw="100", price_cooked="120")
        assert product.price_for(ProductState.RAW) == Money.of("100")
        assert product.price_for(ProductState.COOKED) == Money.of("120")


class TestProductDraft:

    def test_converts_string_input(self):
        draft = ProductDraft("Bread", "BMS-002", "Bakery", "8", "85000", "95000")
        product = draft.to_product(product_id="7")
        assert product.id == "7"
        assert product.quantity == 8
        assert product.price_cooked == Money.of("95000")

    def test_bad_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            ProductDraft("Bread", "BMS-002", "Bakery", "eight", "1", "1").to_product()

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            ProductDraft("Bread", "BMS-002", "Bakery", 1, "", "1").to_product()
