"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from retailops.domain.exceptions import InsufficientStockError, ValidationError
from retailops.domain.model.product import Product
from retailops.domain.model.value_objects import Money
from tests.builders import make_product


class TestProductCreate:

    def test_happy_path(self):
        p = Product.create(name="  Laptop ", price=1299.99, stock=50, category="Electronics")
        assert p.name == "Laptop"
        assert p.price == Money.of("1299.99")
        assert p.stock == 50
        assert p.category == "Electronics"
        assert p.description == ""
        assert p.created_at == p.updated_at

    def test_identity_is_unique_for_identical_fields(self):
        a = Product.create(name="Pen", price=1.5, stock=10)
        b = Product.create(name="Pen", price=1.5, stock=10)
        assert a.id != b.id

    def test_zero_stock_accepted(self):
        assert Product.create(name="Pen", price=1, stock=0).stock == 0

    def test_all_violations_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create(name="", price=-10, stock=-1)
        assert exc_info.value.errors == [
            "Product name is required",
            "Price must be a positive number",
            "Stock must be a non-negative integer",
        ]

    def test_whitespace_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(name="   ", price=10, stock=1)

    @pytest.mark.parametrize("price", [0, None, "10", True, float("nan")])
    def test_bad_price_rejected(self, price):
        with pytest.raises(ValidationError, match="Price must be a positive number"):
            Product.create(name="Pen", price=price, stock=1)

    @pytest.mark.parametrize("stock", [None, 1.5, "3", -1])
    def test_bad_stock_rejected(self, stock):
        with pytest.raises(ValidationError, match="Stock must be"):
            Product.create(name="Pen", price=1, stock=stock)


class TestProductUpdate:

    def test_only_supplied_fields_change(self):
        p = make_product()
        p.update(price=999)
        assert p.price.amount == Decimal("999")
        assert p.name == "Laptop"
        assert p.stock == 50

    def test_empty_description_clears_it(self):
        p = make_product()
        p.description = "old"
        p.update(description="")
        assert p.description == ""

    def test_zero_price_is_supplied_and_rejected(self):
        p = make_product()
        with pytest.raises(ValidationError, match="Price must be a positive number"):
            p.update(price=0)
        assert p.price == Money.of("1299.99")

    def test_failed_update_changes_nothing(self):
        p = make_product()
        with pytest.raises(ValidationError):
            p.update(name="New name", stock=-5)
        assert p.name == "Laptop"
        assert p.stock == 50

    def test_update_refreshes_updated_at(self):
        p = make_product()
        before = p.updated_at
        p.update(category="Computers")
        assert p.updated_at >= before
        assert p.created_at <= p.updated_at


class TestProductStock:

    def test_consume(self):
        p = make_product(stock=10)
        p.adjust_stock(-4)
        assert p.stock == 6

    def test_consume_everything(self):
        p = make_product(stock=10)
        p.adjust_stock(-10)
        assert p.stock == 0

    def test_overdraw_rejected_and_stock_unchanged(self):
        p = make_product(stock=10)
        with pytest.raises(InsufficientStockError, match="Laptop"):
            p.adjust_stock(-11)
        assert p.stock == 10

    def test_restock(self):
        p = make_product(stock=0)
        p.adjust_stock(25)
        assert p.stock == 25

    def test_has_sufficient_stock(self):
        p = make_product(stock=3)
        assert p.has_sufficient_stock(3)
        assert not p.has_sufficient_stock(4)
