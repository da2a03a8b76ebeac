"""Integration tests for product catalog use cases."""

from decimal import Decimal

import pytest

from velas.application.add_product import AddProductHandler
from velas.application.list_low_stock import ListLowStockHandler
from velas.application.update_product import UpdateProductHandler
from velas.domain.exceptions import EntityNotFoundError, ValidationError
from velas.domain.model.category_price import CategoryPrice
from velas.domain.model.product import Product
from velas.domain.model.settings import Settings
from velas.domain.model.value_objects import Money
from tests.fakes import (
    FakeCategoryPriceRepository,
    FakeProductRepository,
    FakeSettingsRepository,
)


def _add_handler(products=None):
    records = FakeCategoryPriceRepository([CategoryPrice.create("Vela", Money.of("32.90"))])
    return AddProductHandler(products or FakeProductRepository(), records)


class TestAddProduct:

    def test_explicit_price(self):
        repo = FakeProductRepository()
        product = _add_handler(repo).handle("Vela Lavanda", price="30", category="Vela", quantity=4)

        assert product.id == "1"
        assert product.price == Money.of("30")
        assert repo.get_by_name("vela lavanda") is product

    def test_price_falls_back_to_category_price(self):
        product = _add_handler().handle("Vela Canela", category=" vela ")
        assert product.price == Money.of("32.90")
        assert product.category == "vela"

    def test_no_price_and_no_category_price(self):
        with pytest.raises(ValidationError, match="Price is required"):
            _add_handler().handle("Difusor Bambu", category="Difusor")

    def test_duplicate_name_rejected(self):
        repo = FakeProductRepository(
            [Product(id="1", name="Vela Lavanda", price=Money.of("30"))]
        )
        with pytest.raises(ValidationError, match="already exists"):
            _add_handler(repo).handle("VELA LAVANDA", price="31")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            _add_handler().handle("Vela Canela", price="20", quantity=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _add_handler().handle("  ", price="20")


class TestUpdateProduct:

    def test_price_change_recorded_in_history(self):
        product = Product(id="1", name="Vela Lavanda", price=Money.of("30"))
        repo = FakeProductRepository([product])

        changed = UpdateProductHandler(repo).handle("1", "35.50")

        assert changed is True
        assert product.price == Money.of("35.50")
        assert [e.reason for e in product.price_history] == ["manual adjustment"]

    def test_same_price_is_a_no_op(self):
        product = Product(id="1", name="Vela Lavanda", price=Money.of("30"))
        repo = FakeProductRepository([product])

        assert UpdateProductHandler(repo).handle("1", "30.00") is False
        assert product.price_history == []

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(FakeProductRepository()).handle("9", "10")

    def test_negative_price_rejected(self):
        repo = FakeProductRepository([Product(id="1", name="Vela", price=Money.of("30"))])
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle("1", "-5")


class TestLowStock:

    def test_lists_products_below_threshold_lowest_first(self):
        repo = FakeProductRepository(
            [
                Product(id="1", name="Vela Lavanda", price=Money.of("30"), category="Vela", quantity=3),
                Product(id="2", name="Difusor", price=Money.of("45"), quantity=20),
                Product(id="3", name="Vela Canela", price=Money.of("30"), category="Vela", quantity=0),
            ]
        )
        settings = FakeSettingsRepository(
            Settings(
                low_stock_threshold=5,
                company_name="Velas Aromáticas",
                birthday_discount_percent=Decimal("0"),
                jar_discount_amount=Money.zero(),
            )
        )

        lines = ListLowStockHandler(repo, settings).handle()

        assert [line.product_name for line in lines] == ["Vela Canela", "Vela Lavanda"]
        assert lines[0].threshold == 5
        assert lines[1].category == "Vela"

    def test_uses_default_threshold_on_first_run(self):
        repo = FakeProductRepository(
            [Product(id="1", name="Vela Lavanda", price=Money.of("30"), quantity=9)]
        )
        lines = ListLowStockHandler(repo, FakeSettingsRepository()).handle()
        assert [line.quantity for line in lines] == [9]
