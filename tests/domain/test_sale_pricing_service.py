"""Unit tests for the SalePricingService domain service."""

from datetime import date
from decimal import Decimal

import pytest

from velas.domain.exceptions import ValidationError
from velas.domain.model.customer import Customer
from velas.domain.model.product import Product
from velas.domain.model.settings import Settings
from velas.domain.model.value_objects import Money
from velas.domain.service.sale_pricing_service import CartLine, SalePricingService

TODAY = date(2026, 10, 18)

VELA = Product(id="1", name="Vela Lavanda", price=Money.of("30.00"), category="Vela")
DIFUSOR = Product(id="2", name="Difusor Alecrim", price=Money.of("45.00"), category="Difusor")


def _settings(birthday: str = "0", jar: str = "0") -> Settings:
    return Settings(
        low_stock_threshold=10,
        company_name="Velas Aromáticas",
        birthday_discount_percent=Decimal(birthday),
        jar_discount_amount=Money.of(jar),
    )


def _customer(credits: int = 0, birth_date: date | None = None) -> Customer:
    return Customer(id="7", name="Ana", jar_credits=credits, birth_date=birth_date)


def _price(cart, customer, settings, **kwargs):
    return SalePricingService().compute(cart, customer, settings, TODAY, **kwargs)


class TestSubtotal:

    def test_sum_of_lines(self):
        result = _price(
            [CartLine(VELA, 2), CartLine(DIFUSOR, 1)], _customer(), _settings()
        )
        assert result.subtotal == Money.of("105.00")
        assert result.discount_amount.is_zero
        assert result.total_amount == Money.of("105.00")
        assert result.discount_percentage == Decimal("0")

    def test_empty_cart_prices_to_zero(self):
        result = _price([], _customer(credits=3), _settings(birthday="10", jar="5"))
        assert result.subtotal.is_zero
        assert result.total_amount.is_zero
        assert result.jar_credits_used == 0
        assert result.discount_percentage == Decimal("0")

    def test_invalid_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _price([CartLine(VELA, 0)], _customer(), _settings())


class TestBirthdayDiscount:

    def test_applies_in_birth_month(self):
        customer = _customer(birth_date=date(1990, 10, 2))
        result = _price([CartLine(VELA, 2)], customer, _settings(birthday="10"))
        assert result.birthday_discount_percent == Decimal("10")
        assert result.birthday_discount == Money.of("6.00")
        assert result.total_amount == Money.of("54.00")

    def test_not_in_other_month(self):
        customer = _customer(birth_date=date(1990, 11, 2))
        result = _price([CartLine(VELA, 2)], customer, _settings(birthday="10"))
        assert result.birthday_discount.is_zero
        assert result.birthday_discount_percent == Decimal("0")

    def test_no_birth_date_never_gets_it(self):
        result = _price([CartLine(VELA, 2)], _customer(), _settings(birthday="50"))
        assert result.birthday_discount.is_zero

    def test_zero_setting_disables_it(self):
        customer = _customer(birth_date=date(1990, 10, 2))
        result = _price([CartLine(VELA, 2)], customer, _settings(birthday="0"))
        assert result.birthday_discount.is_zero


class TestJarCredits:

    def test_redeems_one_credit_per_unit(self):
        result = _price([CartLine(VELA, 2)], _customer(credits=8), _settings(jar="5.00"))
        assert result.jar_credits_used == 2
        assert result.jar_discount == Money.of("10.00")
        assert result.total_amount == Money.of("50.00")

    def test_capped_by_balance(self):
        cart = [CartLine(VELA, 6), CartLine(DIFUSOR, 4)]
        result = _price(cart, _customer(credits=8), _settings(jar="5.00"))
        assert result.jar_credits_used == 8
        assert result.jar_discount == Money.of("40.00")

    def test_units_counted_across_lines(self):
        cart = [CartLine(VELA, 1), CartLine(DIFUSOR, 2)]
        result = _price(cart, _customer(credits=10), _settings(jar="2.00"))
        assert result.jar_credits_used == 3

    def test_no_credits(self):
        result = _price([CartLine(VELA, 2)], _customer(credits=0), _settings(jar="5.00"))
        assert result.jar_credits_used == 0
        assert result.jar_discount.is_zero

    def test_zero_jar_discount_redeems_nothing(self):
        result = _price([CartLine(VELA, 2)], _customer(credits=8), _settings(jar="0"))
        assert result.jar_credits_used == 0

    def test_pricing_does_not_touch_balance(self):
        customer = _customer(credits=8)
        _price([CartLine(VELA, 2)], customer, _settings(jar="5.00"))
        assert customer.jar_credits == 8


class TestStackedDiscounts:

    def test_summed_not_compounded(self):
        customer = _customer(credits=1, birth_date=date(1985, 10, 30))
        result = _price([CartLine(VELA, 2)], customer, _settings(birthday="10", jar="5.00"))
        # 10% of 60 plus one jar, both against the same subtotal
        assert result.discount_amount == Money.of("11.00")
        assert result.total_amount == Money.of("49.00")
        assert result.discount_percentage == Decimal("18.33")

    def test_additional_discount_on_same_subtotal(self):
        customer = _customer(birth_date=date(1985, 10, 30))
        result = _price(
            [CartLine(VELA, 2)],
            customer,
            _settings(birthday="10"),
            additional_discount_percent=Decimal("5"),
        )
        assert result.additional_discount == Money.of("3.00")
        assert result.discount_amount == Money.of("9.00")

    def test_total_clamped_at_zero(self):
        cheap = Product(id="3", name="Mini Vela", price=Money.of("10.00"))
        customer = _customer(credits=1, birth_date=date(2000, 10, 1))
        result = _price([CartLine(cheap, 1)], customer, _settings(birthday="80", jar="50.00"))
        assert result.clamped
        assert result.total_amount.is_zero
        assert result.discount_amount == Money.of("10.00")
        assert result.discount_percentage == Decimal("100.00")

    def test_clamping_is_logged(self, caplog):
        cheap = Product(id="3", name="Mini Vela", price=Money.of("10.00"))
        with caplog.at_level("WARNING", logger="velas"):
            _price([CartLine(cheap, 1)], _customer(credits=1), _settings(jar="50.00"))
        assert "clamped" in caplog.text


class TestNotesSummary:

    def test_describes_discounts(self):
        customer = _customer(credits=2, birth_date=date(1985, 10, 30))
        result = _price([CartLine(VELA, 2)], customer, _settings(birthday="10", jar="5.00"))
        assert result.notes_summary() == (
            "[Discounts: Birthday 10% + 2 jars returned: -R$ 10.00]"
        )

    def test_empty_without_discounts(self):
        result = _price([CartLine(VELA, 1)], _customer(), _settings())
        assert result.notes_summary() == ""


class TestWithoutJarCredits:

    def test_drops_jar_part_only(self):
        customer = _customer(credits=1, birth_date=date(1985, 10, 30))
        result = _price(
            [CartLine(VELA, 2)], customer, _settings(birthday="10", jar="5.00")
        ).without_jar_credits()

        assert result.jar_credits_used == 0
        assert result.jar_discount.is_zero
        assert result.discount_amount == Money.of("6.00")
        assert result.total_amount == Money.of("54.00")
        assert result.discount_percentage == Decimal("10.00")
        assert result.notes_summary() == "[Discounts: Birthday 10%]"

    def test_lifts_a_clamp_caused_by_jars(self):
        cheap = Product(id="3", name="Mini Vela", price=Money.of("10.00"))
        result = _price(
            [CartLine(cheap, 1)], _customer(credits=1), _settings(jar="50.00")
        ).without_jar_credits()

        assert not result.clamped
        assert result.total_amount == Money.of("10.00")

    def test_no_jars_is_unchanged(self):
        result = _price([CartLine(VELA, 1)], _customer(), _settings(jar="5.00"))
        assert result.without_jar_credits() is result
