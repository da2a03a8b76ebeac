"""Domain service: Sale Pricing.

Composes the two automatic discount policies of the shop on top of an
optional manual percentage:

* birthday discount: a percentage of the subtotal during the customer's
  birth month;
* jar credits: one returned jar redeems a flat discount on one unit
  purchased, up to the customer's balance.

All discounts are absolute amounts computed on the same pre-discount
subtotal and summed; they never compound. Computing a price is pure: it
reads nothing and writes nothing, so a preview can be thrown away freely.
Credits are only debited when the sale is committed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from velas.domain.model.customer import Customer
from velas.domain.model.product import Product
from velas.domain.model.sale import SaleLineItem
from velas.domain.model.settings import Settings
from velas.domain.model.value_objects import CENTS, Money, Quantity

logger = logging.getLogger(__name__)

ZERO_PERCENT = Decimal("0")


def effective_percentage(discount: Money, subtotal: Money) -> Decimal:
    """Share of *subtotal* taken by *discount*, in percent (two decimals)."""
    if subtotal.is_zero:
        return ZERO_PERCENT
    return (discount.amount / subtotal.amount * 100).quantize(
        CENTS, rounding=ROUND_HALF_UP
    )


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int


@dataclass(frozen=True)
class PricingResult:
    """Everything needed to show a quote and to commit the sale."""

    customer_id: str
    customer_name: str
    items: list[SaleLineItem]
    subtotal: Money
    birthday_discount_percent: Decimal
    birthday_discount: Money
    additional_discount_percent: Decimal
    additional_discount: Money
    jar_credits_used: int
    jar_discount: Money
    discount_amount: Money
    discount_percentage: Decimal
    total_amount: Money
    clamped: bool = False

    def without_jar_credits(self) -> PricingResult:
        """The same quote with no jar redeemed.

        Used when a sale is recorded without debiting credits, so the
        stored totals only carry the discounts actually granted.
        """
        if self.jar_credits_used == 0:
            return self
        discount = self.birthday_discount + self.additional_discount
        clamped = discount > self.subtotal
        if clamped:
            discount = self.subtotal
        return replace(
            self,
            jar_credits_used=0,
            jar_discount=Money.zero(),
            discount_amount=discount,
            discount_percentage=effective_percentage(discount, self.subtotal),
            total_amount=self.subtotal - discount,
            clamped=clamped,
        )

    def notes_summary(self) -> str:
        """Human-readable trail of the discounts applied, for the sale notes."""
        parts: list[str] = []
        if self.birthday_discount_percent > 0:
            parts.append(f"Birthday {self.birthday_discount_percent}%")
        if self.additional_discount_percent > 0:
            parts.append(f"Additional {self.additional_discount_percent}%")
        if self.jar_credits_used > 0:
            noun = "jar" if self.jar_credits_used == 1 else "jars"
            parts.append(f"{self.jar_credits_used} {noun} returned: -{self.jar_discount}")
        if not parts:
            return ""
        return "[Discounts: " + " + ".join(parts) + "]"


class SalePricingService:

    def compute(
        self,
        cart: list[CartLine],
        customer: Customer,
        settings: Settings,
        today: date,
        additional_discount_percent: Decimal = ZERO_PERCENT,
    ) -> PricingResult:
        """Price a cart for *customer* under *settings* as of *today*.

        Steps:
        1. Subtotal from each line's current product price (snapshot).
        2. Birthday percentage if the customer was born this month.
        3. Jar credits: one per unit, capped by the customer's balance.
        4. Sum the discounts and clamp the total at zero.
        """
        items = [
            SaleLineItem(
                product_id=line.product.id,
                product_name=line.product.name,
                quantity=Quantity(line.quantity),
                unit_price=line.product.price,  # <-- price snapshot
            )
            for line in cart
        ]

        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.total_price

        birthday_percent = self._birthday_percent(customer, settings, today)
        birthday_discount = subtotal.percent(birthday_percent)
        additional_discount = subtotal.percent(additional_discount_percent)

        total_units = sum(item.quantity.value for item in items)
        jar_credits_used = self._jar_credits_to_redeem(customer, settings, total_units)
        jar_discount = settings.jar_discount_amount * jar_credits_used

        discount = birthday_discount + additional_discount + jar_discount
        clamped = discount > subtotal
        if clamped:
            logger.warning(
                "Discounts %s exceed subtotal %s for customer %s; total clamped to zero. "
                "Check birthday and jar discount settings.",
                discount,
                subtotal,
                customer.id,
            )
            discount = subtotal

        return PricingResult(
            customer_id=customer.id,
            customer_name=customer.name,
            items=items,
            subtotal=subtotal,
            birthday_discount_percent=birthday_percent,
            birthday_discount=birthday_discount,
            additional_discount_percent=additional_discount_percent,
            additional_discount=additional_discount,
            jar_credits_used=jar_credits_used,
            jar_discount=jar_discount,
            discount_amount=discount,
            discount_percentage=effective_percentage(discount, subtotal),
            total_amount=subtotal - discount,
            clamped=clamped,
        )

    # --- Policies -------------------------------------------------------------

    @staticmethod
    def _birthday_percent(customer: Customer, settings: Settings, today: date) -> Decimal:
        if settings.birthday_discount_percent > 0 and customer.is_birthday_month(today):
            return settings.birthday_discount_percent
        return ZERO_PERCENT

    @staticmethod
    def _jar_credits_to_redeem(customer: Customer, settings: Settings, total_units: int) -> int:
        # Any unit redeems a credit, 1:1, never more than the balance.
        if settings.jar_discount_amount.is_zero:
            return 0
        return max(0, min(customer.jar_credits, total_units))

