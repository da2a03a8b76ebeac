"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from velas.domain.model.sale import Sale
from velas.domain.service.sale_pricing_service import PricingResult


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer is buying (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class SaleLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "R$ 32.90"
    total_price: str


@dataclass(frozen=True)
class QuoteDTO:
    """Output: a price preview. Nothing has been written yet."""

    customer_name: str
    items: list[SaleLineItemDTO]
    subtotal: str
    birthday_discount_percent: str
    birthday_discount: str
    additional_discount_percent: str
    additional_discount: str
    jar_credits_used: int
    jar_discount: str
    discount_amount: str
    discount_percentage: str
    total_amount: str
    clamped: bool

    @staticmethod
    def from_pricing(pricing: PricingResult) -> QuoteDTO:
        return QuoteDTO(
            customer_name=pricing.customer_name,
            items=_line_items(pricing.items),
            subtotal=str(pricing.subtotal),
            birthday_discount_percent=f"{pricing.birthday_discount_percent}%",
            birthday_discount=str(pricing.birthday_discount),
            additional_discount_percent=f"{pricing.additional_discount_percent}%",
            additional_discount=str(pricing.additional_discount),
            jar_credits_used=pricing.jar_credits_used,
            jar_discount=str(pricing.jar_discount),
            discount_amount=str(pricing.discount_amount),
            discount_percentage=f"{pricing.discount_percentage}%",
            total_amount=str(pricing.total_amount),
            clamped=pricing.clamped,
        )


@dataclass(frozen=True)
class SaleDTO:
    """Output: a committed sale as displayed to the user."""

    id: int
    customer_name: str
    status: str
    payment_method: str | None
    items: list[SaleLineItemDTO]
    subtotal: str
    discount_percentage: str
    discount_amount: str
    total_amount: str
    jar_credits_used: int
    notes: str
    sale_date: str

    @staticmethod
    def from_sale(sale: Sale) -> SaleDTO:
        return SaleDTO(
            id=sale.id,  # type: ignore[arg-type]
            customer_name=sale.customer_name,
            status=sale.status.value,
            payment_method=sale.payment_method.value if sale.payment_method else None,
            items=_line_items(sale.items),
            subtotal=str(sale.subtotal),
            discount_percentage=f"{sale.discount_percentage}%",
            discount_amount=str(sale.discount_amount),
            total_amount=str(sale.total_amount),
            jar_credits_used=sale.jar_credits_used,
            notes=sale.notes,
            sale_date=sale.sale_date.strftime("%Y-%m-%d %H:%M UTC"),
        )


def _line_items(items) -> list[SaleLineItemDTO]:
    return [
        SaleLineItemDTO(
            product_name=item.product_name,
            quantity=item.quantity.value,
            unit_price=str(item.unit_price),
            total_price=str(item.total_price),
        )
        for item in items
    ]
