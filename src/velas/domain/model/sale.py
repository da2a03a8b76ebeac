"""Sale aggregate.

A sale owns its line items and a snapshot of the pricing computed when it
was committed. Prices changed later (manually or by category propagation)
never touch an existing sale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from velas.domain.exceptions import ValidationError
from velas.domain.model.value_objects import Money, Quantity


class SaleStatus(Enum):
    PENDING = "Pending"
    AWAITING_PAYMENT = "AwaitingPayment"
    PAID = "Paid"
    CANCELLED = "Cancelled"


class PaymentMethod(Enum):
    CASH = "Cash"
    PIX = "Pix"
    DEBIT = "Debit"
    CREDIT = "Credit"


@dataclass(frozen=True)
class SaleLineItem:
    """Captures the price of a product at sale time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at sale time

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Sale:
    """Aggregate root for sales.

    Use ``Sale.create()`` for new sales. The ``__init__`` stays simple so
    the repository can reconstitute persisted sales without re-validating.
    """

    id: int | None
    customer_id: str
    customer_name: str
    items: list[SaleLineItem]
    subtotal: Money
    discount_amount: Money
    discount_percentage: Decimal
    total_amount: Money
    jar_credits_used: int = 0
    status: SaleStatus = SaleStatus.PENDING
    payment_method: PaymentMethod | None = None
    notes: str = ""
    sale_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW sales only) ------------------------------------

    @staticmethod
    def create(
        customer_id: str,
        customer_name: str,
        items: list[SaleLineItem],
        subtotal: Money,
        discount_amount: Money,
        discount_percentage: Decimal,
        total_amount: Money,
        jar_credits_used: int,
        status: SaleStatus = SaleStatus.PENDING,
        payment_method: PaymentMethod | None = None,
        notes: str = "",
    ) -> Sale:
        """Create a new sale, enforcing all invariants."""
        if not items:
            raise ValidationError("Sale must contain at least one item")
        if jar_credits_used < 0:
            raise ValidationError("Jar credits used cannot be negative")
        if subtotal.amount - discount_amount.amount != total_amount.amount:
            raise ValidationError(
                f"Sale total {total_amount} does not match "
                f"subtotal {subtotal} minus discount {discount_amount}"
            )
        if status == SaleStatus.PAID and payment_method is None:
            raise ValidationError("A paid sale needs a payment method")

        return Sale(
            id=None,
            customer_id=customer_id,
            customer_name=customer_name,
            items=list(items),
            subtotal=subtotal,
            discount_amount=discount_amount,
            discount_percentage=discount_percentage,
            total_amount=total_amount,
            jar_credits_used=jar_credits_used,
            status=status,
            payment_method=payment_method,
            notes=notes,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(
        self,
        new_status: SaleStatus,
        payment_method: PaymentMethod | None = None,
    ) -> None:
        """Move an open sale between PENDING, AWAITING_PAYMENT and PAID.

        A paid sale can only be cancelled (or have its payment method
        corrected). Cancellation goes through ``cancel()`` because it has
        credit side effects the caller must handle.
        """
        if new_status == SaleStatus.CANCELLED:
            self.cancel()
            return
        if self.status == SaleStatus.CANCELLED:
            raise ValidationError(
                f"Cannot change status of sale #{self.id} — it is cancelled"
            )
        if self.status == SaleStatus.PAID and new_status != SaleStatus.PAID:
            raise ValidationError(
                f"Sale #{self.id} is paid; it can only be cancelled"
            )
        if new_status == SaleStatus.PAID:
            method = payment_method or self.payment_method
            if method is None:
                raise ValidationError("A payment method is required to mark a sale as paid")
            self.payment_method = method
        elif payment_method is not None:
            self.payment_method = payment_method
        self.status = new_status

    def cancel(self) -> None:
        if self.status == SaleStatus.CANCELLED:
            raise ValidationError("Sale is already cancelled")
        self.status = SaleStatus.CANCELLED
