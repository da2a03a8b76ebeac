"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from velas.domain.exceptions import ValidationError

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


@dataclass(frozen=True, order=True)
class Money:
    """An amount in reais (R$).

    The shop sells in a single currency, so only the Decimal amount is
    kept. Amounts are never negative: discounts are subtracted through
    ``__sub__``, which refuses to go below zero.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        if other.amount > self.amount:
            raise ValidationError(
                f"Cannot take {other} from {self}: the result would be a negative amount"
            )
        return Money(self.amount - other.amount)

    def __mul__(self, units: int) -> Money:
        if not isinstance(units, int) or isinstance(units, bool):
            raise TypeError(f"Money can only be multiplied by a unit count, got {units!r}")
        return Money(self.amount * units)

    def percent(self, percentage: Decimal) -> Money:
        """*percentage* % of this amount, rounded half-up to whole cents."""
        share = self.amount * percentage / HUNDRED
        return Money(share.quantize(CENTS, rounding=ROUND_HALF_UP))

    @property
    def is_zero(self) -> bool:
        return not self.amount

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build from user input ("32.90", 5, ...) without float noise."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


@dataclass(frozen=True)
class Quantity:
    """How many units of a product a sale line carries; always positive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


def parse_percentage(value: str | float | int | Decimal, label: str) -> Decimal:
    """Coerce *value* to a Decimal percentage within [0, 100]."""
    try:
        percentage = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not percentage.is_finite() or percentage < 0 or percentage > 100:
        raise ValidationError(f"{label} must be between 0 and 100, got {value}")
    return percentage
