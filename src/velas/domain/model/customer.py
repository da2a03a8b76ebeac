"""Customer aggregate (only the fields the pricing policy cares about)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from velas.domain.exceptions import NegativeBalanceError, ValidationError


@dataclass
class Customer:
    """A shop customer.

    Invariants:
    - ``jar_credits`` is never negative

    ``jar_credits`` is only changed through the credit ledger; see
    ``CustomerCreditLedger.adjust_credits``.
    """

    id: str
    name: str
    jar_credits: int = 0
    birth_date: date | None = None
    email: str = ""
    phone: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")
        if self.jar_credits < 0:
            raise ValidationError("Jar credits cannot be negative")

    def is_birthday_month(self, today: date) -> bool:
        if self.birth_date is None:
            return False
        return self.birth_date.month == today.month

    def credits_after(self, delta: int) -> int:
        """Return the balance an adjustment of *delta* would produce."""
        balance = self.jar_credits + delta
        if balance < 0:
            raise NegativeBalanceError(
                f"Customer '{self.name}' has {self.jar_credits} jar credit(s); "
                f"cannot apply {delta}"
            )
        return balance
