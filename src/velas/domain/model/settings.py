"""Settings — process-wide policy parameters.

A singleton configuration edited by one operator at a time. It is loaded
explicitly and handed to the pricing engine as a parameter; nothing in the
domain reads it from ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from velas.domain.exceptions import ValidationError
from velas.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 10
DEFAULT_COMPANY_NAME = "Velas Aromáticas"


@dataclass(frozen=True)
class Settings:
    """Global pricing and store parameters.

    Invariants:
    - ``low_stock_threshold`` >= 1
    - ``birthday_discount_percent`` within [0, 100]
    - ``jar_discount_amount`` >= 0 (guaranteed by Money)
    """

    low_stock_threshold: int
    company_name: str
    birthday_discount_percent: Decimal
    jar_discount_amount: Money
    company_phone: str = ""
    company_email: str = ""
    company_address: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.low_stock_threshold, bool) or not isinstance(
            self.low_stock_threshold, int
        ):
            raise ValidationError("Low stock threshold must be an integer")
        if self.low_stock_threshold < 1:
            raise ValidationError(
                f"Low stock threshold must be at least 1, got {self.low_stock_threshold}"
            )
        if not isinstance(self.birthday_discount_percent, Decimal):
            raise ValidationError("Birthday discount must be a Decimal percentage")
        if not Decimal("0") <= self.birthday_discount_percent <= Decimal("100"):
            raise ValidationError(
                "Birthday discount must be between 0 and 100, "
                f"got {self.birthday_discount_percent}"
            )
        if not isinstance(self.jar_discount_amount, Money):
            raise ValidationError("Jar discount must be a Money amount")

    @staticmethod
    def default() -> Settings:
        return Settings(
            low_stock_threshold=DEFAULT_LOW_STOCK_THRESHOLD,
            company_name=DEFAULT_COMPANY_NAME,
            birthday_discount_percent=Decimal("0"),
            jar_discount_amount=Money.zero(),
        )
