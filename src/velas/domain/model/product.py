"""Product aggregate.

Products live independently of sales. Their price changes over time,
either manually or by category price propagation, and every change is
recorded in an append-only price history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from velas.domain.exceptions import ValidationError
from velas.domain.model.value_objects import Money

MANUAL_ADJUSTMENT_REASON = "manual adjustment"


def category_update_reason(category_name: str) -> str:
    return f"category update: {category_name}"


def same_category(left: str | None, right: str | None) -> bool:
    """Case-insensitive category match; products are linked by name only."""
    if left is None or right is None:
        return False
    return left.strip().lower() == right.strip().lower()


@dataclass(frozen=True)
class PriceHistoryEntry:
    price: Money
    date: datetime
    reason: str


@dataclass
class Product:
    """A product in the catalog.

    ``category`` is a denormalized string. Renaming a category price record
    does not reclassify products; they keep matching the old name.
    """

    id: str
    name: str
    price: Money
    category: str | None = None
    quantity: int = 0
    price_history: list[PriceHistoryEntry] = field(default_factory=list)

    def change_price(
        self,
        new_price: Money,
        reason: str = MANUAL_ADJUSTMENT_REASON,
        at: datetime | None = None,
    ) -> None:
        """Set a new price and append exactly one history entry.

        This does NOT affect any existing sales because sales capture a
        price snapshot at creation time.
        """
        if not reason or not reason.strip():
            raise ValidationError("A price change needs a reason")
        self.price = new_price
        self.price_history.append(
            PriceHistoryEntry(
                price=new_price,
                date=at or datetime.now(timezone.utc),
                reason=reason,
            )
        )

    def belongs_to(self, category_name: str) -> bool:
        return same_category(self.category, category_name)

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity < threshold
