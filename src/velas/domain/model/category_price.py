"""CategoryPrice — the standard price of a product category."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from velas.domain.exceptions import ValidationError
from velas.domain.model.product import same_category
from velas.domain.model.value_objects import Money


@dataclass
class CategoryPrice:
    """A policy record: "products of this category cost this much".

    Deleting the record only removes the policy; product prices that were
    already propagated stay as they are.
    """

    id: str | None
    category_name: str
    price: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(category_name: str, price: Money) -> CategoryPrice:
        return CategoryPrice(
            id=None,
            category_name=_clean_name(category_name),
            price=price,
        )

    def rename_and_reprice(self, category_name: str, price: Money) -> str:
        """Apply new values and return the previous category name."""
        previous = self.category_name
        self.category_name = _clean_name(category_name)
        self.price = price
        self.updated_at = datetime.now(timezone.utc)
        return previous

    def matches(self, category_name: str) -> bool:
        return same_category(self.category_name, category_name)


def _clean_name(category_name: str) -> str:
    if not category_name or not category_name.strip():
        raise ValidationError("Category name is required")
    return category_name.strip()
