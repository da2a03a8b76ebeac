"""Application service: Apply Category Price use case.

Bulk-sets a price on all current members of a category, independently of
any category price record. Safe to repeat.
"""

from __future__ import annotations

from velas.domain.exceptions import EntityNotFoundError
from velas.domain.model.value_objects import Money
from velas.domain.repository.unit_of_work import UnitOfWork
from velas.domain.service.category_price_ledger import CategoryPriceLedger


class ApplyCategoryPriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._ledger = CategoryPriceLedger(uow)

    def handle(self, category_name: str, price: str | None = None) -> int:
        """Apply *price* (or the category's recorded price) to its products.

        Returns the number of products updated.
        """
        if price is not None:
            return self._ledger.apply_to_products(category_name, Money.of(price))

        record = self._ledger.find_by_name(category_name)
        if record is None:
            raise EntityNotFoundError(f"No price recorded for category '{category_name}'")
        return self._ledger.apply_to_products(record.category_name, record.price)
