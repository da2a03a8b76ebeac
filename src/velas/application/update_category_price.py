"""Application service: Update Category Price use case.

Renames and/or reprices a category price record, then propagates the new
price to every product still tagged with the record's previous name.
Existing sales are never touched: they captured their prices at sale time.
"""

from __future__ import annotations

from dataclasses import dataclass

from velas.domain.model.value_objects import Money
from velas.domain.repository.unit_of_work import UnitOfWork
from velas.domain.service.category_price_ledger import CategoryPriceLedger


@dataclass(frozen=True)
class PropagationPreviewDTO:
    category_name: str
    product_names: list[str]

    @property
    def count(self) -> int:
        return len(self.product_names)


class UpdateCategoryPriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._ledger = CategoryPriceLedger(uow)

    def preview(self, category_price_id: str) -> PropagationPreviewDTO:
        """List the products an update of this record would reprice."""
        record = self._ledger.get(category_price_id)
        products = self._ledger.preview_affected_products(record.category_name)
        return PropagationPreviewDTO(
            category_name=record.category_name,
            product_names=[p.name for p in products],
        )

    def handle(self, category_price_id: str, category_name: str, price: str) -> int:
        """Return the number of products repriced."""
        return self._ledger.update(category_price_id, category_name, Money.of(price))
