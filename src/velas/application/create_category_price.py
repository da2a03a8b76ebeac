"""Application service: Create Category Price use case."""

from __future__ import annotations

from velas.domain.model.category_price import CategoryPrice
from velas.domain.model.value_objects import Money
from velas.domain.repository.unit_of_work import UnitOfWork
from velas.domain.service.category_price_ledger import CategoryPriceLedger


class CreateCategoryPriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._ledger = CategoryPriceLedger(uow)

    def handle(self, category_name: str, price: str) -> CategoryPrice:
        """Define the standard price of a category.

        Existing products are not repriced; use the apply use case for that.
        """
        return self._ledger.create(category_name, Money.of(price))
