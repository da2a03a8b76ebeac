"""Application service: Delete Category Price use case."""

from __future__ import annotations

from velas.domain.repository.unit_of_work import UnitOfWork
from velas.domain.service.category_price_ledger import CategoryPriceLedger


class DeleteCategoryPriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._ledger = CategoryPriceLedger(uow)

    def handle(self, category_price_id: str) -> None:
        """Remove the record only; products keep their current prices."""
        self._ledger.delete(category_price_id)
