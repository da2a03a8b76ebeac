"""Application service: List Category Prices use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from velas.domain.exceptions import EntityNotFoundError
from velas.domain.model.category_price import CategoryPrice
from velas.domain.repository.unit_of_work import UnitOfWork
from velas.domain.service.category_price_ledger import CategoryPriceLedger


@dataclass(frozen=True)
class CategoryPriceDTO:
    id: str
    category_name: str
    price: str
    updated_at: str


class ListCategoryPricesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._ledger = CategoryPriceLedger(uow)

    def handle(self) -> list[CategoryPriceDTO]:
        return [self._to_dto(record) for record in self._ledger.list_all()]

    def find_by_name(self, category_name: str) -> CategoryPriceDTO:
        record = self._ledger.find_by_name(category_name)
        if record is None:
            raise EntityNotFoundError(f"No price recorded for category '{category_name}'")
        return self._to_dto(record)

    @staticmethod
    def _to_dto(record: CategoryPrice) -> CategoryPriceDTO:
        return CategoryPriceDTO(
            id=record.id,  # type: ignore[arg-type]
            category_name=record.category_name,
            price=str(record.price),
            updated_at=record.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
