"""JSON-file-backed implementation of CategoryPriceRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from velas.domain.model.category_price import CategoryPrice
from velas.domain.model.value_objects import Money
from velas.domain.repository.category_price_repository import CategoryPriceRepository
from velas.infrastructure.persistence.json_file import JsonFile


class JsonCategoryPriceRepository(CategoryPriceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    @property
    def file(self) -> JsonFile:
        return self._file

    # --- CategoryPriceRepository interface ------------------------------------

    def get_by_id(self, category_price_id: str) -> CategoryPrice | None:
        for raw in self._file.read():
            if raw["id"] == category_price_id:
                return self._to_domain(raw)
        return None

    def find_by_name(self, category_name: str) -> CategoryPrice | None:
        for record in self.list_all():
            if record.matches(category_name):
                return record
        return None

    def list_all(self) -> list[CategoryPrice]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, category_price: CategoryPrice) -> None:
        with self._file.lock:
            records = self._file.read()
            if category_price.id is None:
                category_price.id = self._next_id(records)

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(records):
                if raw["id"] == category_price.id:
                    records[i] = self._to_raw(category_price)
                    break
            else:
                records.append(self._to_raw(category_price))
            self._file.write(records)

    def delete(self, category_price_id: str) -> None:
        with self._file.lock:
            records = self._file.read()
            self._file.write([r for r in records if r["id"] != category_price_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> str:
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    @staticmethod
    def _to_raw(record: CategoryPrice) -> dict:
        return {
            "id": record.id,
            "category_name": record.category_name,
            "price": str(record.price.amount),
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CategoryPrice:
        return CategoryPrice(
            id=raw["id"],
            category_name=raw["category_name"],
            price=Money(Decimal(raw["price"])),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
