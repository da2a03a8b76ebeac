"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from velas.domain.model.product import PriceHistoryEntry, Product
from velas.domain.model.value_objects import Money
from velas.domain.repository.product_repository import ProductRepository
from velas.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    @property
    def file(self) -> JsonFile:
        return self._file

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list_by_category(self, category_name: str) -> list[Product]:
        return [
            p for p in self._load().values() if p.belongs_to(category_name)
        ]

    def next_id(self) -> str:
        products = self._load()
        if not products:
            return "1"
        return str(max(int(pid) for pid in products) + 1)

    def save(self, product: Product) -> None:
        with self._file.lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {item["id"]: self._to_domain(item) for item in self._file.read()}

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.write([self._to_raw(p) for p in products.values()])

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "category": product.category,
            "quantity": product.quantity,
            "price_history": [
                {
                    "price": str(entry.price.amount),
                    "date": entry.date.isoformat(),
                    "reason": entry.reason,
                }
                for entry in product.price_history
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            category=raw.get("category"),
            quantity=raw.get("quantity", 0),
            price_history=[
                PriceHistoryEntry(
                    price=Money(Decimal(entry["price"])),
                    date=datetime.fromisoformat(entry["date"]),
                    reason=entry["reason"],
                )
                for entry in raw.get("price_history", [])
            ],
        )
