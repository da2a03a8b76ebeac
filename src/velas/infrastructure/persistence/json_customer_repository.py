"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

from velas.domain.model.customer import Customer
from velas.domain.repository.customer_repository import CustomerRepository
from velas.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.read():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def next_id(self) -> str:
        records = self._file.read()
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def save(self, customer: Customer) -> None:
        with self._file.lock:
            records = self._file.read()
            for i, raw in enumerate(records):
                if raw["id"] == customer.id:
                    records[i] = self._to_raw(customer)
                    break
            else:
                records.append(self._to_raw(customer))
            self._file.write(records)

    def compare_and_set_credits(
        self, customer_id: str, expected: int, new_balance: int
    ) -> bool:
        with self._file.lock:
            records = self._file.read()
            for raw in records:
                if raw["id"] == customer_id:
                    if raw.get("jar_credits", 0) != expected:
                        return False
                    raw["jar_credits"] = new_balance
                    self._file.write(records)
                    return True
        return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "birth_date": customer.birth_date.isoformat() if customer.birth_date else None,
            "jar_credits": customer.jar_credits,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        birth_date = raw.get("birth_date")
        return Customer(
            id=raw["id"],
            name=raw["name"],
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
            birth_date=date.fromisoformat(birth_date) if birth_date else None,
            jar_credits=raw.get("jar_credits", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
