"""Application service: customer listings (queries)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from velas.domain.model.customer import Customer
from velas.domain.repository.customer_repository import CustomerRepository


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    birth_date: str
    jar_credits: int


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return self._to_dtos(self._customer_repo.list_all())

    def birthday_month(self, today: date) -> list[CustomerDTO]:
        """Customers entitled to the birthday discount this month."""
        return self._to_dtos(
            c for c in self._customer_repo.list_all() if c.is_birthday_month(today)
        )

    def with_jar_credits(self) -> list[CustomerDTO]:
        return self._to_dtos(
            c for c in self._customer_repo.list_all() if c.jar_credits > 0
        )

    @staticmethod
    def _to_dtos(customers) -> list[CustomerDTO]:
        return [
            CustomerDTO(
                id=c.id,
                name=c.name,
                birth_date=c.birth_date.isoformat() if c.birth_date else "",
                jar_credits=c.jar_credits,
            )
            for c in sorted(customers, key=lambda c: c.name.lower())
        ]
