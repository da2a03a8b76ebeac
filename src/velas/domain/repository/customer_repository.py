"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique customer ID."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer (jar credits included)."""

    @abstractmethod
    def compare_and_set_credits(
        self, customer_id: str, expected: int, new_balance: int
    ) -> bool:
        """Atomically set jar credits to *new_balance* if they still equal *expected*.

        Returns False when the stored balance changed in the meantime.
        """
