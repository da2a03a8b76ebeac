"""Abstract repository for CategoryPrice records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.model.category_price import CategoryPrice


class CategoryPriceRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_price_id: str) -> CategoryPrice | None:
        """Return a record by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, category_name: str) -> CategoryPrice | None:
        """Return the record whose name matches case-insensitively, or None."""

    @abstractmethod
    def list_all(self) -> list[CategoryPrice]:
        """Return every category price."""

    @abstractmethod
    def save(self, category_price: CategoryPrice) -> None:
        """Persist a new or updated record; assigns an ID to new ones."""

    @abstractmethod
    def delete(self, category_price_id: str) -> None:
        """Remove a record. Removing an unknown ID is a no-op."""
