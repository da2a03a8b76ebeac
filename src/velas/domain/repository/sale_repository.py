"""Abstract repository for Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique sale ID."""

    @abstractmethod
    def get_by_id(self, sale_id: int) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, oldest first."""

    @abstractmethod
    def save(self, sale: Sale) -> None:
        """Persist a new or updated sale."""
