"""Abstract unit of work for multi-record writes.

Category price propagation touches the category price record and many
products at once. It runs inside a unit of work so that either every
write lands or none does::

    with uow:
        ...
        uow.commit()

Leaving the block without ``commit()`` (or because of an exception)
rolls everything back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.repository.category_price_repository import CategoryPriceRepository
from velas.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    category_prices: CategoryPriceRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._committed:
            self.rollback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def _begin(self) -> None:
        """Start tracking changes."""

    @abstractmethod
    def _commit(self) -> None:
        """Make tracked changes durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since ``_begin``."""
