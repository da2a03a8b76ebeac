"""JSON-file-backed implementation of UnitOfWork.

Snapshots the product and category price documents when the unit of work
starts; rolling back writes the snapshots back. Both file locks are held
for the whole unit so no other writer in the process interleaves.
"""

from __future__ import annotations

import logging
from pathlib import Path

from velas.domain.repository.unit_of_work import UnitOfWork
from velas.infrastructure.persistence.json_category_price_repository import (
    JsonCategoryPriceRepository,
)
from velas.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, products_path: Path, category_prices_path: Path) -> None:
        self.products = JsonProductRepository(products_path)
        self.category_prices = JsonCategoryPriceRepository(category_prices_path)
        self._files = [self.products.file, self.category_prices.file]
        self._snapshots: list[str] | None = None

    def _begin(self) -> None:
        for f in self._files:
            f.lock.acquire()
        self._snapshots = [f.snapshot() for f in self._files]

    def _commit(self) -> None:
        self._release()

    def rollback(self) -> None:
        if self._snapshots is None:
            return
        logger.info("Rolling back uncommitted catalog changes")
        for f, text in zip(self._files, self._snapshots):
            f.restore(text)
        self._release()

    def _release(self) -> None:
        self._snapshots = None
        for f in reversed(self._files):
            f.lock.release()
