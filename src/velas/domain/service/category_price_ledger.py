"""Domain service: Category Price Ledger.

Keeps one standard price per product category and pushes it to the
products of that category. Products reference their category by name
(a plain string), so propagation matches names case-insensitively; there
is no foreign key and renaming a category does not re-tag products.

Every write happens inside a unit of work: a failure half-way through a
propagation rolls back the record change, the product prices and their
history entries together.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from velas.domain.exceptions import DuplicateCategoryError, EntityNotFoundError
from velas.domain.model.category_price import CategoryPrice
from velas.domain.model.product import Product, category_update_reason
from velas.domain.model.value_objects import Money
from velas.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CategoryPriceLedger:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    # --- Queries --------------------------------------------------------------

    def find_by_name(self, category_name: str) -> CategoryPrice | None:
        return self._uow.category_prices.find_by_name(category_name)

    def get(self, category_price_id: str) -> CategoryPrice:
        record = self._uow.category_prices.get_by_id(category_price_id)
        if record is None:
            raise EntityNotFoundError(f"Category price '{category_price_id}' not found")
        return record

    def list_all(self) -> list[CategoryPrice]:
        return sorted(
            self._uow.category_prices.list_all(),
            key=lambda record: record.category_name.lower(),
        )

    def preview_affected_products(self, category_name: str) -> list[Product]:
        """Products a propagation for *category_name* would reprice."""
        return self._uow.products.list_by_category(category_name)

    # --- Commands -------------------------------------------------------------

    def create(self, category_name: str, price: Money) -> CategoryPrice:
        record = CategoryPrice.create(category_name, price)
        with self._uow:
            self._assert_unique(record.category_name)
            self._uow.category_prices.save(record)
            self._uow.commit()
        logger.info("Category price created: %s = %s", record.category_name, price)
        return record

    def update(self, category_price_id: str, category_name: str, price: Money) -> int:
        """Rename/reprice a record and propagate the price to its products.

        Products are matched against the *previous* name. Returns the
        number of products repriced.
        """
        with self._uow:
            record = self.get(category_price_id)
            self._assert_unique(category_name, exclude_id=record.id)
            previous_name = record.rename_and_reprice(category_name, price)
            self._uow.category_prices.save(record)
            updated = self._propagate(previous_name, price)
            self._uow.commit()
        logger.info(
            "Category price updated: %s -> %s at %s (%d product(s) repriced)",
            previous_name,
            record.category_name,
            price,
            updated,
        )
        return updated

    def delete(self, category_price_id: str) -> None:
        """Remove the policy record; product prices are left as they are."""
        with self._uow:
            record = self.get(category_price_id)
            self._uow.category_prices.delete(category_price_id)
            self._uow.commit()
        logger.info("Category price deleted: %s", record.category_name)

    def apply_to_products(self, category_name: str, price: Money) -> int:
        """Set *price* on every current member of *category_name*.

        Idempotent on prices; each call appends one history entry per product.
        """
        with self._uow:
            updated = self._propagate(category_name, price)
            self._uow.commit()
        logger.info(
            "Applied %s to category %s (%d product(s))", price, category_name, updated
        )
        return updated

    # --- Internal helpers -----------------------------------------------------

    def _propagate(self, category_name: str, price: Money) -> int:
        reason = category_update_reason(category_name)
        now = datetime.now(timezone.utc)
        products = self._uow.products.list_by_category(category_name)
        for product in products:
            product.change_price(price, reason=reason, at=now)
            self._uow.products.save(product)
        return len(products)

    def _assert_unique(self, category_name: str, exclude_id: str | None = None) -> None:
        existing = self._uow.category_prices.find_by_name(category_name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateCategoryError(
                f"A price for category '{existing.category_name}' already exists"
            )
