"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory defaults to ``<project root>/data``; the
``VELAS_DATA_DIR`` environment variable or ``use_data_dir()`` (the CLI's
``--data-dir`` option) override it.
"""

from __future__ import annotations

import os
from pathlib import Path

from velas.infrastructure.persistence.json_category_price_repository import (
    JsonCategoryPriceRepository,
)
from velas.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from velas.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from velas.infrastructure.persistence.json_sale_repository import JsonSaleRepository
from velas.infrastructure.persistence.json_settings_repository import (
    JsonSettingsRepository,
)
from velas.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "VELAS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_data_dir_override: Path | None = None


def use_data_dir(path: Path | None) -> None:
    global _data_dir_override
    _data_dir_override = path


def data_dir() -> Path:
    if _data_dir_override is not None:
        return _data_dir_override
    env = os.environ.get(DATA_DIR_ENV)
    return Path(env) if env else _DEFAULT_DATA_DIR


def settings_repository() -> JsonSettingsRepository:
    return JsonSettingsRepository(data_dir() / "settings.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def category_price_repository() -> JsonCategoryPriceRepository:
    return JsonCategoryPriceRepository(data_dir() / "category_prices.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir() / "customers.json")


def sale_repository() -> JsonSaleRepository:
    return JsonSaleRepository(data_dir() / "sales.json")


def catalog_unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(
        products_path=data_dir() / "products.json",
        category_prices_path=data_dir() / "category_prices.json",
    )
