"""Application service: Low Stock report (query)."""

from __future__ import annotations

from dataclasses import dataclass

from velas.application.get_settings import GetSettingsHandler
from velas.domain.repository.product_repository import ProductRepository
from velas.domain.repository.settings_repository import SettingsRepository


@dataclass(frozen=True)
class LowStockLineDTO:
    product_name: str
    category: str
    quantity: int
    threshold: int


class ListLowStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        settings_repo: SettingsRepository,
    ) -> None:
        self._product_repo = product_repo
        self._settings_repo = settings_repo

    def handle(self) -> list[LowStockLineDTO]:
        threshold = GetSettingsHandler(self._settings_repo).handle().low_stock_threshold
        return [
            LowStockLineDTO(
                product_name=p.name,
                category=p.category or "",
                quantity=p.quantity,
                threshold=threshold,
            )
            for p in sorted(self._product_repo.list_all(), key=lambda p: p.quantity)
            if p.is_low_stock(threshold)
        ]
