"""JSON-file-backed implementation of SettingsRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from velas.domain.model.settings import Settings
from velas.domain.model.value_objects import Money
from velas.domain.repository.settings_repository import SettingsRepository
from velas.infrastructure.persistence.json_file import JsonFile


class JsonSettingsRepository(SettingsRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={})

    def load(self) -> Settings | None:
        raw = self._file.read()
        if not raw:
            return None
        return Settings(
            low_stock_threshold=raw["low_stock_threshold"],
            company_name=raw["company_name"],
            birthday_discount_percent=Decimal(raw["birthday_discount_percent"]),
            jar_discount_amount=Money(Decimal(raw["jar_discount_amount"])),
            company_phone=raw.get("company_phone", ""),
            company_email=raw.get("company_email", ""),
            company_address=raw.get("company_address", ""),
        )

    def save(self, settings: Settings) -> None:
        with self._file.lock:
            self._file.write(
                {
                    "low_stock_threshold": settings.low_stock_threshold,
                    "company_name": settings.company_name,
                    "company_phone": settings.company_phone,
                    "company_email": settings.company_email,
                    "company_address": settings.company_address,
                    "birthday_discount_percent": str(settings.birthday_discount_percent),
                    "jar_discount_amount": str(settings.jar_discount_amount.amount),
                }
            )
