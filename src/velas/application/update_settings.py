"""Application service: Update Settings use case.

A full replace: every field is supplied and validated before anything is
written, so a rejected update leaves the stored settings untouched.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from velas.domain.model.settings import Settings
from velas.domain.model.value_objects import Money, parse_percentage
from velas.domain.repository.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class UpdateSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(
        self,
        low_stock_threshold: int,
        company_name: str,
        birthday_discount_percent: str | Decimal,
        jar_discount_amount: str | Decimal,
        company_phone: str = "",
        company_email: str = "",
        company_address: str = "",
    ) -> Settings:
        settings = Settings(
            low_stock_threshold=low_stock_threshold,
            company_name=company_name.strip(),
            birthday_discount_percent=parse_percentage(
                birthday_discount_percent, "Birthday discount"
            ),
            jar_discount_amount=Money.of(jar_discount_amount),
            company_phone=company_phone.strip(),
            company_email=company_email.strip(),
            company_address=company_address.strip(),
        )
        self._settings_repo.save(settings)
        logger.info(
            "Settings updated: threshold=%d birthday=%s%% jar=%s",
            settings.low_stock_threshold,
            settings.birthday_discount_percent,
            settings.jar_discount_amount,
        )
        return settings
