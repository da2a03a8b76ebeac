"""Application service: Reset Settings use case."""

from __future__ import annotations

import logging

from velas.domain.model.settings import Settings
from velas.domain.repository.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class ResetSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self) -> Settings:
        settings = Settings.default()
        self._settings_repo.save(settings)
        logger.info("Settings reset to defaults")
        return settings
