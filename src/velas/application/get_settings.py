"""Application service: Get Settings use case (query)."""

from __future__ import annotations

import logging

from velas.domain.model.settings import Settings
from velas.domain.repository.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class GetSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self) -> Settings:
        """Return the current settings, creating the defaults on first use.

        Always reads the store; policy values are never cached between
        requests.
        """
        settings = self._settings_repo.load()
        if settings is None:
            logger.info("No settings stored yet; saving defaults")
            settings = Settings.default()
            self._settings_repo.save(settings)
        return settings
