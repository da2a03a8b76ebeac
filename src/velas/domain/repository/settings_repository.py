"""Abstract repository for the Settings singleton."""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.model.settings import Settings


class SettingsRepository(ABC):

    @abstractmethod
    def load(self) -> Settings | None:
        """Return the stored settings, or None if never saved."""

    @abstractmethod
    def save(self, settings: Settings) -> None:
        """Replace the stored settings (last write wins)."""
