"""
Settings providers for the Correios plugin.

The host platform owns settings persistence. The computation method only
needs `load()`; install/uninstall use `save_setting()` / `delete_setting()`.
"""
import logging
from typing import Optional, Protocol

from correios_shipping.core.config import CorreiosSettings, Settings, get_settings

logger = logging.getLogger(__name__)


class SettingsProvider(Protocol):
    """Read access to the plugin settings row."""

    def load(self) -> CorreiosSettings:
        ...


class EnvSettingsProvider:
    """Settings row built from environment variables (CORREIOS_*)."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    def load(self) -> CorreiosSettings:
        settings = self._settings or get_settings()
        return settings.correios_settings()


class InMemorySettingStore:
    """
    Host-style settings store keeping a single CorreiosSettings row.

    load() returns a copy so callers can never mutate the stored row.
    Falls back to defaults when nothing has been saved yet.
    """

    def __init__(self, initial: Optional[CorreiosSettings] = None):
        self._row: Optional[CorreiosSettings] = initial

    @property
    def has_setting(self) -> bool:
        return self._row is not None

    def load(self) -> CorreiosSettings:
        if self._row is None:
            return CorreiosSettings()
        return self._row.model_copy(deep=True)

    def save_setting(self, settings: CorreiosSettings) -> None:
        logger.info("Saving Correios settings row")
        self._row = settings.model_copy(deep=True)

    def delete_setting(self) -> None:
        logger.info("Deleting Correios settings row")
        self._row = None
