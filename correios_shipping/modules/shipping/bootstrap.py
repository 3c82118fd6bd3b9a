"""
Plugin install/uninstall.

Install saves the default settings row and registers the locale resources;
uninstall removes both. Nothing else is persisted by the plugin.
"""
import logging
from decimal import Decimal
from typing import Protocol

from correios_shipping.core.config import CorreiosSettings, DEFAULT_CORREIOS_URL
from correios_shipping.core.localization import LOCALE_RESOURCES

logger = logging.getLogger(__name__)


class SettingStore(Protocol):
    def save_setting(self, settings: CorreiosSettings) -> None:
        ...

    def delete_setting(self) -> None:
        ...


class LocaleResourceStore(Protocol):
    def add_or_update(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


def default_settings() -> CorreiosSettings:
    """Settings row written on install."""
    return CorreiosSettings(
        url=DEFAULT_CORREIOS_URL,
        postal_code_from="",
        company_code="",
        password="",
        add_days_for_delivery=0,
        percentage_shipping_fee=Decimal("1.0"),
    )


def install(setting_store: SettingStore, locale_store: LocaleResourceStore) -> None:
    setting_store.save_setting(default_settings())
    for key, value in LOCALE_RESOURCES.items():
        locale_store.add_or_update(key, value)
    logger.info(f"Correios plugin installed ({len(LOCALE_RESOURCES)} locale resources)")


def uninstall(setting_store: SettingStore, locale_store: LocaleResourceStore) -> None:
    setting_store.delete_setting()
    for key in LOCALE_RESOURCES:
        locale_store.delete(key)
    logger.info("Correios plugin uninstalled")
