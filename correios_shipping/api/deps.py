"""
API dependencies

Collaborators live on app.state, set up by create_app().
"""
from fastapi import Depends, Request

from correios_shipping.core.currency import CurrencyConverter
from correios_shipping.core.localization import Localizer
from correios_shipping.core.settings_store import SettingsProvider
from correios_shipping.modules.shipping import CORREIOS_SYSTEM_NAME, get_carrier
from correios_shipping.modules.shipping.carriers.correios import CorreiosComputationMethod


def get_settings_provider(request: Request) -> SettingsProvider:
    return request.app.state.settings_provider


def get_localizer(request: Request) -> Localizer:
    return request.app.state.localizer


def get_currency_converter(request: Request) -> CurrencyConverter:
    return request.app.state.currency_converter


def get_computation_method(
    settings_provider: SettingsProvider = Depends(get_settings_provider),
    localizer: Localizer = Depends(get_localizer),
    currency_converter: CurrencyConverter = Depends(get_currency_converter),
) -> CorreiosComputationMethod:
    """Correios computation method for this request"""
    return get_carrier(
        CORREIOS_SYSTEM_NAME,
        settings_provider=settings_provider,
        localizer=localizer,
        currency_converter=currency_converter,
    )
