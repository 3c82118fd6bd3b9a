"""
Standalone FastAPI app exposing the Correios shipping routes.

Inside a host platform the host wires the router and its own collaborators;
create_app() does the same with local defaults.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from correios_shipping import __version__
from correios_shipping.api.routes import shipping
from correios_shipping.core.config import get_settings
from correios_shipping.core.currency import CurrencyConverter, FixedRateCurrencyConverter
from correios_shipping.core.localization import Localizer, ResourceLocalizer
from correios_shipping.core.logging_config import configure_logging
from correios_shipping.core.settings_store import EnvSettingsProvider, SettingsProvider

logger = logging.getLogger(__name__)


def create_app(
    settings_provider: Optional[SettingsProvider] = None,
    localizer: Optional[Localizer] = None,
    currency_converter: Optional[CurrencyConverter] = None,
) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Correios shipping rates and tracking links.",
        version=__version__,
        debug=settings.DEBUG,
    )

    app.state.settings_provider = settings_provider or EnvSettingsProvider(settings)
    app.state.localizer = localizer or ResourceLocalizer()
    app.state.currency_converter = currency_converter or FixedRateCurrencyConverter()

    app.include_router(shipping.router, prefix="/api", tags=["Shipping"])

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    logger.info(f"{settings.APP_NAME} started (environment={settings.ENVIRONMENT})")
    return app
