"""
Correios Rate Computation Method

Realtime shipping rates from the Correios CalcPrecoPrazo service:
- Validates the inbound request (localized error per missing field)
- One carrier call for all configured service codes
- Per-service validation, markup and extra delivery days
- Falls back to the configured default option when nothing is usable

Never raises to the host's rate aggregation pipeline.
"""
import logging
from decimal import Decimal
from typing import Callable, List, Optional

from correios_shipping.core.config import CorreiosSettings
from correios_shipping.core.currency import CurrencyConverter
from correios_shipping.core.exceptions import CarrierUnavailable, MissingRequestField, ServiceResultError
from correios_shipping.core.localization import Localizer, Messages
from correios_shipping.core.settings_store import SettingsProvider
from correios_shipping.modules.shipping.carriers import register_carrier
from correios_shipping.modules.shipping.carriers.base import (
    BaseRateComputationMethod,
    ComputationMethodType,
    ConfigurationRoute,
)
from correios_shipping.schemas.shipping import (
    ShippingOption,
    ShippingOptionRequest,
    ShippingOptionResponse,
)
from correios_shipping.services.correios_client import CarrierServiceResult, CorreiosClient
from correios_shipping.services.rate_translator import RateTranslator
from correios_shipping.services.tracking import CorreiosShipmentTracker

CORREIOS_SYSTEM_NAME = "Shipping.Correios"

ClientFactory = Callable[[CorreiosSettings, CurrencyConverter], CorreiosClient]


def _is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


@register_carrier(CORREIOS_SYSTEM_NAME)
class CorreiosComputationMethod(BaseRateComputationMethod):
    """
    Correios shipping rate computation method.

    Args:
        settings_provider: Host settings store, read once per request
        localizer: Host localization service
        currency_converter: Host currency conversion (BRL -> store currency)
        logger: Logger for per-request failures (defaults to module logger)
        client_factory: Builds the carrier client for a settings snapshot
    """

    def __init__(
        self,
        settings_provider: SettingsProvider,
        localizer: Localizer,
        currency_converter: CurrencyConverter,
        logger: Optional[logging.Logger] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.settings_provider = settings_provider
        self.localizer = localizer
        self.currency_converter = currency_converter
        self.logger = logger or logging.getLogger(__name__)
        self.client_factory = client_factory or CorreiosClient

    @property
    def computation_method_type(self) -> ComputationMethodType:
        return ComputationMethodType.REALTIME

    def validate_request(
        self,
        request: Optional[ShippingOptionRequest],
        response: ShippingOptionResponse,
    ) -> bool:
        """Add the first missing-field error to the response; items before address fields."""
        try:
            self._check_required_fields(request)
        except MissingRequestField as e:
            self.logger.info(f"Shipping options request rejected: missing {e.field}")
            response.add_error(e.message)
            return False
        return True

    def _check_required_fields(self, request: Optional[ShippingOptionRequest]) -> None:
        if request is None or not request.items:
            raise self._missing("items", Messages.NO_SHIPMENT_ITEMS)
        address = request.shipping_address
        if address is None:
            raise self._missing("shipping_address", Messages.ADDRESS_NOT_SET)
        if _is_blank(address.country):
            raise self._missing("country", Messages.COUNTRY_NOT_SET)
        if _is_blank(address.state_province):
            raise self._missing("state_province", Messages.STATE_NOT_SET)
        if _is_blank(address.zip_postal_code):
            raise self._missing("zip_postal_code", Messages.POSTAL_CODE_NOT_SET)

    def _missing(self, field: str, message_key: str) -> MissingRequestField:
        return MissingRequestField(self.localizer.get_resource(message_key), field=field)

    async def get_shipping_options(
        self,
        request: Optional[ShippingOptionRequest],
    ) -> ShippingOptionResponse:
        response = ShippingOptionResponse()

        if not self.validate_request(request, response):
            return response

        try:
            settings = self.settings_provider.load()
        except Exception as e:
            self.logger.error(f"Correios settings unavailable: {e}", exc_info=True)
            response.add_error(self.localizer.get_resource(Messages.NOT_CONFIGURED))
            return response

        client = self.client_factory(settings, self.currency_converter)
        translator = RateTranslator(settings, self.localizer, client)

        results = await self._request_rates(client, request)
        for result in results:
            try:
                response.shipping_options.append(translator.translate(result))
            except ServiceResultError as e:
                self.logger.error(
                    f"Correios service {e.service_code} skipped: {e.message}",
                    extra={"error": e.to_dict()},
                )
            except Exception as e:
                self.logger.error(f"Correios service {result.code} skipped: {e}", exc_info=True)

        if not response.shipping_options:
            try:
                response.shipping_options.append(self._default_option(settings, translator))
            except Exception as e:
                self.logger.error(f"Correios default shipping option unavailable: {e}", exc_info=True)
                response.add_error(self.localizer.get_resource(Messages.NOT_CONFIGURED))

        return response

    async def _request_rates(
        self,
        client: CorreiosClient,
        request: ShippingOptionRequest,
    ) -> List[CarrierServiceResult]:
        """Carrier results, or an empty list when the carrier call failed."""
        try:
            return await client.request_rates(request)
        except CarrierUnavailable as e:
            self.logger.error(f"Correios unavailable: {e.message}", extra={"error": e.to_dict()})
        except Exception as e:
            self.logger.error(f"Correios request failed: {e}", exc_info=True)
        return []

    def _default_option(self, settings: CorreiosSettings, translator: RateTranslator) -> ShippingOption:
        self.logger.info("No usable Correios quotes, using default shipping option")
        return translator.build_option(
            settings.shipping_rate_default,
            settings.service_name_default,
            settings.days_for_delivery_default,
        )

    def get_fixed_rate(self, request: Optional[ShippingOptionRequest]) -> Optional[Decimal]:
        return None

    @property
    def shipment_tracker(self) -> CorreiosShipmentTracker:
        return CorreiosShipmentTracker(self.settings_provider.load())

    def get_configuration_route(self) -> ConfigurationRoute:
        return ConfigurationRoute(
            action_name="Configure",
            controller_name="ShippingCorreios",
            route_values={"namespaces": "correios_shipping.api.routes", "area": None},
        )
