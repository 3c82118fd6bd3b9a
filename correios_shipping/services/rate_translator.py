"""
Rate Translator

Turns one CarrierServiceResult into one ShippingOption:
1. Error field check (polarity per ErrorFieldPolicy)
2. Delivery days must parse and be positive
3. Price must parse (pt-BR decimal) and be positive

The first failing check wins; the check order decides which message surfaces.
"""
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Protocol, Tuple

from correios_shipping.core.config import CorreiosSettings, ErrorFieldPolicy
from correios_shipping.core.exceptions import (
    CarrierServiceError,
    InvalidDeliveryEstimate,
    InvalidPrice,
)
from correios_shipping.core.localization import Localizer, Messages
from correios_shipping.schemas.shipping import ShippingOption
from correios_shipping.services.correios_client import CarrierServiceResult
from correios_shipping.services.service_types import CorreiosServiceType, normalize_service_code

logger = logging.getLogger(__name__)

# pt-BR: "." groups thousands, "," separates decimals
BR_DECIMAL_FORMAT = "pt-BR"
_BR_DECIMAL_RE = re.compile(r"^-?(\d{1,3}(\.\d{3})+|\d+)(,\d+)?$")


def parse_br_decimal(value: str) -> Decimal:
    """
    Parse a pt-BR formatted number ("1.234,56", "12,50", "30").

    Independent of the process locale. Raises ValueError on anything else,
    including dot-decimal input such as "12.50".
    """
    if value is None:
        raise ValueError("Empty decimal value")

    text = str(value).strip()
    if not _BR_DECIMAL_RE.match(text):
        raise ValueError(f"Not a {BR_DECIMAL_FORMAT} decimal: {value!r}")

    try:
        return Decimal(text.replace(".", "").replace(",", "."))
    except InvalidOperation as e:
        raise ValueError(f"Not a {BR_DECIMAL_FORMAT} decimal: {value!r}") from e


def format_option_name(service_name: str, days: int) -> str:
    return f"{service_name} - {days} dia(s)"


class StoreCurrencyConverter(Protocol):
    def convert_to_store_currency(self, amount: Decimal) -> Decimal:
        ...


class RateTranslator:
    """Validates carrier results and applies markup, extra days and currency conversion."""

    def __init__(
        self,
        settings: CorreiosSettings,
        localizer: Localizer,
        converter: StoreCurrencyConverter,
    ):
        self.settings = settings
        self.localizer = localizer
        self.converter = converter

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def has_carrier_error(self, result: CarrierServiceResult) -> bool:
        error = (result.error or "").strip()
        if self.settings.error_field_policy == ErrorFieldPolicy.EMPTY_IS_ERROR:
            return not error
        return bool(error) and error not in self.settings.success_error_codes

    def validate(self, result: CarrierServiceResult) -> Tuple[int, Decimal]:
        """
        Validate a carrier result.

        Returns:
            (delivery_days, price) as parsed from the result

        Raises:
            CarrierServiceError, InvalidDeliveryEstimate, InvalidPrice
        """
        if self.has_carrier_error(result):
            raise CarrierServiceError(
                result.error or "",
                result.error_message or "",
                service_code=result.code,
            )

        try:
            days = int(str(result.delivery_days).strip())
        except (TypeError, ValueError):
            days = 0
        if days <= 0:
            raise InvalidDeliveryEstimate(
                self.localizer.get_resource(Messages.DELIVERY_UNINFORMED),
                service_code=result.code,
                details={"delivery_days": result.delivery_days},
            )

        try:
            price = parse_br_decimal(result.price)
        except ValueError:
            price = Decimal("0")
        if price <= 0:
            raise InvalidPrice(
                self.localizer.get_resource(Messages.INVALID_VALUE_DELIVERY),
                service_code=result.code,
                details={"price": result.price},
            )

        return days, price

    # -------------------------------------------------------------------------
    # Adjustments
    # -------------------------------------------------------------------------

    def apply_additional_fee(self, rate: Decimal) -> Decimal:
        fee = self.settings.percentage_shipping_fee
        return rate * fee if fee > 0 else rate

    def calc_delivery_days(self, days: int) -> int:
        if self.settings.add_days_for_delivery > 0:
            days += self.settings.add_days_for_delivery
        return days

    def build_option(
        self,
        rate: Decimal,
        service_name: str,
        days: int,
        service_code: Optional[str] = None,
    ) -> ShippingOption:
        """Option with the rate converted to the store's primary currency."""
        return ShippingOption(
            name=format_option_name(service_name, days),
            rate=self.converter.convert_to_store_currency(rate),
            service_code=service_code,
            delivery_days=days,
        )

    def translate(self, result: CarrierServiceResult) -> ShippingOption:
        days, price = self.validate(result)
        code = normalize_service_code(result.code)
        return self.build_option(
            self.apply_additional_fee(price),
            CorreiosServiceType.get_service_name(code),
            self.calc_delivery_days(days),
            service_code=code,
        )
