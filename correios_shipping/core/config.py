"""
Application configuration

Two layers:
- Settings: process environment / .env, read once (pydantic-settings)
- CorreiosSettings: the plugin's settings row, owned by the host settings store
  and loaded once per rate request through a SettingsProvider
"""
import logging
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import List, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CORREIOS_URL = "http://ws.correios.com.br/calculador/CalcPrecoPrazo.asmx"
DEFAULT_TRACKING_URL_TEMPLATE = (
    "https://rastreamento.correios.com.br/app/index.php?objetos={tracking_number}"
)


class ErrorFieldPolicy(str, Enum):
    """How the carrier's per-service error field is interpreted."""
    # A non-empty error field (other than a success code) is an error
    NON_EMPTY_IS_ERROR = "non_empty_is_error"
    # Legacy plugin behavior: an empty error field is an error
    EMPTY_IS_ERROR = "empty_is_error"


def _split_codes(v: Union[str, List[str], None]) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [code.strip() for code in v.split(",") if code.strip()]
    return [str(code).strip() for code in v if str(code).strip()]


class CorreiosSettings(BaseModel):
    """Correios plugin settings row."""
    url: str = DEFAULT_CORREIOS_URL
    postal_code_from: str = ""
    company_code: str = ""
    password: str = ""
    add_days_for_delivery: int = Field(0, ge=0)
    service_name_default: str = ""
    shipping_rate_default: Decimal = Decimal("0")
    days_for_delivery_default: int = 0
    percentage_shipping_fee: Decimal = Decimal("1.0")
    carrier_services_offered: List[str] = Field(default_factory=list)
    tracking_url_template: str = DEFAULT_TRACKING_URL_TEMPLATE
    request_timeout_seconds: float = Field(30.0, gt=0)
    error_field_policy: ErrorFieldPolicy = ErrorFieldPolicy.NON_EMPTY_IS_ERROR
    # Carrier reports "0" in the error field when the quote succeeded
    success_error_codes: List[str] = Field(default_factory=lambda: ["0"])

    @field_validator("carrier_services_offered", "success_error_codes", mode="before")
    @classmethod
    def parse_code_list(cls, v):
        return _split_codes(v)

    def masked(self) -> "CorreiosSettings":
        """Copy with credentials hidden, for admin display."""
        return self.model_copy(update={"password": "***" if self.password else ""})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App
    APP_NAME: str = "Correios Shipping"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Correios plugin defaults (seed the settings row on install)
    CORREIOS_URL: str = DEFAULT_CORREIOS_URL
    CORREIOS_POSTAL_CODE_FROM: str = ""
    CORREIOS_COMPANY_CODE: str = ""
    CORREIOS_PASSWORD: str = ""
    CORREIOS_ADD_DAYS_FOR_DELIVERY: int = 0
    CORREIOS_SERVICE_NAME_DEFAULT: str = ""
    CORREIOS_SHIPPING_RATE_DEFAULT: Decimal = Decimal("0")
    CORREIOS_DAYS_FOR_DELIVERY_DEFAULT: int = 0
    CORREIOS_PERCENTAGE_SHIPPING_FEE: Decimal = Decimal("1.0")
    # Comma-separated, e.g. "04014,04510"
    CORREIOS_CARRIER_SERVICES_OFFERED: str = ""
    CORREIOS_TRACKING_URL_TEMPLATE: str = DEFAULT_TRACKING_URL_TEMPLATE
    CORREIOS_REQUEST_TIMEOUT_SECONDS: float = 30.0
    CORREIOS_ERROR_FIELD_POLICY: ErrorFieldPolicy = ErrorFieldPolicy.NON_EMPTY_IS_ERROR
    CORREIOS_SUCCESS_ERROR_CODES: str = "0"

    def correios_settings(self) -> CorreiosSettings:
        """Build the plugin settings row from environment values."""
        return CorreiosSettings(
            url=self.CORREIOS_URL,
            postal_code_from=self.CORREIOS_POSTAL_CODE_FROM,
            company_code=self.CORREIOS_COMPANY_CODE,
            password=self.CORREIOS_PASSWORD,
            add_days_for_delivery=self.CORREIOS_ADD_DAYS_FOR_DELIVERY,
            service_name_default=self.CORREIOS_SERVICE_NAME_DEFAULT,
            shipping_rate_default=self.CORREIOS_SHIPPING_RATE_DEFAULT,
            days_for_delivery_default=self.CORREIOS_DAYS_FOR_DELIVERY_DEFAULT,
            percentage_shipping_fee=self.CORREIOS_PERCENTAGE_SHIPPING_FEE,
            carrier_services_offered=self.CORREIOS_CARRIER_SERVICES_OFFERED,
            tracking_url_template=self.CORREIOS_TRACKING_URL_TEMPLATE,
            request_timeout_seconds=self.CORREIOS_REQUEST_TIMEOUT_SECONDS,
            error_field_policy=self.CORREIOS_ERROR_FIELD_POLICY,
            success_error_codes=self.CORREIOS_SUCCESS_ERROR_CODES,
        )


@lru_cache()
def get_settings() -> Settings:
    """Cached application settings."""
    return Settings()
