"""
Pytest configuration and fixtures for Correios shipping tests.
"""
import os
from decimal import Decimal
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "DEBUG"

from correios_shipping.core.config import CorreiosSettings
from correios_shipping.core.currency import FixedRateCurrencyConverter
from correios_shipping.core.localization import ResourceLocalizer
from correios_shipping.core.settings_store import InMemorySettingStore
from correios_shipping.schemas.shipping import (
    ShippingAddress,
    ShippingItem,
    ShippingOptionRequest,
)
from correios_shipping.services.correios_client import CarrierServiceResult, CorreiosClient


@pytest.fixture
def correios_settings() -> CorreiosSettings:
    """Settings row with two services, no markup and no extra days."""
    return CorreiosSettings(
        postal_code_from="01310-100",
        company_code="",
        password="",
        add_days_for_delivery=0,
        service_name_default="Correios Padrao",
        shipping_rate_default=Decimal("25.00"),
        days_for_delivery_default=10,
        percentage_shipping_fee=Decimal("1.0"),
        carrier_services_offered=["04014", "04510"],
    )


@pytest.fixture
def setting_store(correios_settings) -> InMemorySettingStore:
    return InMemorySettingStore(correios_settings)


@pytest.fixture
def localizer() -> ResourceLocalizer:
    return ResourceLocalizer()


@pytest.fixture
def currency_converter() -> FixedRateCurrencyConverter:
    """Store sells in BRL."""
    return FixedRateCurrencyConverter()


@pytest.fixture
def sample_request() -> ShippingOptionRequest:
    """Two-item cart shipped to Rio de Janeiro."""
    return ShippingOptionRequest(
        items=[
            ShippingItem(weight=Decimal("0.5"), length=Decimal("20"), width=Decimal("15"),
                         height=Decimal("3"), quantity=2, unit_price=Decimal("49.90")),
            ShippingItem(weight=Decimal("1.2"), length=Decimal("30"), width=Decimal("10"),
                         height=Decimal("5"), quantity=1, unit_price=Decimal("120.00")),
        ],
        shipping_address=ShippingAddress(
            country="BR",
            state_province="RJ",
            zip_postal_code="20040-002",
            city="Rio de Janeiro",
        ),
    )


@pytest.fixture
def sedex_result() -> CarrierServiceResult:
    return CarrierServiceResult(
        code="04014", error="0", error_message="", price="32,80", delivery_days="2",
    )


@pytest.fixture
def pac_result() -> CarrierServiceResult:
    return CarrierServiceResult(
        code="04510", error="0", error_message="", price="18,45", delivery_days="7",
    )


def make_client_factory(
    results: Optional[List[CarrierServiceResult]] = None,
    side_effect: Optional[BaseException] = None,
):
    """
    Client factory whose clients return canned results instead of calling Correios.

    Built clients are collected on factory.clients for assertions.
    """
    clients = []

    def factory(settings, converter):
        client = CorreiosClient(settings, converter, soap_client=MagicMock())
        client.request_rates = AsyncMock(return_value=results or [], side_effect=side_effect)
        clients.append(client)
        return client

    factory.clients = clients
    return factory


@pytest.fixture
def client_factory():
    """Factory builder, see make_client_factory."""
    return make_client_factory
