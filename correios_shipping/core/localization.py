"""
Localization for the Correios plugin.

Resource keys follow the host convention `Plugins.Shipping.Correios.*`.
LOCALE_RESOURCES is the set registered on install and removed on uninstall.
"""
import logging
from typing import Dict, Iterable, Optional, Protocol

logger = logging.getLogger(__name__)

RESOURCE_PREFIX = "Plugins.Shipping.Correios"


class Messages:
    """Resource keys for user-facing messages."""
    NO_SHIPMENT_ITEMS = f"{RESOURCE_PREFIX}.Message.NoShipmentItems"
    ADDRESS_NOT_SET = f"{RESOURCE_PREFIX}.Message.AddressNotSet"
    COUNTRY_NOT_SET = f"{RESOURCE_PREFIX}.Message.CountryNotSet"
    STATE_NOT_SET = f"{RESOURCE_PREFIX}.Message.StateNotSet"
    POSTAL_CODE_NOT_SET = f"{RESOURCE_PREFIX}.Message.PostalCodeNotSet"
    DELIVERY_UNINFORMED = f"{RESOURCE_PREFIX}.Message.DeliveryUninformed"
    INVALID_VALUE_DELIVERY = f"{RESOURCE_PREFIX}.Message.InvalidValueDelivery"
    NOT_CONFIGURED = f"{RESOURCE_PREFIX}.Message.NotConfigured"


# Field labels and hints shown on the configuration page
_FIELDS = {
    "Url": ("URL", "Specify Correios URL."),
    "PostalCodeFrom": ("Postal Code From", "Specify From Postal Code."),
    "CompanyCode": ("Company Code", "Specify Your Company Code."),
    "Password": ("Password", "Specify Your Password."),
    "AddDaysForDelivery": (
        "Additional Days For Delivery",
        "Set The Amount Of Additional Days For Delivery.",
    ),
    "AvailableCarrierServices": (
        "Available Carrier Services",
        "Set Available Carrier Services.",
    ),
    "ServiceNameDefault": (
        "Service Name Default",
        "Service Name Used When The Correios Does Not Return Value.",
    ),
    "ShippingRateDefault": (
        "Shipping Rate Default",
        "Shipping Rate Used When The Correios Does Not Return Value.",
    ),
    "QtdDaysForDeliveryDefault": (
        "Number Of Days For Delivery Default",
        "Number Of Days For Delivery Used When The Correios Does Not Return Value.",
    ),
    "PercentageShippingFee": (
        "Additional percentage shipping fee",
        "Set the additional percentage shipping rate.",
    ),
}


def _build_resources() -> Dict[str, str]:
    resources: Dict[str, str] = {}
    for name, (label, hint) in _FIELDS.items():
        resources[f"{RESOURCE_PREFIX}.Fields.{name}"] = label
        resources[f"{RESOURCE_PREFIX}.Fields.{name}.Hint"] = hint

    resources.update({
        Messages.NO_SHIPMENT_ITEMS: "No shipment items",
        Messages.ADDRESS_NOT_SET: "Shipping address is not set",
        Messages.COUNTRY_NOT_SET: "Shipping country is not set",
        Messages.STATE_NOT_SET: "Shipping state is not set",
        Messages.POSTAL_CODE_NOT_SET: "Shipping zip postal code is not set",
        Messages.DELIVERY_UNINFORMED: "Delivery uninformed",
        Messages.INVALID_VALUE_DELIVERY: "Invalid value delivery",
        Messages.NOT_CONFIGURED: "Correios shipping is not configured",
    })
    return resources


LOCALE_RESOURCES: Dict[str, str] = _build_resources()


class Localizer(Protocol):
    """Host localization service."""

    def get_resource(self, key: str) -> str:
        ...


class ResourceLocalizer:
    """
    Dict-backed localizer.

    Missing keys resolve to the key itself, matching how the host renders
    an unregistered resource.
    """

    def __init__(self, resources: Optional[Dict[str, str]] = None):
        self._resources: Dict[str, str] = dict(LOCALE_RESOURCES if resources is None else resources)

    def get_resource(self, key: str) -> str:
        value = self._resources.get(key)
        if value is None:
            logger.debug(f"Missing locale resource: {key}")
            return key
        return value

    def add_or_update(self, key: str, value: str) -> None:
        self._resources[key] = value

    def delete(self, key: str) -> None:
        self._resources.pop(key, None)

    def keys(self) -> Iterable[str]:
        return self._resources.keys()
