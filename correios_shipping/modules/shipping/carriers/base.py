"""
Base Rate Computation Method Interface

All shipping rate computation methods plugged into the host implement this
interface. The host's rate aggregation pipeline calls get_shipping_options()
for realtime methods and get_fixed_rate() for offline ones.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Protocol

from correios_shipping.schemas.shipping import ShippingOptionRequest, ShippingOptionResponse


class ComputationMethodType(str, Enum):
    """How the host obtains rates from a method."""
    OFFLINE = "offline"  # fixed rate, no external call
    REALTIME = "realtime"  # external carrier call per request


@dataclass
class ConfigurationRoute:
    """Where the host admin UI finds the method's configuration page."""
    action_name: str
    controller_name: str
    route_values: Dict[str, Optional[str]] = field(default_factory=dict)


class ShipmentTracker(Protocol):
    """Tracking link builder exposed to the host."""

    def is_match(self, tracking_number: str) -> bool:
        ...

    def get_url(self, tracking_number: str) -> str:
        ...

    def get_shipment_events(self, tracking_number: str) -> List[dict]:
        ...


class BaseRateComputationMethod(ABC):
    """
    Abstract base class for shipping rate computation methods.

    Implementations must never raise out of get_shipping_options(): every
    failure ends up in the response errors or in a fallback option.
    """

    system_name: str = "Shipping.Generic"

    @property
    @abstractmethod
    def computation_method_type(self) -> ComputationMethodType:
        """Return the computation method type."""
        pass

    @abstractmethod
    async def get_shipping_options(
        self,
        request: Optional[ShippingOptionRequest],
    ) -> ShippingOptionResponse:
        """
        Get shipping options for a cart.

        Args:
            request: Items and destination address

        Returns:
            ShippingOptionResponse with options and localized errors
        """
        pass

    @abstractmethod
    def get_fixed_rate(self, request: Optional[ShippingOptionRequest]) -> Optional[Decimal]:
        """Fixed rate for offline methods, None for realtime ones."""
        pass

    @property
    @abstractmethod
    def shipment_tracker(self) -> ShipmentTracker:
        """Return the tracking link builder."""
        pass

    @abstractmethod
    def get_configuration_route(self) -> ConfigurationRoute:
        """Return the admin configuration route."""
        pass
