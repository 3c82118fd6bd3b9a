"""
Shipping Module

- BaseRateComputationMethod interface for rate computation methods
- Registry/factory resolving methods by system name
- Correios realtime method
"""
from correios_shipping.modules.shipping.carriers import get_carrier, register_carrier
from correios_shipping.modules.shipping.carriers.base import BaseRateComputationMethod
from correios_shipping.modules.shipping.carriers.correios import (
    CORREIOS_SYSTEM_NAME,
    CorreiosComputationMethod,
)

__all__ = [
    "get_carrier",
    "register_carrier",
    "BaseRateComputationMethod",
    "CORREIOS_SYSTEM_NAME",
    "CorreiosComputationMethod",
]
