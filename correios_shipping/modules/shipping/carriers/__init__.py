"""
Rate Computation Method Registry

- register_carrier decorator records implementations by system name
- get_carrier builds an instance with the host's collaborators
"""
from typing import Any, Dict, List, Type
import logging

from correios_shipping.modules.shipping.carriers.base import BaseRateComputationMethod

logger = logging.getLogger(__name__)

# Registry of computation method implementations
_CARRIER_REGISTRY: Dict[str, Type[BaseRateComputationMethod]] = {}


def register_carrier(system_name: str):
    """
    Decorator to register a computation method implementation.

    Usage:
        @register_carrier("Shipping.Correios")
        class CorreiosComputationMethod(BaseRateComputationMethod):
            ...
    """
    def decorator(cls: Type[BaseRateComputationMethod]):
        cls.system_name = system_name
        _CARRIER_REGISTRY[system_name] = cls
        logger.debug(f"Registered carrier: {system_name} -> {cls.__name__}")
        return cls
    return decorator


def get_carrier(system_name: str, **dependencies: Any) -> BaseRateComputationMethod:
    """
    Build a registered computation method.

    Args:
        system_name: Registered system name, e.g. "Shipping.Correios"
        **dependencies: Constructor arguments (settings provider, localizer, ...)

    Raises:
        ValueError: If no implementation is registered under that name
    """
    carrier_cls = _CARRIER_REGISTRY.get(system_name)
    if not carrier_cls:
        raise ValueError(f"Carrier '{system_name}' is not supported")
    return carrier_cls(**dependencies)


def get_registered_carriers() -> List[str]:
    """Get list of all registered system names."""
    return list(_CARRIER_REGISTRY.keys())


# Import carriers to trigger registration
# These imports must be at the bottom to avoid circular imports
from correios_shipping.modules.shipping.carriers.correios import CorreiosComputationMethod  # noqa: E402, F401
