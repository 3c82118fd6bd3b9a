"""
Correios Shipping Exception Hierarchy

Structured exception classes for the Correios rate computation.
All exceptions include code, message, and details for logging and debugging.

Exception Hierarchy:
    CorreiosBaseError
    └── ShippingError
        ├── MissingRequestField
        ├── CarrierUnavailable
        └── ServiceResultError
            ├── CarrierServiceError
            ├── InvalidDeliveryEstimate
            └── InvalidPrice
"""
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class CorreiosBaseError(Exception):
    """
    Base exception for all Correios plugin errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
        severity: P0-P3 severity level
    """

    default_code: str = "CORREIOS_ERROR"
    default_severity: str = "P2"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[str] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.severity = severity or self.default_severity
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "severity": self.severity,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


# =============================================================================
# SHIPPING ERRORS
# =============================================================================

class ShippingError(CorreiosBaseError):
    """Base exception for shipping rate errors."""
    default_code = "SHIPPING_ERROR"
    default_severity = "P2"


class MissingRequestField(ShippingError):
    """Inbound shipping request is missing a required field."""
    default_code = "MISSING_REQUEST_FIELD"
    default_severity = "P3"

    def __init__(self, message: str, field: str, **kwargs):
        details = kwargs.pop("details", {})
        details["field"] = field
        self.field = field
        super().__init__(message, details=details, **kwargs)


class CarrierUnavailable(ShippingError):
    """Whole carrier call failed: transport error, timeout, SOAP fault or malformed response."""
    default_code = "CARRIER_UNAVAILABLE"
    default_severity = "P1"


class ServiceResultError(ShippingError):
    """A single service code result could not be turned into a shipping option."""
    default_code = "SERVICE_RESULT_ERROR"
    default_severity = "P3"

    def __init__(self, message: str, service_code: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        details["service_code"] = service_code
        self.service_code = service_code
        super().__init__(message, details=details, **kwargs)


class CarrierServiceError(ServiceResultError):
    """Carrier reported an error for this service code."""
    default_code = "CARRIER_SERVICE_ERROR"

    def __init__(
        self,
        carrier_error: str,
        carrier_message: str,
        service_code: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({
            "carrier_error": carrier_error,
            "carrier_message": carrier_message,
        })
        self.carrier_error = carrier_error
        self.carrier_message = carrier_message
        super().__init__(
            f"{carrier_error} - {carrier_message}",
            service_code=service_code,
            details=details,
            **kwargs
        )


class InvalidDeliveryEstimate(ServiceResultError):
    """Delivery days missing, unparseable or not positive."""
    default_code = "INVALID_DELIVERY_ESTIMATE"


class InvalidPrice(ServiceResultError):
    """Quoted price missing, unparseable or not positive."""
    default_code = "INVALID_PRICE"
