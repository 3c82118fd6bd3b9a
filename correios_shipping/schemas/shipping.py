"""
Shipping Schemas

Pydantic models for shipping option requests and responses.
Address fields and items are optional at the schema level: a missing field is
reported by the computation method as a localized error, not a validation error.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ==================== Request Schemas ====================


class ShippingAddress(BaseModel):
    """Destination address."""
    country: Optional[str] = Field(None, max_length=100)
    state_province: Optional[str] = Field(None, max_length=100)
    zip_postal_code: Optional[str] = Field(None, max_length=20)
    city: Optional[str] = Field(None, max_length=100)

    @field_validator("country")
    @classmethod
    def normalize_country(cls, v):
        return v.upper() if v else v


class ShippingItem(BaseModel):
    """Cart line item, weight in kg and dimensions in cm."""
    weight: Decimal = Field(Decimal("0"), ge=0)
    length: Decimal = Field(Decimal("0"), ge=0)
    width: Decimal = Field(Decimal("0"), ge=0)
    height: Decimal = Field(Decimal("0"), ge=0)
    quantity: int = Field(1, ge=1)
    unit_price: Decimal = Field(Decimal("0"), ge=0)


class ShippingOptionRequest(BaseModel):
    """Request for shipping options for a cart."""
    items: Optional[List[ShippingItem]] = None
    shipping_address: Optional[ShippingAddress] = None
    # Overrides the configured origin postal code
    zip_postal_code_from: Optional[str] = None


# ==================== Response Schemas ====================


class ShippingOption(BaseModel):
    """A shippable option presented to the customer."""
    name: str
    rate: Decimal
    service_code: Optional[str] = None
    delivery_days: Optional[int] = None


class ShippingOptionResponse(BaseModel):
    """Shipping options plus localized errors."""
    shipping_options: List[ShippingOption] = []
    errors: List[str] = []

    @property
    def success(self) -> bool:
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)


class TrackingUrlResponse(BaseModel):
    """Public tracking link for a shipment."""
    tracking_number: str
    url: str
