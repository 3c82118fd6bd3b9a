"""
Correios Shipping API Routes

Provides endpoints for:
- Rate quoting (shipping options for a cart)
- Tracking links
- Configuration view (credentials masked)
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from correios_shipping.api.deps import get_computation_method, get_settings_provider
from correios_shipping.core.config import CorreiosSettings
from correios_shipping.core.settings_store import SettingsProvider
from correios_shipping.modules.shipping.carriers.correios import CorreiosComputationMethod
from correios_shipping.schemas.shipping import (
    ShippingOptionRequest,
    ShippingOptionResponse,
    TrackingUrlResponse,
)
from correios_shipping.services.service_types import CorreiosServiceType, validate_service_codes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping/correios", tags=["shipping"])


class ConfigureResponse(BaseModel):
    """Current settings plus the services the carrier offers."""
    settings: CorreiosSettings
    available_services: dict
    unknown_service_codes: List[str] = []


@router.post("/rates", response_model=ShippingOptionResponse)
async def get_shipping_rates(
    request: ShippingOptionRequest,
    method: CorreiosComputationMethod = Depends(get_computation_method),
):
    """Get Correios shipping options for a cart."""
    response = await method.get_shipping_options(request)
    if not response.success:
        logger.info(f"Shipping options request rejected: {response.errors}")
    return response


@router.get("/tracking/{tracking_number}", response_model=TrackingUrlResponse)
async def get_tracking_url(
    tracking_number: str,
    method: CorreiosComputationMethod = Depends(get_computation_method),
):
    """Public tracking URL for a Correios tracking number."""
    tracker = method.shipment_tracker
    if not tracker.is_match(tracking_number):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not a Correios tracking number",
        )
    return TrackingUrlResponse(
        tracking_number=tracking_number,
        url=tracker.get_url(tracking_number),
    )


@router.get("/configure", response_model=ConfigureResponse)
async def get_configuration(
    settings_provider: SettingsProvider = Depends(get_settings_provider),
):
    """Current plugin settings with the password masked."""
    settings = settings_provider.load()
    return ConfigureResponse(
        settings=settings.masked(),
        available_services=CorreiosServiceType.available_services(),
        unknown_service_codes=validate_service_codes(settings.carrier_services_offered),
    )
