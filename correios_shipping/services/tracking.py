"""
Correios Shipment Tracker

Builds public tracking links from the configured URL template.
Correios tracking numbers look like "AA123456789BR": two letters, nine digits,
two letters (country).
"""
import logging
import re
from typing import List

from correios_shipping.core.config import CorreiosSettings

logger = logging.getLogger(__name__)

TRACKING_NUMBER_RE = re.compile(r"^[A-Z]{2}\d{9}[A-Z]{2}$")


def normalize_tracking_number(tracking_number: str) -> str:
    return re.sub(r"\s", "", tracking_number or "").upper()


class CorreiosShipmentTracker:
    """Settings-driven tracking URL builder."""

    def __init__(self, settings: CorreiosSettings):
        self.settings = settings

    def is_match(self, tracking_number: str) -> bool:
        """Whether the tracking number has the Correios format."""
        return bool(TRACKING_NUMBER_RE.match(normalize_tracking_number(tracking_number)))

    def get_url(self, tracking_number: str) -> str:
        """Public tracking URL for a shipment."""
        return self.settings.tracking_url_template.format(
            tracking_number=normalize_tracking_number(tracking_number)
        )

    def get_shipment_events(self, tracking_number: str) -> List[dict]:
        """Correios tracking events are not fetched; the tracking page shows them."""
        return []
