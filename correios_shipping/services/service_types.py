"""
Correios service codes.

The carrier identifies each delivery tier by a five-digit code. Its response
carries the code as an integer, so "04014" comes back as 4014; lookups
normalize to five digits first.
"""
import logging
from enum import Enum
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

SERVICE_CODE_LENGTH = 5


def normalize_service_code(code: Union[str, int, None]) -> str:
    """Return the five-digit form of a service code ("4014" -> "04014")."""
    if code is None:
        return ""
    text = str(code).strip()
    if text.isdigit():
        return text.zfill(SERVICE_CODE_LENGTH)
    return text


class CorreiosServiceType(Enum):
    """Known Correios service codes and their display names."""

    # Retail (varejo)
    SEDEX_VAREJO = ("40010", "SEDEX Varejo")
    SEDEX_A_COBRAR_VAREJO = ("40045", "SEDEX a Cobrar Varejo")
    SEDEX_10_VAREJO = ("40215", "SEDEX 10 Varejo")
    SEDEX_HOJE_VAREJO = ("40290", "SEDEX Hoje Varejo")
    PAC_VAREJO = ("41106", "PAC Varejo")

    # Cash (a vista)
    SEDEX_A_VISTA = ("04014", "SEDEX")
    SEDEX_A_COBRAR_A_VISTA = ("04065", "SEDEX a Cobrar")
    PAC_A_VISTA = ("04510", "PAC")
    PAC_A_COBRAR_A_VISTA = ("04707", "PAC a Cobrar")
    SEDEX_12_A_VISTA = ("04782", "SEDEX 12")
    SEDEX_10_A_VISTA = ("04790", "SEDEX 10")
    SEDEX_HOJE_A_VISTA = ("04804", "SEDEX Hoje")

    # Contract (contrato)
    SEDEX_CONTRATO = ("40096", "SEDEX Contrato")
    SEDEX_CONTRATO_40436 = ("40436", "SEDEX Contrato")
    SEDEX_CONTRATO_40444 = ("40444", "SEDEX Contrato")
    PAC_CONTRATO = ("41068", "PAC Contrato")
    E_SEDEX = ("81019", "e-SEDEX")

    def __init__(self, code: str, display_name: str):
        self.code = code
        self.display_name = display_name

    @classmethod
    def from_code(cls, code: Union[str, int, None]) -> Optional["CorreiosServiceType"]:
        return _BY_CODE.get(normalize_service_code(code))

    @classmethod
    def get_service_name(cls, code: Union[str, int, None]) -> str:
        """Display name for a code; unknown codes fall back to "Correios <code>"."""
        service = cls.from_code(code)
        if service:
            return service.display_name

        normalized = normalize_service_code(code)
        logger.warning(f"Unknown Correios service code: {code!r}")
        return f"Correios {normalized}".strip()

    @classmethod
    def available_services(cls) -> Dict[str, str]:
        """code -> display name, for the configuration page."""
        return {service.code: service.display_name for service in cls}


_BY_CODE: Dict[str, CorreiosServiceType] = {service.code: service for service in CorreiosServiceType}


def validate_service_codes(codes: List[str]) -> List[str]:
    """Return the codes that are not known Correios services."""
    return [code for code in codes if CorreiosServiceType.from_code(code) is None]
