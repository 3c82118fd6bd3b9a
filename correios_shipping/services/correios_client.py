"""
Correios CalcPrecoPrazo SOAP Client

One SOAP call prices every configured service code for a cart:
- Origin/destination postal codes (digits only)
- Company code and password (blank for retail prices)
- Aggregated package weight (kg) and dimensions (cm)

The zeep client is synchronous; calls run in a worker thread with a bounded
timeout. Any transport, SOAP or parsing failure surfaces as CarrierUnavailable.
"""
import asyncio
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

import requests
from zeep import Client
from zeep.cache import InMemoryCache
from zeep.exceptions import Error as ZeepError
from zeep.transports import Transport

from correios_shipping.core.config import CorreiosSettings
from correios_shipping.core.currency import CurrencyConverter
from correios_shipping.core.exceptions import CarrierUnavailable
from correios_shipping.schemas.shipping import ShippingItem, ShippingOptionRequest
from correios_shipping.services.service_types import normalize_service_code

logger = logging.getLogger(__name__)

# Correios package constraints (box format)
FORMAT_BOX = 1
MIN_LENGTH_CM = Decimal("16")
MIN_WIDTH_CM = Decimal("11")
MIN_HEIGHT_CM = Decimal("2")
MIN_WEIGHT_KG = Decimal("0.3")

# WSDL documents rarely change
WSDL_CACHE_SECONDS = 86400

# The transport timeout ends the blocking call; the asyncio bound only backs it up
TIMEOUT_GRACE_SECONDS = 1.0


@dataclass
class CarrierServiceResult:
    """One cServico entry of a CalcPrecoPrazo response."""
    code: str
    error: str = ""
    error_message: str = ""
    price: str = ""  # pt-BR decimal, e.g. "12,50"
    delivery_days: str = ""  # integer as string


@dataclass
class Package:
    """Aggregated package for the whole cart."""
    weight: Decimal  # kg
    length: Decimal  # cm
    width: Decimal  # cm
    height: Decimal  # cm


def only_digits(value: Optional[str]) -> str:
    return re.sub(r"\D", "", value or "")


def build_package(items: List[ShippingItem]) -> Package:
    """
    Aggregate cart items into one box.

    Items are stacked: heights and weights add up, the footprint is the
    largest item's. The result is raised to the carrier's minimum sizes.
    """
    weight = sum((item.weight * item.quantity for item in items), Decimal("0"))
    length = max((item.length for item in items), default=Decimal("0"))
    width = max((item.width for item in items), default=Decimal("0"))
    height = sum((item.height * item.quantity for item in items), Decimal("0"))

    return Package(
        weight=max(weight, MIN_WEIGHT_KG),
        length=max(length, MIN_LENGTH_CM),
        width=max(width, MIN_WIDTH_CM),
        height=max(height, MIN_HEIGHT_CM),
    )


def _field(obj: Any, name: str) -> Any:
    """Read a field from a zeep object or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def parse_calc_preco_prazo_result(result: Any) -> List[CarrierServiceResult]:
    """
    Extract per-service results from a cResultado.

    Raises:
        CarrierUnavailable: the response has no Servicos/cServico list
    """
    servicos = _field(result, "Servicos") if result is not None else None
    entries = _field(servicos, "cServico") if servicos is not None else None
    if entries is None:
        raise CarrierUnavailable(
            "Malformed Correios response: missing Servicos.cServico",
            details={"response": repr(result)[:500]},
        )
    if not isinstance(entries, (list, tuple)):
        entries = [entries]

    return [
        CarrierServiceResult(
            code=normalize_service_code(_field(entry, "Codigo")),
            error=_text(_field(entry, "Erro")),
            error_message=_text(_field(entry, "MsgErro")),
            price=_text(_field(entry, "Valor")),
            delivery_days=_text(_field(entry, "PrazoEntrega")),
        )
        for entry in entries
    ]


class CorreiosClient:
    """
    Client for the Correios price-and-deadline web service.

    Args:
        settings: Plugin settings row for this request
        currency_converter: Host currency conversion
        soap_client: Optional prebuilt zeep client (tests, custom transports)
    """

    def __init__(
        self,
        settings: CorreiosSettings,
        currency_converter: CurrencyConverter,
        soap_client: Optional[Client] = None,
    ):
        self.settings = settings
        self.currency_converter = currency_converter
        self._soap_client = soap_client

    @property
    def wsdl_url(self) -> str:
        return f"{self.settings.url}?WSDL"

    @property
    def call_timeout(self) -> float:
        """Bound for the awaiting side, slightly above the transport timeout."""
        return self.settings.request_timeout_seconds + TIMEOUT_GRACE_SECONDS

    def _get_soap_client(self) -> Client:
        """Get or create the zeep client."""
        if self._soap_client is None:
            timeout = self.settings.request_timeout_seconds
            transport = Transport(
                timeout=timeout,
                operation_timeout=timeout,
                cache=InMemoryCache(timeout=WSDL_CACHE_SECONDS),
            )
            self._soap_client = Client(wsdl=self.wsdl_url, transport=transport)
        return self._soap_client

    def build_request_params(self, request: ShippingOptionRequest) -> Dict[str, Any]:
        """Parameters for the CalcPrecoPrazo operation."""
        package = build_package(request.items or [])
        origin = request.zip_postal_code_from or self.settings.postal_code_from
        destination = request.shipping_address.zip_postal_code if request.shipping_address else None

        return {
            "nCdEmpresa": self.settings.company_code,
            "sDsSenha": self.settings.password,
            "nCdServico": ",".join(
                normalize_service_code(code) for code in self.settings.carrier_services_offered
            ),
            "sCepOrigem": only_digits(origin),
            "sCepDestino": only_digits(destination),
            "nVlPeso": format(package.weight, "f"),
            "nCdFormato": FORMAT_BOX,
            "nVlComprimento": package.length,
            "nVlAltura": package.height,
            "nVlLargura": package.width,
            "nVlDiametro": Decimal("0"),
            "sCdMaoPropria": "N",
            "nVlValorDeclarado": Decimal("0"),
            "sCdAvisoRecebimento": "N",
        }

    def _call_service(self, params: Dict[str, Any]) -> Any:
        client = self._get_soap_client()
        return client.service.CalcPrecoPrazo(**params)

    async def request_rates(self, request: ShippingOptionRequest) -> List[CarrierServiceResult]:
        """
        Price all configured service codes in one call.

        Raises:
            CarrierUnavailable: transport failure, timeout, SOAP fault or malformed response
        """
        params = self.build_request_params(request)
        timeout = self.call_timeout
        logger.info(
            f"Requesting Correios rates: services={params['nCdServico']} "
            f"from={params['sCepOrigem']} to={params['sCepDestino']} weight={params['nVlPeso']}kg"
        )

        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(self._call_service, params),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise CarrierUnavailable(
                f"Correios request timed out after {timeout}s",
                details={"url": self.settings.url},
            ) from e
        except (requests.RequestException, ZeepError, OSError) as e:
            raise CarrierUnavailable(
                f"Correios request failed: {e}",
                details={"url": self.settings.url, "error_type": type(e).__name__},
            ) from e

        results = parse_calc_preco_prazo_result(result)
        logger.info(f"Correios returned {len(results)} service results")
        return results

    def convert_to_store_currency(self, amount: Decimal) -> Decimal:
        """Carrier quotes are in BRL; convert to the store's primary currency."""
        return self.currency_converter.convert_to_primary_store_currency(amount)
