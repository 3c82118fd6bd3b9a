"""
Currency conversion collaborator.

Correios quotes in BRL; the host converts to the store's primary currency.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol, Union

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def quantize_money(amount: Decimal) -> Decimal:
    """Round to cents, half up."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


class CurrencyConverter(Protocol):
    """Converts an amount in the carrier's currency to the store's primary currency."""

    def convert_to_primary_store_currency(self, amount: Decimal) -> Decimal:
        ...


class FixedRateCurrencyConverter:
    """Converter using a single fixed exchange rate (1 when the store sells in BRL)."""

    def __init__(self, rate: Union[Decimal, str, int] = Decimal("1")):
        self.rate = Decimal(str(rate))
        if self.rate <= 0:
            raise ValueError(f"Exchange rate must be positive, got {self.rate}")

    def convert_to_primary_store_currency(self, amount: Decimal) -> Decimal:
        return quantize_money(Decimal(amount) * self.rate)
