# src/gcurrency/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Rate cache keys (directional currency pairs)
- Decoded quote records from the calculator endpoint

Files that USE this module:
- gcurrency.adapters.providers.google (builds Quote records)
- gcurrency.application.rate_cache (RateKey as mapping key)
- gcurrency.application.bank (rate_key_for on every public call)
- tests.* (tests use domain models for test data)

Files that this module USES:
- gcurrency.domain.currency (Currency wrapping through the registry)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for rates
from typing import Optional, Union  # Type hints

from gcurrency.domain.currency import Currency, CurrencyRegistry

# 1 unit of `from` equals Rate units of `to`
Rate = Decimal


@dataclass(frozen=True)
class RateKey:
    """
    Directional currency pair used as a rate cache key.

    (USD, EUR) and (EUR, USD) are distinct keys.
    """
    from_code: str
    to_code: str

    def __str__(self) -> str:
        return f"{self.from_code}_TO_{self.to_code}"


def rate_key_for(
    from_currency: Union[Currency, str],
    to_currency: Union[Currency, str],
    registry: Optional[CurrencyRegistry] = None,
) -> RateKey:
    """
    Build the cache key for a currency pair.

    Args:
        from_currency: Currency to convert from (Currency or code, any case)
        to_currency: Currency to convert to (Currency or code, any case)
        registry: Registry used to resolve codes

    Returns:
        RateKey with canonical uppercase codes, order preserved

    Raises:
        UnknownCurrency: If either side does not resolve
    """
    src = Currency.wrap(from_currency, registry)
    dst = Currency.wrap(to_currency, registry)
    return RateKey(src.iso_code, dst.iso_code)


@dataclass(frozen=True)
class Quote:
    """
    Decoded calculator response.

    Attributes:
        lhs: Echo of the query, e.g. "1 U.S. dollar"
        rhs: Converted value with unit label, e.g. "0.84 Euros"
        error: "" or "0" on success, opaque failure content otherwise
        icc: Unused upstream flag
    """
    lhs: str
    rhs: str
    error: str
    icc: str = ""

    @property
    def succeeded(self) -> bool:
        return self.error in ("", "0")
