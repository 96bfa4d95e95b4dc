# src/gcurrency/domain/currency.py
"""
Currency Registry - Currency Identity and Code Lookup

This module provides the Currency value object and a small registry that
resolves raw currency codes (any case) into canonical Currency instances.

Files that USE this module:
- gcurrency.domain.models (rate_key_for wraps both sides of a pair)
- gcurrency.application.bank (GoogleCurrencyBank holds a registry)
- tests.test_currency (unit tests)

Files that this module USES:
- gcurrency.domain.errors (UnknownCurrency)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from typing import FrozenSet, Iterable, Optional, Union  # Type hints

from gcurrency.domain.errors import UnknownCurrency

# ISO 4217 active codes plus precious metals and SDR
ISO_4217_CODES: FrozenSet[str] = frozenset("""
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND
    BOB BRL BSD BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUP CVE CZK DJF
    DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD
    HNL HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW
    KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR
    MVR MWK MXN MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN
    PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SOS SRD SSP STN
    SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD UYU UZS VES
    VND VUV WST XAF XCD XCG XOF XPF YER ZAR ZMW ZWG ZWL
    XAG XAU XPD XPT XDR
""".split())


@dataclass(frozen=True)
class Currency:
    """
    A currency identified by its ISO code.

    Attributes:
        iso_code: Canonical uppercase code (e.g. "USD")
    """
    iso_code: str

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "iso_code", self.iso_code.strip().upper())

    def __str__(self) -> str:
        return self.iso_code

    @classmethod
    def wrap(
        cls,
        value: Union["Currency", str],
        registry: Optional["CurrencyRegistry"] = None,
    ) -> "Currency":
        """
        Resolve a Currency or a raw code into a registered Currency.

        Args:
            value: Currency instance or code string (any case)
            registry: Registry to resolve against (defaults to the ISO registry)

        Returns:
            Canonical Currency

        Raises:
            UnknownCurrency: If the code is not registered
        """
        return (registry or default_registry).resolve(value)


class CurrencyRegistry:
    """Immutable lookup of known currency codes."""

    def __init__(self, codes: Iterable[str] = ISO_4217_CODES, extra_codes: Iterable[str] = ()):
        """
        Initialize the registry.

        Args:
            codes: Base set of known codes
            extra_codes: Additional codes to accept (e.g. non-ISO units)
        """
        known = {c.strip().upper() for c in codes}
        known.update(c.strip().upper() for c in extra_codes)
        self._codes: FrozenSet[str] = frozenset(known)

    @property
    def codes(self) -> FrozenSet[str]:
        return self._codes

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._codes

    def resolve(self, value: Union[Currency, str]) -> Currency:
        """
        Resolve a raw code or Currency to a canonical Currency.

        Raises:
            UnknownCurrency: If value is not a string/Currency or the code is unknown
        """
        if isinstance(value, Currency):
            code = value.iso_code
        elif isinstance(value, str):
            code = value.strip().upper()
        else:
            raise UnknownCurrency(f"Cannot resolve currency from {value!r}")

        if code not in self._codes:
            raise UnknownCurrency(f"Unknown currency: {code or value!r}")
        return Currency(code)


# Shared read-only registry of ISO 4217 codes
default_registry = CurrencyRegistry()
