# src/gcurrency/__init__.py
"""
gcurrency - Cached Exchange Rate Bank

A pluggable exchange rate source for currency conversion libraries.
Rates are fetched from a remote calculator endpoint on first request
and cached in memory until explicitly flushed.
"""

from gcurrency.application.bank import GoogleCurrencyBank
from gcurrency.domain.errors import (
    CurrencyBankError,
    FetchFailed,
    MalformedResponse,
    UnknownCurrency,
    UnknownRate,
)

__version__ = "0.1.0"

__all__ = [
    "GoogleCurrencyBank",
    "CurrencyBankError",
    "FetchFailed",
    "MalformedResponse",
    "UnknownCurrency",
    "UnknownRate",
]
