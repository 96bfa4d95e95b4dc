# src/gcurrency/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from gcurrency.domain.currency import (
    Currency,
    CurrencyRegistry,
    default_registry,
)
from gcurrency.domain.models import (
    Quote,
    Rate,
    RateKey,
    rate_key_for,
)
from gcurrency.domain.errors import (
    CurrencyBankError,
    FetchFailed,
    MalformedResponse,
    UnknownCurrency,
    UnknownRate,
)

__all__ = [
    "Currency",
    "CurrencyRegistry",
    "default_registry",
    "Quote",
    "Rate",
    "RateKey",
    "rate_key_for",
    "CurrencyBankError",
    "FetchFailed",
    "MalformedResponse",
    "UnknownCurrency",
    "UnknownRate",
]
