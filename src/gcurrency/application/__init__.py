# src/gcurrency/application/__init__.py
"""
Application Layer - Rate Source Services

This package contains the rate cache and the bank facade composing it
with a quote client.
"""

from gcurrency.application.bank import GoogleCurrencyBank
from gcurrency.application.rate_cache import RateCache

__all__ = [
    "GoogleCurrencyBank",
    "RateCache",
]
