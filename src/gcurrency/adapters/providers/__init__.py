# src/gcurrency/adapters/providers/__init__.py
"""
Provider Adapters - Remote Quote Clients

This package contains clients for remote exchange rate endpoints.
All clients implement the QuoteClient interface.
"""

from gcurrency.adapters.providers.base import QuoteClient
from gcurrency.adapters.providers.google import (
    GoogleQuoteClient,
    extract_rate,
    fix_response_json_data,
    parse_quote,
)

__all__ = [
    "QuoteClient",
    "GoogleQuoteClient",
    "extract_rate",
    "fix_response_json_data",
    "parse_quote",
]
