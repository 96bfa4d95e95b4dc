# src/gcurrency/domain/errors.py
"""
Domain Errors - Rate Lookup Exceptions

This module defines the exceptions raised by the bank when a rate
cannot be produced. None of them leave anything behind in the rate cache.

Files that USE this module:
- gcurrency.domain.currency (UnknownCurrency)
- gcurrency.adapters.providers.google (FetchFailed, UnknownRate, MalformedResponse)
- gcurrency.application.bank (re-raised to callers)
"""
from typing import Optional


class CurrencyBankError(Exception):
    """Base exception for rate lookup errors."""
    pass


class UnknownCurrency(CurrencyBankError):
    """Raised when a currency code cannot be resolved by the registry."""
    pass


class FetchFailed(CurrencyBankError):
    """Raised on transport failure: connection error, bad HTTP status or timeout."""
    pass


class UnknownRate(CurrencyBankError):
    """
    Raised when the quote endpoint reports an error for the requested pair.

    The upstream error content is opaque and kept as-is on ``error_code``.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class MalformedResponse(CurrencyBankError):
    """Raised when the quote payload cannot be repaired, decoded or read as a rate."""
    pass
