# src/gcurrency/adapters/providers/base.py
"""
Base Quote Client Interface

This module defines the abstract base class for remote quote clients.
The bank only depends on this contract, so tests and alternative
sources can be plugged in.

Files that USE this module:
- gcurrency.adapters.providers.google (GoogleQuoteClient implements QuoteClient)
- gcurrency.application.bank (GoogleCurrencyBank accepts any QuoteClient)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from decimal import Decimal


class QuoteClient(ABC):
    @abstractmethod
    def fetch_rate(self, from_code: str, to_code: str) -> Decimal:
        """Return how many units of `to_code` one unit of `from_code` buys."""
        raise NotImplementedError
