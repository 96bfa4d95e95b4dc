# src/gcurrency/application/bank.py
"""
Currency Bank - Cached Rate Source

This module provides GoogleCurrencyBank, the rate source a currency
conversion library calls to get a multiplier for a pair of currencies.
Rates are fetched through a QuoteClient on first use and cached until
flushed.

Usage:
    >>> bank = GoogleCurrencyBank()
    >>> bank.get_rate("USD", "EUR")
    Decimal('0.84')
    >>> bank.flush_rate("USD", "EUR")
    Decimal('0.84')
    >>> bank.flush_rates()

Files that USE this module:
- gcurrency (package export)
- tests.test_bank (unit tests)

Files that this module USES:
- gcurrency.adapters.providers (GoogleQuoteClient as default QuoteClient)
- gcurrency.application.rate_cache (RateCache)
- gcurrency.domain (rate_key_for, CurrencyRegistry)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
import warnings
from decimal import Decimal, InvalidOperation
from functools import partial
from typing import Dict, Optional, Union

from gcurrency.adapters.providers.base import QuoteClient
from gcurrency.adapters.providers.google import GoogleQuoteClient
from gcurrency.application.rate_cache import RateCache
from gcurrency.domain.currency import Currency, CurrencyRegistry, default_registry
from gcurrency.domain.errors import MalformedResponse
from gcurrency.domain.models import RateKey, rate_key_for

log = logging.getLogger(__name__)

CurrencyLike = Union[Currency, str]


def _to_rate(value: Union[Decimal, float, int, str]) -> Decimal:
    """
    Coerce value to a Decimal rate.

    Raises:
        ValueError: If value is not a positive finite number
    """
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid rate: {value!r}") from e
    if not rate.is_finite() or rate <= 0:
        raise ValueError(f"Rate must be a positive finite number, got {value!r}")
    return rate


class GoogleCurrencyBank:
    """
    Exchange rate source backed by a remote quote client and an in-memory cache.

    Each instance owns its own cache; nothing is shared between banks.
    """

    def __init__(
        self,
        client: Optional[QuoteClient] = None,
        registry: Optional[CurrencyRegistry] = None,
    ):
        """
        Initialize the bank.

        Args:
            client: QuoteClient used on cache misses (defaults to GoogleQuoteClient())
            registry: Registry resolving currency codes (defaults to ISO 4217)
        """
        self.client = client or GoogleQuoteClient()
        self.registry = registry or default_registry
        self._cache = RateCache()

    def _key(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> RateKey:
        return rate_key_for(from_currency, to_currency, self.registry)

    @property
    def rates(self) -> Dict[str, Decimal]:
        """Snapshot of the cached rates keyed like "USD_TO_EUR"."""
        return {str(key): rate for key, rate in self._cache.snapshot().items()}

    def get_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal:
        """
        Return the rate for a pair, fetching it on first request.

        Args:
            from_currency: Currency to convert from
            to_currency: Currency to convert to

        Returns:
            Units of to_currency per 1 unit of from_currency

        Raises:
            UnknownCurrency: If either code is not known
            FetchFailed: If the quote request fails at transport level
            UnknownRate: If the endpoint has no rate for the pair
            MalformedResponse: If the endpoint answer cannot be read
        """
        key = self._key(from_currency, to_currency)
        return self._cache.get_or_fetch(key, partial(self._fetch, key))

    def _fetch(self, key: RateKey) -> Decimal:
        raw = self.client.fetch_rate(key.from_code, key.to_code)
        try:
            return _to_rate(raw)
        except ValueError as e:
            log.error("Quote client returned unusable rate for %s: %r", key, raw)
            raise MalformedResponse(f"Unusable rate for {key}: {raw!r}") from e

    def set_rate(
        self,
        from_currency: CurrencyLike,
        to_currency: CurrencyLike,
        rate: Union[Decimal, float, int, str],
    ) -> Decimal:
        """
        Seed the cache with a known rate, replacing any cached value.

        Raises:
            UnknownCurrency: If either code is not known
            ValueError: If rate is not a positive finite number
        """
        key = self._key(from_currency, to_currency)
        value = _to_rate(rate)
        self._cache.store(key, value)
        log.debug("Rate set manually: %s=%s", key, value)
        return value

    def flush_rate(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Optional[Decimal]:
        """
        Drop the cached rate for a pair.

        Returns:
            The flushed rate, or None if the pair was not cached
        """
        return self._cache.flush_one(self._key(from_currency, to_currency))

    def flush_rates(self) -> None:
        """Drop every cached rate."""
        self._cache.flush_all()

    def get_rate_uncached(self, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal:
        """
        Fetch a rate straight from the quote client, bypassing the cache.

        .. deprecated:: use get_rate instead.
        """
        message = "get_rate_uncached is deprecated, please use get_rate"
        warnings.warn(message, DeprecationWarning, stacklevel=2)
        log.warning(message)
        key = self._key(from_currency, to_currency)
        return self._fetch(key)
