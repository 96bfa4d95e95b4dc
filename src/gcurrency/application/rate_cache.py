# src/gcurrency/application/rate_cache.py
"""
Rate Cache - Lock-guarded Lazy Rate Storage

This module holds fetched rates in memory, keyed by directional currency
pair. Entries are created on the first successful fetch and live until
they are flushed; there is no expiry.

A single lock guards every read and write, and the fetch on a miss runs
while the lock is held. At most one fetch is in flight for the whole
cache, so concurrent misses for the same pair never fetch twice. The
price is that a slow fetch for one pair also stalls lookups of every
other pair until it returns or fails.

Files that USE this module:
- gcurrency.application.bank (GoogleCurrencyBank owns one RateCache)
- tests.test_rate_cache (unit tests)

Files that this module USES:
- gcurrency.domain.models (RateKey)
"""
import logging
import threading
from decimal import Decimal
from typing import Callable, Dict, Optional

from gcurrency.domain.models import RateKey

log = logging.getLogger(__name__)


class RateCache:
    """In-memory RateKey -> Decimal mapping guarded by one lock."""

    def __init__(self):
        self._rates: Dict[RateKey, Decimal] = {}
        self._lock = threading.Lock()

    def get_or_fetch(self, key: RateKey, fetch_fn: Callable[[], Decimal]) -> Decimal:
        """
        Return the cached rate for key, fetching and storing it on a miss.

        fetch_fn runs with the lock held and must not call back into this
        cache. If it raises, nothing is stored and the exception propagates.

        Args:
            key: Pair to look up
            fetch_fn: Zero-argument callable producing the rate

        Returns:
            Cached or freshly fetched rate
        """
        with self._lock:
            rate = self._rates.get(key)
            if rate is not None:
                log.debug("Rate cache hit: %s=%s", key, rate)
                return rate

            log.debug("Rate cache miss: %s", key)
            rate = fetch_fn()
            self._rates[key] = rate
            return rate

    def store(self, key: RateKey, rate: Decimal) -> None:
        """Insert or overwrite the rate for key."""
        with self._lock:
            self._rates[key] = rate

    def flush_one(self, key: RateKey) -> Optional[Decimal]:
        """
        Remove the rate for key.

        Returns:
            The removed rate, or None if key was not cached
        """
        with self._lock:
            rate = self._rates.pop(key, None)
        log.debug("Flushed %s (was %s)", key, rate)
        return rate

    def flush_all(self) -> None:
        with self._lock:
            self._rates = {}
        log.debug("Flushed all cached rates")

    def snapshot(self) -> Dict[RateKey, Decimal]:
        """Copy of the current mapping."""
        with self._lock:
            return dict(self._rates)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rates)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._rates
