# tests/test_rate_cache.py
"""
Rate Cache Tests - Unit Tests for the Lock-guarded Rate Cache

This module tests lazy population, failure atomicity, flushing and the
single-lock behaviour of RateCache.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- gcurrency.application.rate_cache (RateCache)
- gcurrency.domain.models (RateKey)
"""
import threading  # Concurrent callers
from decimal import Decimal  # Exact rate values

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock fetch functions

from gcurrency.application.rate_cache import RateCache  # Cache under test
from gcurrency.domain.errors import FetchFailed  # Failure raised by fetch functions
from gcurrency.domain.models import RateKey  # Cache keys

USD_EUR = RateKey("USD", "EUR")
EUR_USD = RateKey("EUR", "USD")


class TestGetOrFetch:
    def test_miss_fetches_and_stores(self):
        cache = RateCache()
        fetch = Mock(return_value=Decimal("0.84"))

        assert cache.get_or_fetch(USD_EUR, fetch) == Decimal("0.84")
        assert USD_EUR in cache
        fetch.assert_called_once_with()

    def test_hit_does_not_fetch(self):
        cache = RateCache()
        cache.get_or_fetch(USD_EUR, Mock(return_value=Decimal("0.84")))
        second = Mock(side_effect=AssertionError("should not fetch"))

        assert cache.get_or_fetch(USD_EUR, second) == Decimal("0.84")
        second.assert_not_called()

    def test_failure_stores_nothing(self):
        cache = RateCache()
        fetch = Mock(side_effect=FetchFailed("down"))

        with pytest.raises(FetchFailed):
            cache.get_or_fetch(USD_EUR, fetch)

        assert USD_EUR not in cache
        assert len(cache) == 0

    def test_lock_released_after_failure(self):
        cache = RateCache()
        with pytest.raises(FetchFailed):
            cache.get_or_fetch(USD_EUR, Mock(side_effect=FetchFailed("down")))

        # a held lock would block here forever
        assert cache.get_or_fetch(USD_EUR, Mock(return_value=Decimal("0.85"))) == Decimal("0.85")

    def test_keys_are_directional(self):
        cache = RateCache()
        cache.get_or_fetch(USD_EUR, Mock(return_value=Decimal("0.84")))

        assert EUR_USD not in cache
        assert cache.get_or_fetch(EUR_USD, Mock(return_value=Decimal("1.19"))) == Decimal("1.19")
        assert len(cache) == 2

    def test_misses_are_serialised_across_keys(self):
        cache = RateCache()
        started = threading.Event()
        release = threading.Event()
        active = []
        overlap = []

        def slow_fetch():
            active.append(1)
            if len(active) > 1:
                overlap.append(True)
            started.set()
            release.wait(timeout=5)
            active.pop()
            return Decimal("0.84")

        def quick_fetch():
            if active:
                overlap.append(True)
            return Decimal("1.19")

        first = threading.Thread(target=cache.get_or_fetch, args=(USD_EUR, slow_fetch))
        first.start()
        assert started.wait(timeout=5)
        second = threading.Thread(target=cache.get_or_fetch, args=(EUR_USD, quick_fetch))
        second.start()
        second.join(timeout=0.2)

        # the unrelated key is still waiting on the lock
        assert second.is_alive()
        release.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert not overlap
        assert cache.snapshot() == {USD_EUR: Decimal("0.84"), EUR_USD: Decimal("1.19")}


class TestFlush:
    def test_flush_one_returns_rate(self):
        cache = RateCache()
        cache.store(USD_EUR, Decimal("0.84"))

        assert cache.flush_one(USD_EUR) == Decimal("0.84")
        assert USD_EUR not in cache

    def test_flush_one_absent_returns_none(self):
        assert RateCache().flush_one(USD_EUR) is None

    def test_flush_all(self):
        cache = RateCache()
        cache.store(USD_EUR, Decimal("0.84"))
        cache.store(EUR_USD, Decimal("1.19"))

        cache.flush_all()

        assert len(cache) == 0
        assert cache.snapshot() == {}


class TestSnapshot:
    def test_snapshot_is_a_copy(self):
        cache = RateCache()
        cache.store(USD_EUR, Decimal("0.84"))

        snap = cache.snapshot()
        snap[EUR_USD] = Decimal("1.19")

        assert EUR_USD not in cache

    def test_store_overwrites(self):
        cache = RateCache()
        cache.store(USD_EUR, Decimal("0.84"))
        cache.store(USD_EUR, Decimal("0.85"))

        assert cache.snapshot() == {USD_EUR: Decimal("0.85")}
