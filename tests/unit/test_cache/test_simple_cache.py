"""Unit tests for the in-memory cache engine."""

import threading

from wowapi.cache import CacheEngine, ResponseEnvelope, SimpleCache, cache_key

from tests.helpers.time import FIXED_NOW


URL = "https://us.api.battle.net/wow/boss/"


def _envelope(body: object = None) -> ResponseEnvelope:
    return ResponseEnvelope(body=body, last_modified_at=0, fetched_at=FIXED_NOW)


class TestCacheKey:
    """Tests for cache key derivation."""

    def test_param_order_does_not_matter(self) -> None:
        """Keys should be independent of parameter insertion order."""
        first = cache_key(URL, {"locale": "en_US", "apikey": "k"})
        second = cache_key(URL, {"apikey": "k", "locale": "en_US"})

        assert first == second

    def test_params_distinguish_keys(self) -> None:
        """Different parameter values should give different keys."""
        assert cache_key(URL, {"locale": "en_US"}) != cache_key(URL, {"locale": "es_MX"})

    def test_none_params(self) -> None:
        """None params should behave like empty params."""
        assert cache_key(URL, None) == cache_key(URL, {})


class TestSimpleCache:
    """Tests for SimpleCache."""

    def test_satisfies_engine_protocol(self) -> None:
        """SimpleCache should be a CacheEngine."""
        assert isinstance(SimpleCache(), CacheEngine)

    def test_miss_returns_none(self) -> None:
        """An empty cache should return None."""
        cache = SimpleCache()

        assert cache.get(URL, {}) is None
        assert cache.exists(URL, {}) is False

    def test_set_then_get(self) -> None:
        """A stored envelope should be returned for the same request."""
        cache = SimpleCache()
        envelope = _envelope({"bosses": []})

        cache.set(URL, {"locale": "en_US"}, envelope)

        assert cache.get(URL, {"locale": "en_US"}) is envelope
        assert cache.exists(URL, {"locale": "en_US"}) is True
        assert cache.get(URL, {"locale": "es_MX"}) is None

    def test_set_overwrites(self) -> None:
        """A second set for the same key should replace the envelope."""
        cache = SimpleCache()
        cache.set(URL, {}, _envelope(1))
        cache.set(URL, {}, _envelope(2))

        assert cache.get(URL, {}).body == 2
        assert len(cache) == 1

    def test_instances_are_isolated(self) -> None:
        """Two caches should never share entries."""
        first, second = SimpleCache(), SimpleCache()
        first.set(URL, {}, _envelope())

        assert second.get(URL, {}) is None

    def test_concurrent_writes(self) -> None:
        """Concurrent sets on a shared instance should all land."""
        cache = SimpleCache()

        def write(index: int) -> None:
            cache.set(URL, {"id": index}, _envelope(index))

        threads = [threading.Thread(target=write, args=(i,)) for i in range(50)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 50
        assert cache.get(URL, {"id": 7}).body == 7
