"""Response caching for the fetch pipeline.

Engines are keyed by (url, query parameters) and hold the last decoded
response envelope. The default engine is an in-memory table owned by a
single service instance; any object satisfying ``CacheEngine`` can be
injected instead.
"""

from wowapi.cache.base import CacheEngine, CacheKey, cache_key
from wowapi.cache.models import CacheEntry, ResponseEnvelope
from wowapi.cache.simple import SimpleCache


__all__ = [
    "CacheEngine",
    "CacheEntry",
    "CacheKey",
    "ResponseEnvelope",
    "SimpleCache",
    "cache_key",
]
