"""Cache engine contract and key derivation."""

import json
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from wowapi.cache.models import ResponseEnvelope


CacheKey = tuple[str, str]


def cache_key(url: str, params: Mapping[str, Any] | None) -> CacheKey:
    """Build the cache key for a request.

    Query parameters are serialized with sorted keys so insertion order
    does not change the key.

    Args:
        url: Fully qualified request URL, without query string.
        params: Query parameters sent with the request.

    Returns:
        Tuple of (url, serialized parameters).
    """
    serialized = json.dumps(
        dict(params or {}),
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )
    return url, serialized


@runtime_checkable
class CacheEngine(Protocol):
    """Protocol for pluggable response caches.

    Engines only store and return envelopes. Freshness is decided by the
    fetch pipeline, so engines never expire or evict on their own.
    """

    def get(self, url: str, params: Mapping[str, Any]) -> ResponseEnvelope | None:
        """Return the cached envelope for a request, or None."""
        ...

    def set(
        self, url: str, params: Mapping[str, Any], value: ResponseEnvelope
    ) -> None:
        """Store or overwrite the envelope for a request."""
        ...

    def exists(self, url: str, params: Mapping[str, Any]) -> bool:
        """Check whether an envelope is cached for a request."""
        ...
