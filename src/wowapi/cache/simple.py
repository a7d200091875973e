"""In-memory cache engine scoped to one client instance."""

import threading
from collections.abc import Mapping
from typing import Any

import structlog

from wowapi.cache.base import CacheKey, cache_key
from wowapi.cache.models import ResponseEnvelope
from wowapi.config.constants import COMPONENT_CACHE


logger = structlog.get_logger()


class SimpleCache:
    """Process-local cache engine backed by a dict.

    Reads and writes are serialized with a lock so overlapping calls on a
    shared instance cannot corrupt the table. Entries live as long as the
    engine itself.
    """

    engine_name = "Simple Cache"

    def __init__(self) -> None:
        self._data: dict[CacheKey, ResponseEnvelope] = {}
        self._lock = threading.Lock()
        self._log = logger.bind(component=COMPONENT_CACHE, engine=self.engine_name)

    def get(self, url: str, params: Mapping[str, Any]) -> ResponseEnvelope | None:
        with self._lock:
            return self._data.get(cache_key(url, params))

    def set(
        self, url: str, params: Mapping[str, Any], value: ResponseEnvelope
    ) -> None:
        key = cache_key(url, params)
        with self._lock:
            self._data[key] = value
        self._log.debug("cache_store", url=url)

    def exists(self, url: str, params: Mapping[str, Any]) -> bool:
        with self._lock:
            return cache_key(url, params) in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
