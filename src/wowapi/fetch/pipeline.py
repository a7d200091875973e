"""Fetch pipeline: cache check, conditional GET and cache update."""

import time
from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any

import httpx
import structlog

from wowapi.cache import CacheEngine, ResponseEnvelope, SimpleCache
from wowapi.config.constants import COMPONENT_FETCH
from wowapi.errors import ApiError, TransportError, WowApiError
from wowapi.fetch.constants import (
    FRESHNESS_WINDOW_SECONDS,
    HTTP_STATUS_NOT_MODIFIED,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
)
from wowapi.fetch.metrics import FetchMetrics
from wowapi.fetch.redact import redact_headers, redact_query
from wowapi.fetch.request import RequestSpec
from wowapi.fetch.state_machine import FetchState, FetchStateMachine


logger = structlog.get_logger()


def _utc_now() -> datetime:
    return datetime.now(UTC)


def parse_last_modified(value: str | None) -> int:
    """Parse a Last-Modified header into epoch seconds.

    Args:
        value: Header value (HTTP date), or None.

    Returns:
        Epoch seconds, or 0 when absent or unparseable.
    """
    if not value:
        return 0
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return max(0, int(parsed.timestamp()))


def format_http_date(epoch_seconds: int) -> str:
    """Format epoch seconds as an RFC 1123 GMT date for If-Modified-Since."""
    return format_datetime(datetime.fromtimestamp(epoch_seconds, UTC), usegmt=True)


def _decode_error_body(response: httpx.Response) -> Any:
    """Decode an error response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class FetchPipeline:
    """Runs requests through the cache and the origin.

    For each call the cache is consulted first. Entries younger than the
    freshness window are returned without contacting the origin. Older
    entries are revalidated with If-Modified-Since; a 304 returns the cached
    envelope unchanged, a 200 replaces it. Failed calls are never retried.
    """

    def __init__(
        self,
        cache: CacheEngine | None = None,
        http_client: httpx.Client | None = None,
        clock: Callable[[], datetime] = _utc_now,
        freshness_window_seconds: float = FRESHNESS_WINDOW_SECONDS,
    ) -> None:
        """Initialize the pipeline.

        Args:
            cache: Cache engine; a new SimpleCache when omitted.
            http_client: Shared httpx client; a short-lived client is opened
                per call when omitted.
            clock: Source of the current UTC time.
            freshness_window_seconds: Age under which cached envelopes are
                returned without a network call.
        """
        self._cache: CacheEngine = cache if cache is not None else SimpleCache()
        self._http_client = http_client
        self._clock = clock
        self._freshness_window = freshness_window_seconds
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component=COMPONENT_FETCH)

    @property
    def cache(self) -> CacheEngine:
        """Get the cache engine."""
        return self._cache

    def fetch(self, spec: RequestSpec) -> ResponseEnvelope:
        """Return the envelope for a request, from cache or from the origin.

        Args:
            spec: Request to run.

        Returns:
            Cached or freshly fetched envelope.

        Raises:
            TransportError: On connection failure, timeout or any other
                request-level failure such as an undecodable body.
            ApiError: On a non-successful origin response.
        """
        url = spec.url
        machine = FetchStateMachine(url)
        log = self._log.bind(url=url, query=redact_query(spec.query))

        machine.transition_to(FetchState.CACHE_CHECK)
        cached = self._lookup(url, spec.query, log)
        now = self._clock()

        if cached is None:
            machine.transition_to(FetchState.CACHE_MISS)
        elif cached.age_seconds(now) < self._freshness_window:
            machine.transition_to(FetchState.CACHE_HIT_FRESH)
            machine.transition_to(FetchState.RETURN_CACHED)
            machine.transition_to(FetchState.DONE)
            self._metrics.record_cache_hit()
            log.debug("cache_hit_fresh", age_seconds=cached.age_seconds(now))
            return cached
        else:
            machine.transition_to(FetchState.CACHE_HIT_STALE)

        headers = dict(spec.headers)
        if cached is not None and cached.last_modified_at > 0:
            headers["If-Modified-Since"] = format_http_date(cached.last_modified_at)

        machine.transition_to(FetchState.NETWORK_CALL)
        try:
            response = self._send(spec, headers, log)
            envelope = self._interpret(spec, response, cached, machine)
        except WowApiError as e:
            machine.transition_to(FetchState.FAILED)
            self._metrics.record_failure(type(e).__name__)
            log.warning("fetch_failed", **e.to_dict())
            raise

        machine.transition_to(FetchState.DONE)
        log.info(
            "fetch_complete",
            status_code=response.status_code,
            revalidated=machine.history[-2] == FetchState.RETURN_304_CACHED,
        )
        return envelope

    def _lookup(
        self,
        url: str,
        query: dict[str, Any],
        log: structlog.stdlib.BoundLogger,
    ) -> ResponseEnvelope | None:
        """Read the cache; a failing engine counts as a miss."""
        try:
            cached = self._cache.get(url, query)
        except Exception as e:  # noqa: BLE001
            log.warning("cache_read_failed", error=str(e))
            return None
        log.debug("cache_lookup", hit=cached is not None)
        return cached

    def _send(
        self,
        spec: RequestSpec,
        headers: dict[str, str],
        log: structlog.stdlib.BoundLogger,
    ) -> httpx.Response:
        """Issue the single network call for a request.

        Raises:
            TransportError: On connection failure, timeout or any other
                request-level failure such as an undecodable body.
        """
        log.debug("network_call", headers=redact_headers(headers))
        start_time_ns = time.perf_counter_ns()

        try:
            if self._http_client is not None:
                response = self._http_client.request(
                    spec.method,
                    spec.url,
                    params=spec.query,
                    headers=headers,
                    timeout=spec.timeout,
                )
            else:
                with httpx.Client(timeout=spec.timeout) as client:
                    response = client.request(
                        spec.method, spec.url, params=spec.query, headers=headers
                    )
        except httpx.TimeoutException as e:
            msg = f"Request timed out: {e}"
            raise TransportError(msg, url=spec.url) from e
        except httpx.TransportError as e:
            msg = f"Connection failed: {e}"
            raise TransportError(msg, url=spec.url) from e
        except httpx.RequestError as e:
            # Any other request failure, e.g. an undecodable body or a redirect loop
            msg = f"Request failed: {e}"
            raise TransportError(msg, url=spec.url) from e

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_network_call(
            response.status_code, len(response.content), duration_ms
        )
        return response

    def _interpret(
        self,
        spec: RequestSpec,
        response: httpx.Response,
        cached: ResponseEnvelope | None,
        machine: FetchStateMachine,
    ) -> ResponseEnvelope:
        """Turn an origin response into the envelope to return.

        Raises:
            ApiError: On any status other than 2xx, or 304 with a cached entry.
        """
        status = response.status_code

        if status == HTTP_STATUS_NOT_MODIFIED and cached is not None:
            machine.transition_to(FetchState.RETURN_304_CACHED)
            self._metrics.record_revalidated()
            return cached

        if not HTTP_STATUS_OK_MIN <= status < HTTP_STATUS_OK_MAX:
            raise ApiError(status, response.reason_phrase, _decode_error_body(response))

        try:
            body = response.json()
        except ValueError as e:
            raise ApiError(status, "Invalid JSON response", response.text) from e

        envelope = ResponseEnvelope(
            body=body,
            last_modified_at=parse_last_modified(response.headers.get("last-modified")),
            fetched_at=self._clock(),
        )
        self._cache.set(spec.url, spec.query, envelope)
        machine.transition_to(FetchState.RETURN_FRESH)
        return envelope
