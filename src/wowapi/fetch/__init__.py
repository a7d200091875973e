"""Request building and the cached fetch pipeline.

This module provides:
- Request construction with path templating, field selectors and sort keys
- A fetch pipeline with a client-side freshness window and
  If-Modified-Since revalidation
- Header and query redaction for logging
- Metrics collection for observability
"""

from wowapi.fetch.constants import (
    FRESHNESS_WINDOW_SECONDS,
    HTTP_STATUS_NOT_MODIFIED,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
)
from wowapi.fetch.metrics import FetchMetrics
from wowapi.fetch.pipeline import FetchPipeline, format_http_date, parse_last_modified
from wowapi.fetch.redact import redact_headers, redact_query
from wowapi.fetch.request import (
    RequestBuilder,
    RequestSpec,
    build_base_uri,
    build_path,
    check_sort,
    format_slug,
    sort_data,
    validate_fields,
)
from wowapi.fetch.state_machine import (
    FetchState,
    FetchStateMachine,
    FetchStateTransitionError,
)


__all__ = [
    # Pipeline
    "FetchPipeline",
    "format_http_date",
    "parse_last_modified",
    # Requests
    "RequestBuilder",
    "RequestSpec",
    "build_base_uri",
    "build_path",
    "check_sort",
    "format_slug",
    "sort_data",
    "validate_fields",
    # State machine
    "FetchState",
    "FetchStateMachine",
    "FetchStateTransitionError",
    # Constants
    "FRESHNESS_WINDOW_SECONDS",
    "HTTP_STATUS_NOT_MODIFIED",
    "HTTP_STATUS_OK_MAX",
    "HTTP_STATUS_OK_MIN",
    # Metrics
    "FetchMetrics",
    # Redaction
    "redact_headers",
    "redact_query",
]
