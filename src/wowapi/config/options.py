"""Client options: merging caller input over defaults and validating it."""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wowapi.cache.base import CacheEngine
from wowapi.config.constants import (
    ALLOWED_PROTOCOLS,
    BASE_URI_TEMPLATE,
    DEFAULT_LOCALE,
    DEFAULT_PROTOCOL,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT_SECONDS,
    REGIONS,
)
from wowapi.errors import ConfigurationError


# Option names recognized by resolve_options
RECOGNIZED_OPTIONS = frozenset(
    {
        "protocol",
        "region",
        "locale",
        "timeout",
        "access_token",
        "cache_engine",
        "base_uri",
    }
)


class ClientOptions(BaseModel):
    """Resolved configuration for one client or service instance.

    Instances are only produced by ``resolve_options``, which guarantees
    protocol, region and locale belong to their allowed sets.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    protocol: str = DEFAULT_PROTOCOL
    region: str = DEFAULT_REGION
    locale: str = DEFAULT_LOCALE
    timeout: Annotated[int, Field(gt=0, description="Request timeout in seconds")] = (
        DEFAULT_TIMEOUT_SECONDS
    )
    timeout_pinned: bool = Field(
        default=False,
        description="True when the caller supplied timeout explicitly",
    )
    access_token: str | None = Field(default=None, repr=False)
    cache_engine: Any = Field(default=None, repr=False)
    base_uri: Annotated[str, Field(min_length=1)] = BASE_URI_TEMPLATE


def _validation_error_field(error: ValidationError) -> str:
    """Get the first offending field name from a pydantic error."""
    for detail in error.errors():
        if detail.get("loc"):
            return str(detail["loc"][0])
    return "options"


def resolve_options(supplied: Mapping[str, Any] | None = None) -> ClientOptions:
    """Merge caller-supplied options over defaults and validate them.

    ``None`` values are treated as not supplied. A supplied ``timeout`` pins
    the timeout so per-resource timeouts cannot override it.

    Args:
        supplied: Caller options; any subset of RECOGNIZED_OPTIONS.

    Returns:
        Validated ClientOptions.

    Raises:
        ConfigurationError: If an option is unknown or outside its allowed set.
    """
    given = {k: v for k, v in (supplied or {}).items() if v is not None}

    unknown = sorted(set(given) - RECOGNIZED_OPTIONS)
    if unknown:
        msg = f"Unknown option(s): {', '.join(unknown)}"
        raise ConfigurationError(msg, field=unknown[0], allowed=sorted(RECOGNIZED_OPTIONS))

    protocol = str(given.get("protocol", DEFAULT_PROTOCOL)).rstrip(":")
    if protocol not in ALLOWED_PROTOCOLS:
        msg = "Protocol must be either http or https"
        raise ConfigurationError(msg, field="protocol", allowed=ALLOWED_PROTOCOLS)

    region = given.get("region", DEFAULT_REGION)
    if not isinstance(region, str) or region not in REGIONS:
        allowed_regions = list(REGIONS)
        msg = f"Region must be one of the following: {', '.join(allowed_regions)}"
        raise ConfigurationError(msg, field="region", allowed=allowed_regions)

    locale = given.get("locale", DEFAULT_LOCALE)
    allowed_locales = REGIONS[region]
    if not isinstance(locale, str) or locale not in allowed_locales:
        msg = (
            f"Locale must be one of the following for the {region} region: "
            f"{', '.join(allowed_locales)}"
        )
        raise ConfigurationError(msg, field="locale", allowed=allowed_locales)

    cache_engine = given.get("cache_engine")
    if cache_engine is not None and not isinstance(cache_engine, CacheEngine):
        msg = "Cache engine must provide get, set and exists"
        raise ConfigurationError(msg, field="cache_engine")

    try:
        return ClientOptions(
            protocol=protocol,
            region=region,
            locale=locale,
            timeout=given.get("timeout", DEFAULT_TIMEOUT_SECONDS),
            timeout_pinned="timeout" in given,
            access_token=given.get("access_token"),
            cache_engine=cache_engine,
            base_uri=given.get("base_uri", BASE_URI_TEMPLATE),
        )
    except ValidationError as e:
        field = _validation_error_field(e)
        msg = f"Invalid value for option '{field}': {e.errors()[0]['msg']}"
        raise ConfigurationError(msg, field=field) from e
