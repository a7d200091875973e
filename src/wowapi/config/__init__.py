"""Client configuration: static tables and option resolution."""

from wowapi.config.constants import (
    BASE_URI_TEMPLATE,
    DEFAULT_LOCALE,
    DEFAULT_PROTOCOL,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT_SECONDS,
    REGIONS,
)
from wowapi.config.options import ClientOptions, resolve_options


__all__ = [
    "BASE_URI_TEMPLATE",
    "DEFAULT_LOCALE",
    "DEFAULT_PROTOCOL",
    "DEFAULT_REGION",
    "DEFAULT_TIMEOUT_SECONDS",
    "REGIONS",
    "ClientOptions",
    "resolve_options",
]
