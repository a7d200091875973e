"""Python client for the World of Warcraft community API."""

from wowapi.auth import OAuthToken, WowOAuth
from wowapi.cache import CacheEngine, ResponseEnvelope, SimpleCache
from wowapi.config import ClientOptions, resolve_options
from wowapi.errors import (
    ApiError,
    ConfigurationError,
    IllegalArgumentError,
    TransportError,
    WowApiError,
)
from wowapi.mapping import Component
from wowapi.services import WowApi


__all__ = [
    "ApiError",
    "CacheEngine",
    "ClientOptions",
    "Component",
    "ConfigurationError",
    "IllegalArgumentError",
    "OAuthToken",
    "ResponseEnvelope",
    "SimpleCache",
    "TransportError",
    "WowApi",
    "WowApiError",
    "WowOAuth",
    "resolve_options",
]
