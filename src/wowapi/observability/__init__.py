"""Logging setup for applications embedding the client."""

from wowapi.observability.logging import (
    bind_client_context,
    clear_client_context,
    configure_logging,
    get_logger,
)


__all__ = [
    "bind_client_context",
    "clear_client_context",
    "configure_logging",
    "get_logger",
]
