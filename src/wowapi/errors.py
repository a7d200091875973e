"""Error types for the WoW API client.

Every failure raised by the client belongs to one family rooted at
``WowApiError`` so callers have a single catch point. Each error carries a
numeric code, a human-readable message and an optional structured detail.
"""

from collections.abc import Sequence
from typing import Any


# Local error codes for failures that never reached the origin
ERROR_CODE_TRANSPORT = 0
ERROR_CODE_CONFIGURATION = 1
ERROR_CODE_ILLEGAL_ARGUMENT = 2
ERROR_CODE_MISSING_TOKEN = 110


class WowApiError(Exception):
    """Base exception for all client errors.

    Attributes:
        code: Origin HTTP status, or a local sentinel code.
        message: Origin reason phrase, or a local description.
        detail: Decoded error body or other structured context.
    """

    def __init__(self, code: int, message: str, detail: Any = None) -> None:
        """Initialize the error.

        Args:
            code: Numeric error code.
            message: Human-readable error message.
            detail: Optional structured detail.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(WowApiError):
    """Invalid protocol, region, locale or timeout supplied at construction."""

    def __init__(
        self,
        message: str,
        field: str,
        allowed: Sequence[str] | None = None,
    ) -> None:
        """Initialize the configuration error.

        Args:
            message: Human-readable error message.
            field: Name of the offending option.
            allowed: Allowed values for the option, if it has a closed set.
        """
        detail: dict[str, Any] = {"field": field}
        if allowed is not None:
            detail["allowed"] = list(allowed)

        super().__init__(ERROR_CODE_CONFIGURATION, message, detail)
        self.field = field
        self.allowed = list(allowed) if allowed is not None else None


class IllegalArgumentError(WowApiError):
    """Invalid field selector or sort key passed to a resource call."""

    def __init__(self, message: str, detail: Any = None) -> None:
        super().__init__(ERROR_CODE_ILLEGAL_ARGUMENT, message, detail)


class TransportError(WowApiError):
    """Connection failure or timeout while talking to the origin."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(
            ERROR_CODE_TRANSPORT,
            message,
            {"url": url} if url is not None else None,
        )


class ApiError(WowApiError):
    """Non-successful response from the origin.

    Also used for locally detected API contract failures such as a missing
    access token or a payload lacking an expected field.
    """
