"""Unit tests for the error family."""

import pytest

from wowapi.errors import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_ILLEGAL_ARGUMENT,
    ERROR_CODE_TRANSPORT,
    ApiError,
    ConfigurationError,
    IllegalArgumentError,
    TransportError,
    WowApiError,
)


class TestWowApiError:
    """Tests for the base error."""

    def test_carries_code_message_and_detail(self) -> None:
        """Error should expose all three parts set at construction."""
        error = ApiError(404, "Not Found", {"reason": "Character not found."})

        assert error.code == 404
        assert error.message == "Not Found"
        assert error.detail == {"reason": "Character not found."}
        assert str(error) == "Not Found"

    def test_to_dict(self) -> None:
        """to_dict should include the error type name."""
        error = ApiError(503, "Service Unavailable")

        assert error.to_dict() == {
            "error": "ApiError",
            "code": 503,
            "message": "Service Unavailable",
            "detail": None,
        }

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad", field="region"),
            IllegalArgumentError("bad"),
            TransportError("down"),
            ApiError(500, "boom"),
        ],
    )
    def test_single_catch_point(self, error: WowApiError) -> None:
        """Every client error should be catchable as WowApiError."""
        with pytest.raises(WowApiError):
            raise error


class TestSubclasses:
    """Tests for local error codes and details."""

    def test_configuration_error(self) -> None:
        """ConfigurationError should name the field and allowed values."""
        error = ConfigurationError("Region invalid", field="region", allowed=("us", "eu"))

        assert error.code == ERROR_CODE_CONFIGURATION
        assert error.field == "region"
        assert error.allowed == ["us", "eu"]
        assert error.detail == {"field": "region", "allowed": ["us", "eu"]}

    def test_configuration_error_without_allowed(self) -> None:
        """Open-ended fields should not report an allowed set."""
        error = ConfigurationError("Timeout invalid", field="timeout")

        assert error.allowed is None
        assert error.detail == {"field": "timeout"}

    def test_illegal_argument_code(self) -> None:
        """IllegalArgumentError should use its local code."""
        assert IllegalArgumentError("bad sort").code == ERROR_CODE_ILLEGAL_ARGUMENT

    def test_transport_error_records_url(self) -> None:
        """TransportError should keep the URL in its detail."""
        error = TransportError("Request timed out", url="https://us.api.battle.net/wow/boss/")

        assert error.code == ERROR_CODE_TRANSPORT
        assert error.detail == {"url": "https://us.api.battle.net/wow/boss/"}

    def test_repr(self) -> None:
        """repr should show type, code and message."""
        assert repr(ApiError(404, "Not Found")) == "ApiError(code=404, message='Not Found')"
