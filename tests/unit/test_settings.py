"""Unit tests for environment-backed settings."""

from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest

from wowapi import WowApi, WowOAuth
from wowapi.errors import ConfigurationError
from wowapi.settings import AppSettings


ENV_VARS = (
    "WOW_API_KEY",
    "WOW_CLIENT_SECRET",
    "WOW_REGION",
    "WOW_LOCALE",
    "WOW_PROTOCOL",
    "WOW_TIMEOUT",
    "WOW_ACCESS_TOKEN",
    "WOW_REDIRECT_URI",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove client variables inherited from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should be read from WOW_* variables."""
        monkeypatch.setenv("WOW_API_KEY", "env-key")
        monkeypatch.setenv("WOW_REGION", "eu")
        monkeypatch.setenv("WOW_LOCALE", "fr_FR")
        monkeypatch.setenv("WOW_TIMEOUT", "7")

        settings = AppSettings(_env_file=None)

        assert settings.api_key is not None
        assert settings.api_key.get_secret_value() == "env-key"
        assert settings.region == "eu"
        assert settings.timeout == 7

    def test_to_options_only_includes_set_values(self) -> None:
        """Unset variables should be left to the client defaults."""
        settings = AppSettings(_env_file=None)

        assert settings.to_options() == {}

    def test_to_options_unwraps_access_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The access token should be passed as a plain string."""
        monkeypatch.setenv("WOW_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("WOW_PROTOCOL", "http")

        options = AppSettings(_env_file=None).to_options()

        assert options == {"protocol": "http", "access_token": "tok"}

    def test_secrets_hidden_in_repr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Secrets should not leak through repr."""
        monkeypatch.setenv("WOW_CLIENT_SECRET", "very-secret")

        assert "very-secret" not in repr(AppSettings(_env_file=None))


class TestFromSettings:
    """Tests for WowApi.from_settings."""

    def test_builds_client(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A client should be built from the environment."""
        monkeypatch.setenv("WOW_API_KEY", "env-key")
        monkeypatch.setenv("WOW_REGION", "kr")
        monkeypatch.setenv("WOW_LOCALE", "ko_KR")

        api = WowApi.from_settings(AppSettings(_env_file=None))

        assert api.base_uri == "https://kr.api.battle.net/"
        assert api.options.timeout_pinned is False

    def test_requires_api_key(self) -> None:
        """A missing key should be a configuration error."""
        with pytest.raises(ConfigurationError, match="WOW_API_KEY"):
            WowApi.from_settings(AppSettings(_env_file=None))

    def test_invalid_region_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid environment values should fail like constructor options."""
        monkeypatch.setenv("WOW_API_KEY", "env-key")
        monkeypatch.setenv("WOW_REGION", "xx")

        with pytest.raises(ConfigurationError) as exc_info:
            WowApi.from_settings(AppSettings(_env_file=None))

        assert exc_info.value.field == "region"


class TestOAuthFromSettings:
    """Tests for WowOAuth.from_settings."""

    @pytest.fixture
    def oauth_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Application credentials for the OAuth flow."""
        monkeypatch.setenv("WOW_API_KEY", "env-key")
        monkeypatch.setenv("WOW_CLIENT_SECRET", "env-secret")
        monkeypatch.setenv("WOW_REDIRECT_URI", "https://app.example/callback")
        monkeypatch.setenv("WOW_REGION", "eu")

    @pytest.mark.usefixtures("oauth_env")
    @patch("wowapi.auth.oauth.httpx.post")
    def test_exchange_uses_configured_credentials(self, mock_post: MagicMock) -> None:
        """The token POST should carry the secret and redirect URI from settings."""
        response = MagicMock()
        response.status_code = 200
        response.json.return_value = {"access_token": "tok", "expires_in": 86399}
        mock_post.return_value = response

        oauth = WowOAuth.from_settings(AppSettings(_env_file=None))
        token = oauth.exchange_code("auth-code")

        assert token.access_token == "tok"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://eu.battle.net/oauth/token"
        assert kwargs["data"] == {
            "grant_type": "authorization_code",
            "client_id": "env-key",
            "client_secret": "env-secret",
            "redirect_uri": "https://app.example/callback",
            "code": "auth-code",
        }

    @pytest.mark.usefixtures("oauth_env")
    def test_authorization_url_uses_configured_redirect(self) -> None:
        """The authorize URL should use the configured client ID and redirect URI."""
        oauth = WowOAuth.from_settings(AppSettings(_env_file=None))

        url = oauth.authorization_url(scope="wow.profile")

        parts = urlsplit(url)
        assert parts.netloc == "eu.battle.net"
        assert parse_qs(parts.query) == {
            "response_type": ["code"],
            "client_id": ["env-key"],
            "redirect_uri": ["https://app.example/callback"],
            "scope": ["wow.profile"],
        }

    @patch("wowapi.auth.oauth.httpx.post")
    def test_missing_secret_fails_before_request(
        self, mock_post: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An unset client secret should be a configuration error, not a POST."""
        monkeypatch.setenv("WOW_API_KEY", "env-key")
        monkeypatch.setenv("WOW_REDIRECT_URI", "https://app.example/callback")

        oauth = WowOAuth.from_settings(AppSettings(_env_file=None))

        with pytest.raises(ConfigurationError, match="WOW_CLIENT_SECRET") as exc_info:
            oauth.exchange_code("auth-code")

        assert exc_info.value.field == "client_secret"
        mock_post.assert_not_called()

    def test_defaults_to_us_region(self) -> None:
        """Without WOW_REGION the US OAuth host should be used."""
        oauth = WowOAuth.from_settings(AppSettings(_env_file=None))

        assert oauth.token_endpoint == "https://us.battle.net/oauth/token"
