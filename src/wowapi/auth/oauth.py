"""Battle.net OAuth authorization-code flow."""

from urllib.parse import urlencode

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from wowapi.config.constants import (
    COMPONENT_OAUTH,
    DEFAULT_REGION,
    OAUTH_AUTHORIZE_PATH,
    OAUTH_HOST_TEMPLATE,
    OAUTH_TOKEN_PATH,
    REGIONS,
)
from wowapi.errors import ApiError, ConfigurationError, TransportError
from wowapi.fetch.constants import HTTP_STATUS_OK_MAX, HTTP_STATUS_OK_MIN
from wowapi.settings.app import AppSettings, get_settings


logger = structlog.get_logger()

_DEFAULT_TIMEOUT_SECONDS = 15.0


def _unwrap(secret: SecretStr | None) -> str | None:
    return secret.get_secret_value() if secret is not None else None


def _require(value: str | None, field: str, env_var: str) -> str:
    if not value:
        msg = f"OAuth {field} is not configured (set {env_var})"
        raise ConfigurationError(msg, field=field)
    return value


class OAuthToken(BaseModel):
    """Access token returned by the token endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = Field(min_length=1, repr=False)
    token_type: str = "bearer"
    expires_in: int | None = None
    scope: str | None = None


class WowOAuth:
    """Builds authorization redirects and exchanges codes for tokens.

    Application credentials may be configured once (see from_settings) and
    are then used by authorization_url and exchange_code. Tokens are never
    stored: the caller keeps the returned token and passes it as the
    ``access_token`` option to authenticated services.
    """

    def __init__(
        self,
        region: str = DEFAULT_REGION,
        http_client: httpx.Client | None = None,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
    ) -> None:
        """Initialize the OAuth helper.

        Args:
            region: Region whose OAuth host is used.
            http_client: Shared httpx client; module-level httpx.post when omitted.
            timeout: Token request timeout in seconds.
            client_id: Default application client ID (the API key).
            client_secret: Default application client secret.
            redirect_uri: Default redirect URI registered for the application.

        Raises:
            ConfigurationError: If the region is unknown.
        """
        if not isinstance(region, str) or region not in REGIONS:
            allowed = list(REGIONS)
            msg = f"Region must be one of the following: {', '.join(allowed)}"
            raise ConfigurationError(msg, field="region", allowed=allowed)

        self._host = OAUTH_HOST_TEMPLATE.format(region=region)
        self._http_client = http_client
        self._timeout = timeout
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._log = logger.bind(component=COMPONENT_OAUTH, region=region)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> "WowOAuth":
        """Create an OAuth helper from environment-backed settings.

        WOW_API_KEY is the client ID, WOW_CLIENT_SECRET the secret and
        WOW_REDIRECT_URI the redirect URI. Missing values are only reported
        when a call needs them.
        """
        settings = settings or get_settings()
        return cls(
            settings.region or DEFAULT_REGION,
            http_client=http_client,
            client_id=_unwrap(settings.api_key),
            client_secret=_unwrap(settings.client_secret),
            redirect_uri=settings.redirect_uri,
        )

    @property
    def authorize_endpoint(self) -> str:
        """Get the browser redirect endpoint."""
        return self._host + OAUTH_AUTHORIZE_PATH

    @property
    def token_endpoint(self) -> str:
        """Get the server-to-server token endpoint."""
        return self._host + OAUTH_TOKEN_PATH

    def build_authorization_url(
        self,
        client_id: str,
        redirect_uri: str,
        scope: str | None = None,
        state: str | None = None,
    ) -> str:
        """Build the URL the user's browser is redirected to.

        Args:
            client_id: Application client ID.
            redirect_uri: Where the origin sends the user back with a code.
            scope: Optional space-separated scopes, e.g. "wow.profile".
            state: Optional opaque value echoed back on redirect.

        Returns:
            Authorization URL.
        """
        params = {
            "response_type": "code",
            "client_id": client_id,
            "redirect_uri": redirect_uri,
        }
        if scope:
            params["scope"] = scope
        if state:
            params["state"] = state

        return f"{self.authorize_endpoint}?{urlencode(params)}"

    def authorization_url(self, scope: str | None = None, state: str | None = None) -> str:
        """Build the authorization URL from the configured credentials.

        Raises:
            ConfigurationError: If the client ID or redirect URI is not configured.
        """
        return self.build_authorization_url(
            _require(self._client_id, "client_id", "WOW_API_KEY"),
            _require(self._redirect_uri, "redirect_uri", "WOW_REDIRECT_URI"),
            scope=scope,
            state=state,
        )

    def exchange_code(self, code: str) -> OAuthToken:
        """Exchange a code for a token using the configured credentials.

        Raises:
            ConfigurationError: If a credential is not configured.
            TransportError: On network failure.
            ApiError: On a non-2xx response or a response without a token.
        """
        return self.exchange_code_for_token(
            _require(self._client_id, "client_id", "WOW_API_KEY"),
            _require(self._client_secret, "client_secret", "WOW_CLIENT_SECRET"),
            _require(self._redirect_uri, "redirect_uri", "WOW_REDIRECT_URI"),
            code,
        )

    def exchange_code_for_token(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        code: str,
    ) -> OAuthToken:
        """Exchange an authorization code for an access token.

        Args:
            client_id: Application client ID.
            client_secret: Application client secret.
            redirect_uri: The redirect URI used to obtain the code.
            code: Authorization code from the redirect.

        Returns:
            The access token.

        Raises:
            TransportError: On network failure.
            ApiError: On a non-2xx response or a response without a token.
        """
        data = {
            "grant_type": "authorization_code",
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "code": code,
        }
        post = self._http_client.post if self._http_client is not None else httpx.post

        try:
            response = post(self.token_endpoint, data=data, timeout=self._timeout)
        except httpx.HTTPError as exc:
            self._log.warning("oauth_token_network_error", error=str(exc))
            msg = f"Network error during token exchange: {exc}"
            raise TransportError(msg, url=self.token_endpoint) from exc

        if not HTTP_STATUS_OK_MIN <= response.status_code < HTTP_STATUS_OK_MAX:
            self._log.warning(
                "oauth_token_exchange_failed",
                status_code=response.status_code,
            )
            try:
                detail = response.json()
            except ValueError:
                detail = None
            raise ApiError(response.status_code, response.reason_phrase, detail)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Invalid JSON response") from exc

        if not isinstance(payload, dict) or not payload.get("access_token"):
            msg = "No access_token in token response"
            raise ApiError(response.status_code, msg, payload)

        self._log.info("oauth_token_exchanged", expires_in=payload.get("expires_in"))
        return OAuthToken.model_validate(payload)
