"""Client settings powered by Pydantic BaseSettings."""

from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment configuration for the API client and the OAuth flow."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    api_key: SecretStr | None = Field(default=None, validation_alias="WOW_API_KEY")
    client_secret: SecretStr | None = Field(
        default=None, validation_alias="WOW_CLIENT_SECRET"
    )
    region: str | None = Field(default=None, validation_alias="WOW_REGION")
    locale: str | None = Field(default=None, validation_alias="WOW_LOCALE")
    protocol: str | None = Field(default=None, validation_alias="WOW_PROTOCOL")
    timeout: int | None = Field(default=None, gt=0, validation_alias="WOW_TIMEOUT")
    access_token: SecretStr | None = Field(
        default=None, validation_alias="WOW_ACCESS_TOKEN"
    )
    redirect_uri: str | None = Field(default=None, validation_alias="WOW_REDIRECT_URI")

    def to_options(self) -> dict[str, Any]:
        """Return the client options that were actually set.

        Unset values are left out so the client's own defaults apply, and an
        unset timeout stays unpinned.
        """
        options: dict[str, Any] = {
            "region": self.region,
            "locale": self.locale,
            "protocol": self.protocol,
            "timeout": self.timeout,
        }
        if self.access_token is not None:
            options["access_token"] = self.access_token.get_secret_value()
        return {k: v for k, v in options.items() if v is not None}


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
