"""OAuth helpers for user-context API calls."""

from wowapi.auth.oauth import OAuthToken, WowOAuth


__all__ = ["OAuthToken", "WowOAuth"]
