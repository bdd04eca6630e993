"""Google OAuth Provider."""

from __future__ import annotations

from typing import Any, Mapping

from apps.oauth_login.infrastructure.oauth.providers.base import OAuthIdentityProvider

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleIdentityProvider(OAuthIdentityProvider):
    """Google OAuth 프로바이더."""

    name = "google"
    authorization_endpoint = GOOGLE_AUTH_URL
    token_endpoint = GOOGLE_TOKEN_URL
    profile_url = GOOGLE_PROFILE_URL

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    def authorization_params(self) -> dict[str, str]:
        return {
            "access_type": "offline",
            "include_granted_scopes": "true",
            "prompt": "consent",
        }

    def parse_username(self, payload: Mapping[str, Any]) -> str | None:
        return payload.get("email")
