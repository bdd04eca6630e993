"""GitHub OAuth Provider."""

from __future__ import annotations

from typing import Any, Mapping

from apps.oauth_login.infrastructure.oauth.providers.base import OAuthIdentityProvider

GITHUB_AUTH_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_PROFILE_URL = "https://api.github.com/user"


class GitHubIdentityProvider(OAuthIdentityProvider):
    """GitHub OAuth 프로바이더."""

    name = "github"
    authorization_endpoint = GITHUB_AUTH_URL
    token_endpoint = GITHUB_TOKEN_URL
    profile_url = GITHUB_PROFILE_URL

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("read:user", "user:email")

    def parse_username(self, payload: Mapping[str, Any]) -> str | None:
        return payload.get("login")
