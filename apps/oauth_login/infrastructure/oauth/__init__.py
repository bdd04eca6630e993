"""OAuth Provider Implementations."""

from apps.oauth_login.infrastructure.oauth.client import build_http_client
from apps.oauth_login.infrastructure.oauth.providers import (
    GitHubIdentityProvider,
    GoogleIdentityProvider,
    KeycloakIdentityProvider,
    OAuthIdentityProvider,
)
from apps.oauth_login.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "OAuthIdentityProvider",
    "GitHubIdentityProvider",
    "GoogleIdentityProvider",
    "KeycloakIdentityProvider",
    "ProviderRegistry",
    "build_http_client",
]
