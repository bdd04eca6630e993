"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.oauth_login.infrastructure.oauth.providers.base import OAuthIdentityProvider
from apps.oauth_login.infrastructure.oauth.providers.github import GitHubIdentityProvider
from apps.oauth_login.infrastructure.oauth.providers.google import GoogleIdentityProvider
from apps.oauth_login.infrastructure.oauth.providers.keycloak import (
    KeycloakIdentityProvider,
)

__all__ = [
    "OAuthIdentityProvider",
    "GitHubIdentityProvider",
    "GoogleIdentityProvider",
    "KeycloakIdentityProvider",
]
