"""OAuth domain exceptions."""

from apps.oauth_login.application.oauth.exceptions.oauth import (
    InvalidRedirectError,
    InvalidStateError,
    OAuthProviderError,
    StateNotFoundError,
    UnknownProviderError,
)

__all__ = [
    "InvalidRedirectError",
    "InvalidStateError",
    "OAuthProviderError",
    "StateNotFoundError",
    "UnknownProviderError",
]
