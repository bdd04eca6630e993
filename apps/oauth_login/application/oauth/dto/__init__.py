"""OAuth DTOs."""

from apps.oauth_login.application.oauth.dto.oauth import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
    OAuthCallbackRequest,
    OAuthCallbackResponse,
)

__all__ = [
    "OAuthAuthorizeRequest",
    "OAuthAuthorizeResponse",
    "OAuthCallbackRequest",
    "OAuthCallbackResponse",
]
