"""OAuth domain ports.

OAuth 인증 관련 포트입니다.
"""

from apps.oauth_login.application.oauth.ports.identity_provider import (
    IdentityProvider,
    IdentityProviderRegistry,
    OAuthToken,
    UserProfile,
)
from apps.oauth_login.application.oauth.ports.state_reference_gateway import (
    StateReference,
    StateReferenceGateway,
)

__all__ = [
    "IdentityProvider",
    "IdentityProviderRegistry",
    "OAuthToken",
    "UserProfile",
    "StateReference",
    "StateReferenceGateway",
]
