"""OAuth DTOs."""

from dataclasses import dataclass

from apps.oauth_login.application.oauth.ports import OAuthToken, UserProfile


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    """OAuth 인증 요청."""

    provider: str
    referrer: str


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """OAuth 인증 응답."""

    authorization_url: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackResponse:
    """OAuth 콜백 응답."""

    referrer: str
    token: OAuthToken
    profile: UserProfile
