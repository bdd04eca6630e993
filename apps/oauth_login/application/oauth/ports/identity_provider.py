"""IdentityProvider Port.

외부 OAuth 프로바이더(GitHub, Google, Keycloak 등)와의 통신 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True, slots=True)
class OAuthToken:
    """코드 교환으로 받은 액세스 토큰.

    불투명 값으로 취급하며, Bearer 헤더를 만드는 용도로만 사용합니다.
    """

    access_token: str
    token_type: str = "Bearer"
    refresh_token: str | None = None
    expires_in: int | None = None
    scope: str | None = None


@dataclass(frozen=True, slots=True)
class UserProfile:
    """정규화된 최소 사용자 프로필."""

    username: str


class IdentityProvider(Protocol):
    """OAuth 프로바이더 인터페이스.

    구현체:
        - GitHubIdentityProvider, GoogleIdentityProvider, KeycloakIdentityProvider
          (infrastructure/oauth/providers/)
    """

    name: str

    def authorization_url(
        self,
        state: str,
        *,
        redirect_uri: str | None = None,
        scope: str | None = None,
        extra_params: Mapping[str, str] | None = None,
    ) -> str:
        """state를 포함한 인증 URL 생성 (부수효과 없음)."""
        ...

    async def exchange(self, code: str, *, redirect_uri: str | None = None) -> OAuthToken:
        """인증 코드로 토큰 교환.

        Raises:
            OAuthProviderError: 네트워크 오류 또는 프로바이더 거부
        """
        ...

    async def fetch_profile_payload(self, token: OAuthToken) -> bytes:
        """프로필 엔드포인트의 원본 응답 본문 조회.

        Raises:
            OAuthProviderError: 네트워크 오류 또는 2xx 이외의 응답
        """
        ...

    async def profile(self, token: OAuthToken) -> UserProfile:
        """프로필 조회 후 UserProfile로 변환."""
        ...


class IdentityProviderRegistry(Protocol):
    """프로바이더 식별자로 IdentityProvider를 찾는 레지스트리."""

    def get(self, provider: str) -> IdentityProvider:
        """프로바이더 조회.

        Raises:
            UnknownProviderError: 등록되지 않은 프로바이더
        """
        ...
