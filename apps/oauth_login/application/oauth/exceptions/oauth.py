"""OAuth Exceptions."""

from __future__ import annotations

from typing import Any

from apps.oauth_login.application.common.exceptions import (
    NotFoundError,
    UpstreamError,
    ValidationError,
)


class InvalidRedirectError(ValidationError):
    """리다이렉트 URL이 화이트리스트 패턴과 일치하지 않음."""

    def __init__(self) -> None:
        super().__init__("redirect", "not valid redirect URL")


class InvalidStateError(ValidationError):
    """state 값이 올바른 식별자 형식이 아님."""

    def __init__(self, reason: str = "not a valid state identifier") -> None:
        super().__init__("state", reason)


class StateNotFoundError(NotFoundError):
    """state에 해당하는 레코드가 없음 (미발급 또는 이미 소비됨)."""

    def __init__(self, state: object) -> None:
        super().__init__("oauth_state_reference", state)


class UnknownProviderError(NotFoundError):
    """등록되지 않은 OAuth 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__("identity_provider", provider)


class OAuthProviderError(UpstreamError):
    """OAuth 프로바이더 오류."""

    def __init__(
        self,
        provider: str,
        reason: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.provider = provider
        merged = {"provider": provider, **(context or {})}
        super().__init__(f"OAuth provider error ({provider}): {reason}", merged)
