"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthCallbackInteractor
    - Services(연주자): ReferrerService
    - Ports(인프라): IdentityProviderRegistry
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_login.application.oauth.dto import (
    OAuthCallbackRequest,
    OAuthCallbackResponse,
)

if TYPE_CHECKING:
    from apps.oauth_login.application.oauth.ports import IdentityProviderRegistry
    from apps.oauth_login.application.oauth.services import ReferrerService

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 프로바이더 조회
        2. state 소비 및 referrer 복원 (ReferrerService, 일회용)
        3. 인증 코드로 토큰 교환 (IdentityProvider)
        4. 사용자 프로필 조회 (IdentityProvider)

    state를 먼저 소비하므로 재전송된 콜백은 프로바이더까지 도달하지 않습니다.
    """

    def __init__(
        self,
        referrer_service: "ReferrerService",
        provider_registry: "IdentityProviderRegistry",
    ) -> None:
        self._referrer_service = referrer_service
        self._provider_registry = provider_registry

    async def execute(self, request: OAuthCallbackRequest) -> OAuthCallbackResponse:
        """OAuth 콜백을 처리합니다.

        Raises:
            UnknownProviderError: 등록되지 않은 프로바이더
            InvalidStateError: state 형식 오류
            StateNotFoundError: state 없음 또는 이미 소비됨
            OAuthProviderError: 프로바이더 오류
            PersistenceError: 저장소 오류
        """
        provider = self._provider_registry.get(request.provider)

        referrer = await self._referrer_service.load_referrer(request.state)

        token = await provider.exchange(request.code)
        profile = await provider.profile(token)

        logger.info(
            "OAuth login successful",
            extra={"provider": request.provider, "username": profile.username},
        )

        return OAuthCallbackResponse(referrer=referrer, token=token, profile=profile)
