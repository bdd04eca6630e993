"""OAuthAuthorize Command.

OAuth 인증 URL 생성 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthAuthorizeInteractor
    - Services(연주자): ReferrerService
    - Ports(인프라): IdentityProviderRegistry
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from apps.oauth_login.application.oauth.dto import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
)

if TYPE_CHECKING:
    from apps.oauth_login.application.oauth.ports import IdentityProviderRegistry
    from apps.oauth_login.application.oauth.services import ReferrerService

logger = logging.getLogger(__name__)


class OAuthAuthorizeInteractor:
    """OAuth 인증 URL 생성 Interactor (지휘자).

    Workflow:
        1. 프로바이더 조회 (미등록이면 저장 전에 실패)
        2. 랜덤 state 생성 (CSRF 방지)
        3. referrer 검증 및 저장 (ReferrerService)
        4. 인증 URL 반환 (IdentityProvider)
    """

    def __init__(
        self,
        referrer_service: "ReferrerService",
        provider_registry: "IdentityProviderRegistry",
        valid_referrer_url: str,
    ) -> None:
        self._referrer_service = referrer_service
        self._provider_registry = provider_registry
        self._valid_referrer_url = valid_referrer_url

    async def execute(self, request: OAuthAuthorizeRequest) -> OAuthAuthorizeResponse:
        """OAuth 인증 URL을 생성합니다.

        Raises:
            UnknownProviderError: 등록되지 않은 프로바이더
            InvalidRedirectError: referrer 검증 실패
            PersistenceError: state 저장 실패
        """
        provider = self._provider_registry.get(request.provider)

        state = uuid.uuid4()
        await self._referrer_service.save_referrer(
            state,
            request.referrer,
            self._valid_referrer_url,
        )

        authorization_url = provider.authorization_url(str(state))

        logger.info(
            "OAuth login started",
            extra={"provider": request.provider, "state": str(state)},
        )

        return OAuthAuthorizeResponse(
            authorization_url=authorization_url,
            state=str(state),
        )
