"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends, Request

from apps.oauth_login.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from apps.oauth_login.application.oauth.commands import (
        OAuthAuthorizeInteractor,
        OAuthCallbackInteractor,
    )
    from apps.oauth_login.application.oauth.services import ReferrerService
    from apps.oauth_login.infrastructure.oauth import ProviderRegistry


# ============================================================
# Infrastructure Dependencies
# ============================================================


def get_provider_registry(request: Request) -> "ProviderRegistry":
    """ProviderRegistry 제공자 (lifespan에서 생성)."""
    return request.app.state.provider_registry


# ============================================================
# Service Dependencies
# ============================================================


async def get_referrer_service(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator["ReferrerService", None]:
    """ReferrerService 제공자.

    AUTH_STATE_STORE_BACKEND 값에 따라 저장소 구현을 선택합니다.
    """
    from apps.oauth_login.application.oauth.services import ReferrerService

    if settings.state_store_backend == "redis":
        from apps.oauth_login.infrastructure.persistence_redis import (
            RedisStateReferenceGateway,
            RedisTransactionManager,
        )
        from apps.oauth_login.infrastructure.persistence_redis.client import (
            get_oauth_state_redis,
        )

        yield ReferrerService(
            RedisStateReferenceGateway(
                get_oauth_state_redis(),
                ttl_seconds=settings.oauth_state_ttl_seconds,
            ),
            RedisTransactionManager(),
        )
        return

    from apps.oauth_login.infrastructure.persistence_postgres import (
        SqlaStateReferenceGateway,
        SqlaTransactionManager,
    )
    from apps.oauth_login.infrastructure.persistence_postgres.session import (
        get_async_session,
    )

    async for session in get_async_session():
        yield ReferrerService(
            SqlaStateReferenceGateway(session),
            SqlaTransactionManager(session),
        )


# ============================================================
# Use Case Dependencies
# ============================================================


def get_oauth_authorize_interactor(
    referrer_service: "ReferrerService" = Depends(get_referrer_service),
    provider_registry: "ProviderRegistry" = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings),
) -> "OAuthAuthorizeInteractor":
    """OAuthAuthorizeInteractor 제공자."""
    from apps.oauth_login.application.oauth.commands import OAuthAuthorizeInteractor

    return OAuthAuthorizeInteractor(
        referrer_service=referrer_service,
        provider_registry=provider_registry,
        valid_referrer_url=settings.valid_referrer_url,
    )


def get_oauth_callback_interactor(
    referrer_service: "ReferrerService" = Depends(get_referrer_service),
    provider_registry: "ProviderRegistry" = Depends(get_provider_registry),
) -> "OAuthCallbackInteractor":
    """OAuthCallbackInteractor 제공자."""
    from apps.oauth_login.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(
        referrer_service=referrer_service,
        provider_registry=provider_registry,
    )
