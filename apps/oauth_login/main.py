"""OAuth Login API Application Entry Point.

OAuth2 authorization code 로그인 플로우 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.oauth_login.infrastructure.oauth import ProviderRegistry, build_http_client
from apps.oauth_login.presentation.http.controllers import root_router
from apps.oauth_login.presentation.http.errors import register_exception_handlers
from apps.oauth_login.setup.config import get_settings
from apps.oauth_login.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()

    # Startup
    logger.info("Starting OAuth Login API")
    http_client = build_http_client(settings.http_timeout_seconds)
    app.state.http_client = http_client
    app.state.provider_registry = ProviderRegistry.from_settings(settings, http_client)

    yield

    # Shutdown
    logger.info("Shutting down OAuth Login API")
    await http_client.aclose()
    if settings.state_store_backend == "redis":
        from apps.oauth_login.infrastructure.persistence_redis.client import (
            close_oauth_state_redis,
        )

        await close_oauth_state_redis()
    else:
        from apps.oauth_login.infrastructure.persistence_postgres.session import (
            dispose_engine,
        )

        await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="OAuth2 로그인 서비스",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    @app.get("/health")
    async def root_health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.oauth_login.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
