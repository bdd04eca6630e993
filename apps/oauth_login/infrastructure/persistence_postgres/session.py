"""PostgreSQL Session Management.

엔진과 세션 팩토리는 프로세스당 하나이며, lifespan 종료 시 dispose_engine()으로 정리합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

if TYPE_CHECKING:
    from apps.oauth_login.setup.config import Settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_engine_from_settings(settings: "Settings") -> AsyncEngine:
    """설정 기반 AsyncEngine 생성.

    환경변수:
        - AUTH_DATABASE_URL
        - AUTH_DB_POOL_SIZE / AUTH_DB_MAX_OVERFLOW / AUTH_DB_POOL_RECYCLE_SECONDS
        - AUTH_DB_ECHO
    """
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 (최초 호출 시 엔진 생성)."""
    global _engine, _session_factory
    if _session_factory is None:
        from apps.oauth_login.setup.config import get_settings

        _engine = create_engine_from_settings(get_settings())
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자."""
    async with get_session_factory()() as session:
        yield session


async def dispose_engine() -> None:
    """엔진 종료 (shutdown 시)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
