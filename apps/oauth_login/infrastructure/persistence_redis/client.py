"""Redis Client Provider.

OAuth state 저장용 클라이언트를 프로세스당 하나 생성합니다.
ConnectionError/TimeoutError는 지수 백오프로 재시도합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

if TYPE_CHECKING:
    from apps.oauth_login.setup.config import Settings

HEALTH_CHECK_INTERVAL = 30  # seconds

_client: aioredis.Redis | None = None


def create_state_redis(settings: "Settings") -> aioredis.Redis:
    """설정 기반 Redis 클라이언트 생성.

    환경변수:
        - AUTH_REDIS_OAUTH_STATE_URL (default: redis://localhost:6379/3)
        - AUTH_REDIS_SOCKET_TIMEOUT_SECONDS / AUTH_REDIS_MAX_RETRIES
    """
    return aioredis.from_url(
        settings.redis_oauth_state_url,
        decode_responses=True,
        socket_keepalive=True,
        socket_connect_timeout=settings.redis_socket_timeout_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        retry=Retry(ExponentialBackoff(), retries=settings.redis_max_retries),
        retry_on_error=[RedisConnectionError, RedisTimeoutError],
    )


def get_oauth_state_redis() -> aioredis.Redis:
    """OAuth state 저장용 Redis 클라이언트 (최초 호출 시 생성)."""
    global _client
    if _client is None:
        from apps.oauth_login.setup.config import get_settings

        _client = create_state_redis(get_settings())
    return _client


async def close_oauth_state_redis() -> None:
    """Redis 연결 종료 (shutdown 시)."""
    global _client
    if _client is not None:
        await _client.aclose()
    _client = None
