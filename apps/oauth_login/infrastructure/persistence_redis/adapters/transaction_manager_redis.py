"""Redis Transaction Manager.

Redis 백엔드에서 각 트랜잭션 범위의 쓰기는 단일 원자 명령(SET NX 또는 DEL)뿐이므로
별도의 커밋/롤백 처리가 필요 없습니다.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator


class RedisTransactionManager:
    """트랜잭션 관리자 Redis 구현."""

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """트랜잭션 범위 (no-op)."""
        yield
