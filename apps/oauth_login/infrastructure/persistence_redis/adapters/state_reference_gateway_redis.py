"""Redis State Reference Gateway.

StateReferenceGateway 포트의 TTL 기반 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from redis.exceptions import RedisError

from apps.oauth_login.application.common.exceptions import PersistenceError
from apps.oauth_login.application.oauth.exceptions import StateNotFoundError
from apps.oauth_login.application.oauth.ports import StateReference
from apps.oauth_login.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisStateReferenceGateway:
    """Redis 기반 OAuth state 저장소.

    DEL이 삭제한 키 개수로 소비 성공 여부를 판단하므로,
    같은 state를 동시에 소비해도 하나의 요청만 성공합니다.
    """

    def __init__(self, redis: "aioredis.Redis", ttl_seconds: int = 600) -> None:
        self._redis = redis
        self._ttl_seconds = ttl_seconds

    @staticmethod
    def _key(state_id: UUID) -> str:
        return f"{STATE_KEY_PREFIX}{state_id}"

    async def create(self, reference: StateReference) -> None:
        """레코드 생성 (SET NX EX)."""
        try:
            created = await self._redis.set(
                self._key(reference.id),
                reference.referrer,
                ex=self._ttl_seconds,
                nx=True,
            )
        except RedisError as e:
            raise PersistenceError(f"unable to create oauth state reference: {e}") from e

        if not created:
            raise PersistenceError(f"oauth state reference already exists: {reference.id}")

    async def load(self, state_id: UUID) -> StateReference:
        """레코드 조회."""
        try:
            value = await self._redis.get(self._key(state_id))
        except RedisError as e:
            raise PersistenceError(f"unable to load oauth state reference: {e}") from e

        if value is None:
            raise StateNotFoundError(state_id)
        return StateReference(id=state_id, referrer=value)

    async def delete(self, state_id: UUID) -> None:
        """레코드 삭제."""
        try:
            deleted = await self._redis.delete(self._key(state_id))
        except RedisError as e:
            raise PersistenceError(f"unable to delete oauth state reference: {e}") from e

        if not deleted:
            raise StateNotFoundError(state_id)
