"""StateReferenceGateway Port.

OAuth state 레코드(state -> referrer) 저장소 인터페이스입니다.
모든 호출은 TransactionManager.begin() 범위 안에서 이루어집니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True, slots=True)
class StateReference:
    """진행 중인 로그인 시도 하나에 대한 레코드.

    생성 후 수정되지 않으며, 콜백 시 한 번 조회되고 삭제됩니다.
    """

    id: UUID
    referrer: str


class StateReferenceGateway(Protocol):
    """OAuth state 저장소 인터페이스.

    구현체:
        - SqlaStateReferenceGateway (infrastructure/persistence_postgres/)
        - RedisStateReferenceGateway (infrastructure/persistence_redis/)
    """

    async def create(self, reference: StateReference) -> None:
        """레코드 생성.

        Raises:
            PersistenceError: 동일 id가 이미 존재하거나 저장소 오류
        """
        ...

    async def load(self, state_id: UUID) -> StateReference:
        """id로 레코드 조회.

        Raises:
            StateNotFoundError: 레코드 없음
            PersistenceError: 저장소 오류
        """
        ...

    async def delete(self, state_id: UUID) -> None:
        """id로 레코드 삭제.

        Raises:
            StateNotFoundError: 삭제할 레코드 없음 (다른 요청이 먼저 소비)
            PersistenceError: 저장소 오류
        """
        ...
