"""SQLAlchemy implementation of state reference gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.oauth_login.application.common.exceptions import PersistenceError
from apps.oauth_login.application.oauth.exceptions import StateNotFoundError
from apps.oauth_login.application.oauth.ports import StateReference
from apps.oauth_login.infrastructure.persistence_postgres.mappings import (
    oauth_state_references_table,
)


class SqlaStateReferenceGateway:
    """OAuth state 레코드 게이트웨이 SQLAlchemy 구현.

    load()는 SELECT ... FOR UPDATE로 행을 잠가, 같은 state를 동시에 소비하는
    트랜잭션이 직렬화되도록 합니다. 뒤에 온 트랜잭션은 잠금 해제 후 행이 사라진 것을 봅니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, reference: StateReference) -> None:
        """레코드를 생성합니다."""
        stmt = insert(oauth_state_references_table).values(
            id=reference.id,
            referrer=reference.referrer,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as e:
            raise PersistenceError(f"oauth state reference already exists: {reference.id}") from e
        except SQLAlchemyError as e:
            raise PersistenceError(f"unable to create oauth state reference: {e}") from e

    async def load(self, state_id: UUID) -> StateReference:
        """레코드를 잠그고 조회합니다."""
        stmt = (
            select(
                oauth_state_references_table.c.id,
                oauth_state_references_table.c.referrer,
            )
            .where(oauth_state_references_table.c.id == state_id)
            .with_for_update()
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"unable to load oauth state reference: {e}") from e

        row = result.one_or_none()
        if row is None:
            raise StateNotFoundError(state_id)
        return StateReference(id=row.id, referrer=row.referrer)

    async def delete(self, state_id: UUID) -> None:
        """레코드를 삭제합니다."""
        stmt = delete(oauth_state_references_table).where(
            oauth_state_references_table.c.id == state_id
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"unable to delete oauth state reference: {e}") from e

        if result.rowcount == 0:
            raise StateNotFoundError(state_id)
