"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.oauth_login.application.common.exceptions import PersistenceError


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """트랜잭션을 시작합니다.

        블록이 정상 종료되면 커밋, 예외가 발생하면 롤백합니다.
        """
        try:
            async with self._session.begin():
                yield
        except SQLAlchemyError as e:
            raise PersistenceError(f"transaction failed: {e}") from e
