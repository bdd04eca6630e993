"""Transaction manager port."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트.

    begin() 블록이 예외 없이 끝나면 커밋, 예외가 발생하면 롤백 후 예외를 다시 던집니다.
    """

    def begin(self) -> AbstractAsyncContextManager[None]:
        """트랜잭션 범위를 시작합니다."""
        ...
