"""ReferrerService - OAuth state와 referrer 관리 서비스.

로그인 시작 시 referrer를 화이트리스트로 검증한 뒤 state id로 저장하고,
콜백 시 state id로 referrer를 한 번만 꺼내고 삭제합니다.

동시에 도착한 콜백이 같은 state를 소비하는 경우 저장소의 트랜잭션 격리
(행 잠금 또는 원자적 삭제)에 의해 정확히 하나만 성공합니다.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from uuid import UUID

from apps.oauth_login.application.common.exceptions import (
    ApplicationError,
    ConfigurationError,
    NotFoundError,
)
from apps.oauth_login.application.oauth.exceptions import (
    InvalidRedirectError,
    InvalidStateError,
)
from apps.oauth_login.application.oauth.ports import StateReference

if TYPE_CHECKING:
    from apps.oauth_login.application.common.ports import TransactionManager
    from apps.oauth_login.application.oauth.ports import StateReferenceGateway

logger = logging.getLogger(__name__)


class ReferrerService:
    """OAuth state/referrer 서비스.

    Collaborators:
        - StateReferenceGateway: state 레코드 생성/조회/삭제
        - TransactionManager: 트랜잭션 범위
    """

    def __init__(
        self,
        gateway: "StateReferenceGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._transaction_manager = transaction_manager

    async def save_referrer(
        self,
        state: UUID,
        referrer: str,
        valid_referrer_url: str,
    ) -> None:
        """referrer를 검증하고 state id로 저장합니다.

        Args:
            state: 새로 발급한 state id
            referrer: 로그인 후 돌아갈 URL
            valid_referrer_url: referrer 전체가 일치해야 하는 정규식

        Raises:
            ConfigurationError: 화이트리스트 정규식이 잘못됨
            InvalidRedirectError: referrer가 화이트리스트와 불일치
            PersistenceError: 저장 실패 (중복 id 포함)
        """
        try:
            matched = re.fullmatch(valid_referrer_url, referrer) is not None
        except re.error as e:
            logger.error(
                "Can't match referrer and whitelist regex",
                extra={
                    "referrer": referrer,
                    "valid_referrer_url": valid_referrer_url,
                    "error": str(e),
                },
            )
            raise ConfigurationError(f"Invalid referrer whitelist pattern: {e}") from e

        if not matched:
            logger.error(
                "Referrer not valid",
                extra={"referrer": referrer, "valid_referrer_url": valid_referrer_url},
            )
            raise InvalidRedirectError()

        reference = StateReference(id=state, referrer=referrer)
        try:
            async with self._transaction_manager.begin():
                await self._gateway.create(reference)
        except ApplicationError as e:
            logger.error(
                "unable to create oauth state reference",
                extra={"state": str(state), "referrer": referrer, "error": e.message},
            )
            raise

    async def load_referrer(self, state: str) -> str:
        """state id에 해당하는 referrer를 조회하고 레코드를 삭제합니다.

        조회와 삭제가 모두 성공해야 커밋되며, 한 번 소비된 state는 다시 조회되지 않습니다.

        Args:
            state: 콜백으로 전달된 state 문자열

        Returns:
            저장되어 있던 referrer

        Raises:
            InvalidStateError: state 형식 오류 (저장소 접근 없음)
            StateNotFoundError: 레코드 없음 또는 이미 소비됨
            PersistenceError: 저장소 오류
        """
        try:
            state_id = UUID(state)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(
                "unable to convert oauth state to uuid",
                extra={"state": state, "error": str(e)},
            )
            raise InvalidStateError() from e

        try:
            async with self._transaction_manager.begin():
                reference = await self._gateway.load(state_id)
                await self._gateway.delete(state_id)
        except NotFoundError:
            logger.warning("oauth state reference not found", extra={"state": state})
            raise
        except ApplicationError as e:
            logger.error(
                "unable to delete oauth state reference",
                extra={"state": state, "error": e.message},
            )
            raise

        return reference.referrer
