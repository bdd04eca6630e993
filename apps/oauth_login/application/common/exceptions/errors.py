"""Common Application Errors.

로그인 플로우 전반에서 사용하는 오류 분류입니다.

    - ValidationError: 입력값 검증 실패 (저장소 변경 없음)
    - NotFoundError: 대상 리소스 없음
    - UpstreamError: 외부 프로바이더 통신 실패 또는 비정상 응답
    - PersistenceError: 저장소 실패
    - ConfigurationError: 내부 설정 오류
"""

from __future__ import annotations

from typing import Any

from apps.oauth_login.application.common.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """입력값 검증 실패."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class NotFoundError(ApplicationError):
    """리소스를 찾을 수 없음."""

    def __init__(self, resource: str, identifier: object) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UpstreamError(ApplicationError):
    """외부 프로바이더 오류.

    context에는 진단용 정보(endpoint, status 등)가 담깁니다.
    응답 본문은 로그로만 남기고 context에는 넣지 않습니다.
    """

    def __init__(self, reason: str, context: dict[str, Any] | None = None) -> None:
        self.reason = reason
        self.context = dict(context or {})
        super().__init__(reason)


class PersistenceError(ApplicationError):
    """저장소 오류."""

    def __init__(self, reason: str = "Persistence failure") -> None:
        super().__init__(reason)


class ConfigurationError(ApplicationError):
    """내부 설정 오류."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
