"""Application Exceptions.

공통 예외만 포함합니다. OAuth 전용 예외는 apps.oauth_login.application.oauth.exceptions를 사용하세요.
"""

from apps.oauth_login.application.common.exceptions.base import ApplicationError
from apps.oauth_login.application.common.exceptions.errors import (
    ConfigurationError,
    NotFoundError,
    PersistenceError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "NotFoundError",
    "PersistenceError",
    "UpstreamError",
    "ValidationError",
]
