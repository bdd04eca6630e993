"""Logging Configuration.

ECS JSON 포맷으로 stdout에 출력하며, 모든 레코드에 service 메타데이터를 붙입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.oauth_login.setup.config import get_settings

# 요청 URL에 code/state가 포함되므로 INFO 로그를 남기지 않음
QUIET_LOGGERS = ("httpx", "httpcore")

_base_record_factory = logging.getLogRecordFactory()


def setup_logging(level: str | None = None) -> None:
    """로깅 설정.

    여러 번 호출해도 핸들러와 레코드 팩토리는 하나만 유지됩니다.

    Args:
        level: 로그 레벨 (생략 시 LOG_LEVEL 설정값)
    """
    settings = get_settings()
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = dict(service)
        return record

    logging.setLogRecordFactory(record_factory)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((level or settings.log_level).upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
