"""HTTP Client Factory.

프로바이더 호출에 사용하는 httpx.AsyncClient를 생성합니다.
클라이언트는 애플리케이션 생명주기(lifespan)에서 생성/종료되어 주입됩니다.
"""

from __future__ import annotations

import httpx

MAX_CONNECTIONS = 50
MAX_KEEPALIVE_CONNECTIONS = 10


def build_http_client(
    timeout_seconds: float,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """프로바이더 통신용 비동기 HTTP 클라이언트 생성.

    Args:
        timeout_seconds: connect/read/write/pool 공통 타임아웃 (설정에서 주입)
        transport: 테스트용 transport (httpx.MockTransport 등)
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(
            max_connections=MAX_CONNECTIONS,
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
        ),
        follow_redirects=False,
        transport=transport,
    )
