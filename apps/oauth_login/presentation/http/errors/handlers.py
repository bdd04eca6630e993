"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
프로바이더 응답 본문이나 저장소 오류 내용은 응답에 포함하지 않습니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.oauth_login.application.common.exceptions import (
    ApplicationError,
    ConfigurationError,
    NotFoundError,
    PersistenceError,
    UpstreamError,
    ValidationError,
)

GENERIC_LOGIN_FAILURE = "Login failed. Please try again."


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": f"{exc.resource} not found", "code": "NOT_FOUND"},
        )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=502,
            content={"detail": GENERIC_LOGIN_FAILURE, "code": "OAUTH_PROVIDER_ERROR"},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        return JSONResponse(
            status_code=500,
            content={"detail": GENERIC_LOGIN_FAILURE, "code": "PERSISTENCE_ERROR"},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        return JSONResponse(
            status_code=500,
            content={"detail": GENERIC_LOGIN_FAILURE, "code": "CONFIGURATION_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
