"""Auth HTTP Schemas."""

from pydantic import BaseModel, Field


class AuthorizeResponse(BaseModel):
    """OAuth 인증 URL 응답."""

    authorization_url: str = Field(..., description="OAuth 인증 URL")
    state: str = Field(..., description="CSRF 방지용 상태 값")


class ErrorResponse(BaseModel):
    """오류 응답."""

    detail: str = Field(..., description="오류 메시지")
    code: str = Field(..., description="오류 코드")
