"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.oauth_login.application.oauth.commands import OAuthCallbackInteractor
from apps.oauth_login.application.oauth.dto import OAuthCallbackRequest
from apps.oauth_login.presentation.http.schemas import ErrorResponse
from apps.oauth_login.setup.dependencies import get_oauth_callback_interactor

router = APIRouter()


@router.get(
    "/{provider}/callback",
    summary="OAuth 콜백 처리",
    response_class=RedirectResponse,
    status_code=302,
    responses={
        400: {"model": ErrorResponse, "description": "잘못된 state"},
        404: {"model": ErrorResponse, "description": "만료되었거나 이미 사용된 state"},
        502: {"model": ErrorResponse, "description": "OAuth 프로바이더 오류"},
    },
)
async def callback(
    provider: str,
    code: str = Query(..., description="OAuth 인증 코드"),
    state: str = Query(..., description="상태 값"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> RedirectResponse:
    """OAuth 콜백을 처리합니다.

    1. state 소비 및 referrer 복원
    2. 인증 코드로 토큰 교환
    3. 사용자 프로필 조회
    4. referrer로 리다이렉트

    토큰과 프로필은 응답에 싣지 않습니다. 세션 발급은 이 서비스 밖에서 처리합니다.
    실패 시 예외 핸들러가 일반화된 오류 응답을 반환합니다.
    """
    result = await interactor.execute(
        OAuthCallbackRequest(
            provider=provider,
            code=code,
            state=state,
        )
    )

    return RedirectResponse(url=result.referrer, status_code=302)
