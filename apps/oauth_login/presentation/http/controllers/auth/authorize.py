"""Authorize Controller.

OAuth 인증 URL 생성 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.oauth_login.application.oauth.commands import OAuthAuthorizeInteractor
from apps.oauth_login.application.oauth.dto import OAuthAuthorizeRequest
from apps.oauth_login.presentation.http.schemas import AuthorizeResponse
from apps.oauth_login.setup.dependencies import get_oauth_authorize_interactor

router = APIRouter()


@router.get(
    "/{provider}/authorize",
    response_model=AuthorizeResponse,
    summary="OAuth 인증 URL 생성",
)
async def authorize(
    provider: str,
    referrer: str = Query(..., description="로그인 후 돌아갈 URL"),
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> AuthorizeResponse:
    """OAuth 인증 URL을 JSON으로 반환합니다.

    클라이언트는 반환된 authorization_url로 이동해야 합니다.
    콜백 URI는 프로바이더별 설정값(AUTH_*_REDIRECT_URI)만 사용합니다.
    """
    result = await interactor.execute(
        OAuthAuthorizeRequest(provider=provider, referrer=referrer)
    )
    return AuthorizeResponse(authorization_url=result.authorization_url, state=result.state)


@router.get(
    "/{provider}/login",
    summary="OAuth 로그인 시작",
    response_class=RedirectResponse,
    status_code=302,
)
async def login(
    provider: str,
    referrer: str = Query(..., description="로그인 후 돌아갈 URL"),
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> RedirectResponse:
    """프로바이더 인증 페이지로 바로 리다이렉트합니다."""
    result = await interactor.execute(
        OAuthAuthorizeRequest(provider=provider, referrer=referrer)
    )
    return RedirectResponse(url=result.authorization_url, status_code=302)
