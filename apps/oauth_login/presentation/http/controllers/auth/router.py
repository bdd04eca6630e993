"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_login.presentation.http.controllers.auth.authorize import (
    router as authorize_router,
)
from apps.oauth_login.presentation.http.controllers.auth.callback import (
    router as callback_router,
)

router = APIRouter()

router.include_router(authorize_router)
router.include_router(callback_router)
