"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_login.presentation.http.controllers.auth.router import router as auth_router

router = APIRouter()

# API v1
router.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
