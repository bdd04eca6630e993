"""HTTP Controllers."""

from apps.oauth_login.presentation.http.controllers.root_router import router as root_router

__all__ = ["root_router"]
