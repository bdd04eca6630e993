"""HTTP Schemas."""

from apps.oauth_login.presentation.http.schemas.auth import AuthorizeResponse, ErrorResponse

__all__ = ["AuthorizeResponse", "ErrorResponse"]
