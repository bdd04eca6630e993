"""OAuth Application Services.

OAuth 인증 플로우 관련 비즈니스 로직을 캡슐화합니다.
"""

from apps.oauth_login.application.oauth.services.referrer_service import ReferrerService

__all__ = ["ReferrerService"]
