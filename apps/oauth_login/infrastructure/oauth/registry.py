"""OAuth Provider Registry.

설정에서 client id가 지정된 프로바이더만 등록합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from apps.oauth_login.application.oauth.exceptions import UnknownProviderError
from apps.oauth_login.infrastructure.oauth.providers import (
    GitHubIdentityProvider,
    GoogleIdentityProvider,
    KeycloakIdentityProvider,
    OAuthIdentityProvider,
)

if TYPE_CHECKING:
    import httpx

    from apps.oauth_login.setup.config import Settings

logger = logging.getLogger(__name__)


def _as_str(value: object | None) -> str | None:
    return str(value) if value is not None else None


class ProviderRegistry:
    """프로바이더 식별자 → OAuthIdentityProvider 레지스트리."""

    def __init__(self, providers: Iterable[OAuthIdentityProvider]) -> None:
        self._providers = {provider.name: provider for provider in providers}

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        client: "httpx.AsyncClient",
    ) -> "ProviderRegistry":
        """설정으로부터 레지스트리 생성."""
        providers: list[OAuthIdentityProvider] = []

        if settings.github_client_id:
            providers.append(
                GitHubIdentityProvider(
                    client=client,
                    client_id=settings.github_client_id,
                    client_secret=settings.github_client_secret,
                    redirect_uri=_as_str(settings.github_redirect_uri),
                )
            )

        if settings.google_client_id:
            providers.append(
                GoogleIdentityProvider(
                    client=client,
                    client_id=settings.google_client_id,
                    client_secret=settings.google_client_secret,
                    redirect_uri=_as_str(settings.google_redirect_uri),
                )
            )

        if settings.keycloak_client_id:
            providers.append(
                KeycloakIdentityProvider(
                    client=client,
                    base_url=settings.keycloak_base_url,
                    realm=settings.keycloak_realm,
                    client_id=settings.keycloak_client_id,
                    client_secret=settings.keycloak_client_secret,
                    redirect_uri=_as_str(settings.keycloak_redirect_uri),
                )
            )

        registry = cls(providers)
        logger.info("OAuth providers registered", extra={"providers": registry.names()})
        return registry

    def get(self, provider: str) -> OAuthIdentityProvider:
        """프로바이더 조회."""
        try:
            return self._providers[provider]
        except KeyError:
            raise UnknownProviderError(provider) from None

    def names(self) -> list[str]:
        """등록된 프로바이더 목록."""
        return sorted(self._providers)
