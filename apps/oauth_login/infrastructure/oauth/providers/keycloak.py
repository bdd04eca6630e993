"""Keycloak OAuth Provider.

realm 단위 OpenID Connect 엔드포인트를 사용합니다.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from apps.oauth_login.infrastructure.oauth.providers.base import OAuthIdentityProvider


class KeycloakIdentityProvider(OAuthIdentityProvider):
    """Keycloak OAuth 프로바이더."""

    name = "keycloak"

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        base_url: str,
        realm: str,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
        scopes: tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(
            client=client,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            scopes=scopes,
        )
        endpoint_root = f"{base_url.rstrip('/')}/realms/{realm}/protocol/openid-connect"
        self.authorization_endpoint = f"{endpoint_root}/auth"
        self.token_endpoint = f"{endpoint_root}/token"
        self.profile_url = f"{endpoint_root}/userinfo"

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid",)

    def parse_username(self, payload: Mapping[str, Any]) -> str | None:
        return payload.get("preferred_username")
