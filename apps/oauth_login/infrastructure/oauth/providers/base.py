"""OAuth Identity Provider Base Class."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from apps.oauth_login.application.oauth.exceptions import OAuthProviderError
from apps.oauth_login.application.oauth.ports import OAuthToken, UserProfile

logger = logging.getLogger(__name__)


def _optional_int(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


class OAuthIdentityProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    인증 URL 생성, 토큰 교환, 프로필 조회의 공통 흐름을 구현합니다.
    하위 클래스는 엔드포인트와 프로필에서 username을 꺼내는 방법만 정의합니다.
    """

    name: str
    authorization_endpoint: str
    token_endpoint: str
    profile_url: str

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
        scopes: tuple[str, ...] | None = None,
    ) -> None:
        self._client = client
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = scopes if scopes is not None else self.default_scopes

    @property
    def default_scopes(self) -> tuple[str, ...]:
        """기본 스코프."""
        return ()

    def authorization_params(self) -> dict[str, str]:
        """프로바이더별 추가 인증 파라미터."""
        return {}

    @abstractmethod
    def parse_username(self, payload: Mapping[str, Any]) -> str | None:
        """프로필 페이로드에서 username 추출."""
        raise NotImplementedError

    def authorization_url(
        self,
        state: str,
        *,
        redirect_uri: str | None = None,
        scope: str | None = None,
        extra_params: Mapping[str, str] | None = None,
    ) -> str:
        params: dict[str, str] = {
            "client_id": self.client_id,
            "response_type": "code",
            "state": state,
        }
        resolved_redirect_uri = redirect_uri or self.redirect_uri
        if resolved_redirect_uri:
            params["redirect_uri"] = resolved_redirect_uri
        scope_value = scope or " ".join(self.scopes)
        if scope_value:
            params["scope"] = scope_value
        params.update(self.authorization_params())
        if extra_params:
            params.update(extra_params)
        return f"{self.authorization_endpoint}?{urlencode(params)}"

    async def exchange(self, code: str, *, redirect_uri: str | None = None) -> OAuthToken:
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": redirect_uri or self.redirect_uri,
        }
        data = {key: value for key, value in data.items() if value}
        context = {"token_url": self.token_endpoint}

        try:
            response = await self._client.post(
                self.token_endpoint,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(
                "unable to exchange authorization code",
                extra={**context, "error": str(e)},
            )
            raise OAuthProviderError(self.name, "token exchange failed", context) from e

        if not response.is_success:
            logger.error(
                "unable to exchange authorization code",
                extra={
                    **context,
                    "status": response.status_code,
                    "response_body": response.text,
                },
            )
            raise OAuthProviderError(
                self.name,
                f"token endpoint returned {response.status_code}",
                {**context, "status": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "unable to parse token response",
                extra={**context, "response_body": response.text},
            )
            raise OAuthProviderError(self.name, "invalid token response", context) from e

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            # GitHub은 거부 시에도 200과 error 필드를 반환
            logger.error(
                "token response has no access token",
                extra={**context, "response_body": response.text},
            )
            raise OAuthProviderError(self.name, "missing access token", context)

        return OAuthToken(
            access_token=access_token,
            token_type=body.get("token_type") or "Bearer",
            refresh_token=body.get("refresh_token"),
            expires_in=_optional_int(body.get("expires_in")),
            scope=body.get("scope"),
        )

    async def fetch_profile_payload(self, token: OAuthToken) -> bytes:
        headers = {
            "Authorization": f"Bearer {token.access_token}",
            "Accept": "application/json",
        }
        context = {"profile_url": self.profile_url}

        try:
            async with self._client.stream("GET", self.profile_url, headers=headers) as response:
                try:
                    body = await response.aread()
                except httpx.HTTPError as e:
                    logger.error(
                        "unable to read user profile payload",
                        extra={**context, "error": str(e)},
                    )
                    raise OAuthProviderError(
                        self.name, "unable to read user profile payload", context
                    ) from e
                status = response.status_code
        except httpx.HTTPError as e:
            logger.error("unable to get user profile", extra={**context, "error": str(e)})
            raise OAuthProviderError(self.name, "unable to get user profile", context) from e

        if status < 200 or status > 299:
            logger.error(
                "unable to get user profile",
                extra={
                    **context,
                    "status": status,
                    "response_body": body.decode("utf-8", errors="replace"),
                },
            )
            raise OAuthProviderError(
                self.name,
                "unable to get user profile",
                {**context, "status": status},
            )

        return body

    async def profile(self, token: OAuthToken) -> UserProfile:
        payload = await self.fetch_profile_payload(token)
        context = {"profile_url": self.profile_url}

        try:
            data = json.loads(payload)
        except ValueError as e:
            logger.error("unable to parse user profile payload", extra=context)
            raise OAuthProviderError(self.name, "invalid user profile payload", context) from e

        username = self.parse_username(data) if isinstance(data, dict) else None
        if not username:
            logger.error("user profile has no username", extra=context)
            raise OAuthProviderError(self.name, "user profile has no username", context)

        return UserProfile(username=str(username))
