"""HTTP Controller 단위 테스트."""

from __future__ import annotations

import logging
from typing import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.oauth_login.application.common.exceptions import PersistenceError
from apps.oauth_login.application.oauth.dto import (
    OAuthAuthorizeResponse,
    OAuthCallbackResponse,
)
from apps.oauth_login.application.oauth.exceptions import (
    InvalidRedirectError,
    InvalidStateError,
    OAuthProviderError,
    StateNotFoundError,
    UnknownProviderError,
)
from apps.oauth_login.application.oauth.ports import OAuthToken, UserProfile
from apps.oauth_login.main import create_app
from apps.oauth_login.setup.dependencies import (
    get_oauth_authorize_interactor,
    get_oauth_callback_interactor,
)

STATE = "0b8f5f0e-5a4e-4f7e-9d3c-6a1f0c2d9e11"
AUTHORIZATION_URL = f"https://github.com/login/oauth/authorize?state={STATE}"
REFERRER = "https://app.example.com/home"
GENERIC_FAILURE = "Login failed. Please try again."


@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    """FastAPI 앱 (테스트 후 로깅 상태 복원)."""
    factory = logging.getLogRecordFactory()
    app = create_app()
    yield app
    app.dependency_overrides.clear()
    logging.setLogRecordFactory(factory)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """리다이렉트를 따라가지 않는 TestClient."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def mock_authorize_interactor(app: FastAPI) -> AsyncMock:
    """OAuthAuthorizeInteractor mock."""
    interactor = AsyncMock()
    interactor.execute.return_value = OAuthAuthorizeResponse(
        authorization_url=AUTHORIZATION_URL, state=STATE
    )
    app.dependency_overrides[get_oauth_authorize_interactor] = lambda: interactor
    return interactor


@pytest.fixture
def mock_callback_interactor(app: FastAPI) -> AsyncMock:
    """OAuthCallbackInteractor mock."""
    interactor = AsyncMock()
    interactor.execute.return_value = OAuthCallbackResponse(
        referrer=REFERRER,
        token=OAuthToken(access_token="gho_token"),
        profile=UserProfile(username="octocat"),
    )
    app.dependency_overrides[get_oauth_callback_interactor] = lambda: interactor
    return interactor


class TestHealthController:
    """HealthController 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        """헬스체크 엔드포인트."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "oauth-login-api"


class TestAuthorizeController:
    """AuthorizeController 테스트."""

    def test_authorize_returns_url_and_state(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
    ) -> None:
        """인증 URL JSON 응답."""
        response = client.get(
            "/api/v1/auth/github/authorize",
            params={"referrer": REFERRER},
        )

        assert response.status_code == 200
        assert response.json() == {"authorization_url": AUTHORIZATION_URL, "state": STATE}

        request = mock_authorize_interactor.execute.call_args[0][0]
        assert request.provider == "github"
        assert request.referrer == REFERRER

    def test_login_redirects_to_provider(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
    ) -> None:
        """프로바이더 인증 페이지로 302."""
        response = client.get("/api/v1/auth/github/login", params={"referrer": REFERRER})

        assert response.status_code == 302
        assert response.headers["location"] == AUTHORIZATION_URL

    @pytest.mark.parametrize("path", ["authorize", "login"])
    def test_caller_redirect_uri_is_ignored(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
        path: str,
    ) -> None:
        """쿼리의 redirect_uri는 유스케이스로 전달되지 않음."""
        client.get(
            f"/api/v1/auth/github/{path}",
            params={"referrer": REFERRER, "redirect_uri": "https://evil.example.org/steal"},
        )

        request = mock_authorize_interactor.execute.call_args[0][0]
        assert not hasattr(request, "redirect_uri")
        assert "evil.example.org" not in repr(request)

    def test_invalid_referrer_is_bad_request(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
    ) -> None:
        """화이트리스트 밖의 referrer."""
        mock_authorize_interactor.execute.side_effect = InvalidRedirectError()

        response = client.get(
            "/api/v1/auth/github/authorize",
            params={"referrer": "https://evil.example.org/"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_provider_is_not_found(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
    ) -> None:
        """미등록 프로바이더."""
        mock_authorize_interactor.execute.side_effect = UnknownProviderError("naver")

        response = client.get("/api/v1/auth/naver/authorize", params={"referrer": REFERRER})

        assert response.status_code == 404

    def test_missing_referrer_is_rejected(
        self,
        client: TestClient,
        mock_authorize_interactor: AsyncMock,
    ) -> None:
        """referrer 파라미터 누락."""
        response = client.get("/api/v1/auth/github/authorize")

        assert response.status_code == 422
        mock_authorize_interactor.execute.assert_not_called()


class TestCallbackController:
    """CallbackController 테스트."""

    def test_callback_redirects_to_referrer(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """로그인 성공 시 referrer로 302."""
        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": STATE},
        )

        assert response.status_code == 302
        assert response.headers["location"] == REFERRER

        request = mock_callback_interactor.execute.call_args[0][0]
        assert request.code == "auth-code"
        assert request.state == STATE

    def test_callback_response_does_not_expose_credentials(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """리다이렉트 응답에 토큰과 프로필을 싣지 않음."""
        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": STATE},
        )

        assert response.headers["location"] == REFERRER
        assert "gho_token" not in response.text
        assert "octocat" not in response.text
        assert "set-cookie" not in response.headers

    def test_callback_ignores_caller_redirect_uri(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """콜백 쿼리의 redirect_uri는 토큰 교환에 쓰이지 않음."""
        client.get(
            "/api/v1/auth/github/callback",
            params={
                "code": "auth-code",
                "state": STATE,
                "redirect_uri": "https://evil.example.org/steal",
            },
        )

        request = mock_callback_interactor.execute.call_args[0][0]
        assert not hasattr(request, "redirect_uri")

    def test_provider_error_hides_upstream_details(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """프로바이더 오류는 502와 일반화된 메시지만 반환."""
        mock_callback_interactor.execute.side_effect = OAuthProviderError(
            "github",
            "user profile request failed",
            {"status": 401, "profile_url": "https://api.github.com/user"},
        )

        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": STATE},
        )

        assert response.status_code == 502
        assert response.json() == {"detail": GENERIC_FAILURE, "code": "OAUTH_PROVIDER_ERROR"}

    def test_consumed_state_is_not_found(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """이미 사용된 state."""
        mock_callback_interactor.execute.side_effect = StateNotFoundError(STATE)

        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": STATE},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_malformed_state_is_bad_request(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """형식이 잘못된 state."""
        mock_callback_interactor.execute.side_effect = InvalidStateError("invalid format")

        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": "garbage"},
        )

        assert response.status_code == 400

    def test_persistence_error_is_generic_server_error(
        self,
        client: TestClient,
        mock_callback_interactor: AsyncMock,
    ) -> None:
        """저장소 오류."""
        mock_callback_interactor.execute.side_effect = PersistenceError("connection reset")

        response = client.get(
            "/api/v1/auth/github/callback",
            params={"code": "auth-code", "state": STATE},
        )

        assert response.status_code == 500
        assert response.json()["detail"] == GENERIC_FAILURE
