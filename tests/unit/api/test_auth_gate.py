"""Unit tests for the bearer-token gate dependency."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import Request

from tareas.core.exceptions import AuthenticationError, AuthorizationError
from tareas.domain.entities import User
from tareas.infrastructure.api.dependencies import (
    extract_bearer_token,
    get_current_user,
)
from tareas.infrastructure.auth import TokenClaims, TokenService

SECRET_KEY = "gate-secret-0123456789abcdef0123456789"


@pytest.fixture
def token_service():
    return TokenService(secret_key=SECRET_KEY)


@pytest.fixture
def user():
    return User(id=3, email="gate@example.com", password_hash="h")


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.url = SimpleNamespace(path="/tareas")
    request.state = SimpleNamespace()
    return request


class TestExtractBearerToken:

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc", "abc"),
            ("BEARER  abc ", "abc"),
            (None, None),
            ("", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("Basic dXNlcjpwYXNz", None),
            ("abc.def.ghi", None),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected


class TestGetCurrentUser:

    @pytest.mark.asyncio
    async def test_valid_token_passes_through(self, request_mock, token_service, user):
        token = token_service.issue(user)

        claims = await get_current_user(request_mock, token_service, f"Bearer {token}")

        assert isinstance(claims, TokenClaims)
        assert claims.subject_id == 3
        assert claims.subject_email == "gate@example.com"
        assert request_mock.state.user == claims

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc"])
    async def test_missing_token_is_401(self, request_mock, token_service, header):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(request_mock, token_service, header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Token required"
        assert not hasattr(request_mock.state, "user")

    @pytest.mark.asyncio
    async def test_malformed_token_is_403(self, request_mock, token_service):
        with pytest.raises(AuthorizationError) as exc_info:
            await get_current_user(request_mock, token_service, "Bearer not-a-jwt")

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Invalid token"

    @pytest.mark.asyncio
    async def test_forged_token_is_403(self, request_mock, token_service, user):
        forged = TokenService(secret_key="attacker-0123456789abcdef0123456789ab").issue(user)

        with pytest.raises(AuthorizationError):
            await get_current_user(request_mock, token_service, f"Bearer {forged}")

    @pytest.mark.asyncio
    async def test_expired_token_is_403(self, request_mock, token_service, user):
        expired = token_service.issue(
            user, issued_at=datetime.now(timezone.utc) - timedelta(hours=2)
        )

        with pytest.raises(AuthorizationError):
            await get_current_user(request_mock, token_service, f"Bearer {expired}")
        assert not hasattr(request_mock.state, "user")
