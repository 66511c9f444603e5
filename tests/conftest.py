"""Pytest configuration for all tests."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tareas.core.config import Settings
from tareas.infrastructure.api.app import create_app
from tareas.infrastructure.auth import PasswordHasher, TokenService

TEST_SECRET_KEY = "test-secret-key-not-for-production"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test data directory with cheap hashing."""
    return Settings(
        environment="testing",
        data_dir=str(tmp_path / "data"),
        secret_key=TEST_SECRET_KEY,
        password_time_cost=1,
        password_memory_cost=8,
        password_parallelism=1,
        log_format="console",
    )


@pytest.fixture
def hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher.from_settings(settings)


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService.from_settings(settings)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the per-test application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_token(client: AsyncClient) -> str:
    """Register a user, log in and return the bearer token."""
    credentials = {"email": "ana@example.com", "password": "Password123!"}
    res = await client.post("/register", json=credentials)
    assert res.status_code == 201

    res = await client.post("/login", json=credentials)
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}
