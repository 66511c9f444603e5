"""Integration tests for app-level behaviour: health, errors, correlation ids."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "service": "Tareas", "version": "0.1.0"}


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    res = await client.get("/nope")

    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


@pytest.mark.asyncio
async def test_correlation_id_echoed(client: AsyncClient):
    res = await client.get("/health", headers={"X-Correlation-ID": "cid_test123"})

    assert res.headers["X-Correlation-ID"] == "cid_test123"


@pytest.mark.asyncio
async def test_correlation_id_generated(client: AsyncClient):
    res = await client.get("/health")

    assert res.headers["X-Correlation-ID"].startswith("cid_")


@pytest.mark.asyncio
async def test_corrupt_store_is_generic_500(client: AsyncClient, settings):
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.write_text("{broken", encoding="utf-8")

    res = await client.post("/tareas", json={"titulo": "A", "descripcion": "B"})

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}


@pytest.mark.asyncio
async def test_unencodable_task_is_generic_500_without_temp_files(client: AsyncClient, settings):
    res = await client.post(
        "/tareas",
        content=b'{"titulo": "\\ud800", "descripcion": "B"}',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
    leftovers = [p.name for p in settings.tasks_path.parent.glob("*.tmp")]
    assert leftovers == []


@pytest.mark.asyncio
async def test_corrupt_users_store_on_login(client: AsyncClient, settings):
    settings.users_path.parent.mkdir(parents=True, exist_ok=True)
    settings.users_path.write_text("[{\"id\": 1}]", encoding="utf-8")

    res = await client.post("/login", json={"email": "a@b.c", "password": "x"})

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
