"""
End-to-end tests for the Session resource.

Drives the real application (routers, service, CRUD) through httpx
against an in-memory SQLite database.

System role: Verification of the full request pipeline
"""

import pytest
from httpx import ASGITransport, AsyncClient

from session_api.boundary.db import get_async_db
from session_api.main import create_app


@pytest.fixture
async def client(test_session_factory):
    app = create_app()

    async def override_get_async_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def test_create_show_patch_delete_scenario(client):
    # Create
    response = await client.post("/api/session", json={"name": "s1"})
    assert response.status_code == 201
    created = response.json()
    session_id = created["id"]
    assert created["name"] == "s1"

    # Show
    response = await client.get(f"/api/session/{session_id}")
    assert response.status_code == 200
    assert response.json() == created

    # Patch
    response = await client.patch(
        f"/api/session/{session_id}",
        json=[{"op": "replace", "path": "/name", "value": "s2"}],
    )
    assert response.status_code == 200
    assert response.json()["id"] == session_id
    assert response.json()["name"] == "s2"

    # Delete
    response = await client.delete(f"/api/session/{session_id}")
    assert response.status_code == 204
    assert response.content == b""

    # Gone
    response = await client.get(f"/api/session/{session_id}")
    assert response.status_code == 404
    assert response.content == b""


async def test_index_lists_created_sessions(client):
    assert (await client.get("/api/session")).json() == []

    await client.post("/api/session", json={"name": "a"})
    await client.post("/api/session", json={"name": "b", "info": "second"})

    response = await client.get("/api/session")

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["a", "b"]


async def test_create_ignores_unknown_fields(client):
    response = await client.post("/api/session", json={"name": "s1", "colour": "red"})

    assert response.status_code == 201
    assert "colour" not in response.json()


async def test_upsert_inserts_then_updates_at_path_id(client):
    response = await client.put("/api/session/50", json={"id": 1, "name": "fresh"})
    assert response.status_code == 200
    assert response.json()["id"] == 50
    assert response.json()["name"] == "fresh"

    response = await client.put("/api/session/50", json={"id": 51, "info": "more"})
    assert response.status_code == 200
    assert response.json()["id"] == 50
    assert response.json()["name"] == "fresh"
    assert response.json()["info"] == "more"

    assert (await client.get("/api/session/51")).status_code == 404


async def test_patch_missing_session_returns_404(client):
    response = await client.patch(
        "/api/session/999",
        json=[{"op": "replace", "path": "/name", "value": "x"}],
    )

    assert response.status_code == 404
    assert response.content == b""


async def test_invalid_patch_returns_500_and_keeps_record(client):
    created = (await client.post("/api/session", json={"name": "s1"})).json()

    response = await client.patch(
        f"/api/session/{created['id']}",
        json=[
            {"op": "replace", "path": "/name", "value": "s2"},
            {"op": "replace", "path": "/missing", "value": 1},
        ],
    )

    assert response.status_code == 500
    assert response.json()["name"] == "PatchError"

    stored = (await client.get(f"/api/session/{created['id']}")).json()
    assert stored["name"] == "s1"


async def test_patch_cannot_change_id(client):
    created = (await client.post("/api/session", json={"name": "s1"})).json()

    response = await client.patch(
        f"/api/session/{created['id']}",
        json=[{"op": "replace", "path": "/id", "value": 1000}],
    )

    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert (await client.get("/api/session/1000")).status_code == 404


async def test_destroy_missing_session_returns_404(client):
    response = await client.delete("/api/session/12345")

    assert response.status_code == 404
    assert response.content == b""


@pytest.mark.parametrize("method", ["GET", "DELETE"])
async def test_oversized_id_returns_empty_404(client, method):
    response = await client.request(method, f"/api/session/{2**70}")

    assert response.status_code == 404
    assert response.content == b""


async def test_patch_oversized_id_returns_empty_404(client):
    response = await client.patch(
        f"/api/session/{2**70}",
        json=[{"op": "replace", "path": "/name", "value": "x"}],
    )

    assert response.status_code == 404
    assert response.content == b""


@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
async def test_non_integer_id_returns_422(client, method):
    response = await client.request(method, "/api/session/abc", json=[])

    assert response.status_code == 422


async def test_patch_with_invalid_value_type_returns_500_and_keeps_record(client):
    created = (await client.post("/api/session", json={"name": "s1", "active": True})).json()

    response = await client.patch(
        f"/api/session/{created['id']}",
        json=[
            {"op": "replace", "path": "/name", "value": "s2"},
            {"op": "replace", "path": "/active", "value": "yes"},
        ],
    )

    assert response.status_code == 500

    stored = (await client.get(f"/api/session/{created['id']}")).json()
    assert stored == created


async def test_upsert_with_invalid_value_type_returns_500_and_keeps_record(client):
    created = (await client.post("/api/session", json={"name": "s1", "active": True})).json()

    response = await client.put(
        f"/api/session/{created['id']}",
        json={"name": "s2", "active": "yes"},
    )

    assert response.status_code == 500

    stored = (await client.get(f"/api/session/{created['id']}")).json()
    assert stored == created


async def test_responses_carry_correlation_id(client):
    response = await client.get("/api/session", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
