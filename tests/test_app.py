"""App factory tests — health check, error envelope, session restore."""

from __future__ import annotations

import importlib

import pytest
from httpx import ASGITransport, AsyncClient

from teamdesk.auth.models import Session
from teamdesk.auth.session_store import FileSessionStore
from teamdesk.main import create_app
from teamdesk.store import build_store
from tests.conftest import EMPLOYEE


async def test_health_check(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_errors_are_problem_json(client):
    resp = await client.get("/api/v1/auth/session")
    assert resp.headers["content-type"].startswith("application/problem+json")
    body = resp.json()
    assert body["status"] == 401
    assert body["instance"] == "/api/v1/auth/session"


async def test_request_validation_error(client, as_employee):
    resp = await client.put("/api/v1/tasks/1/progress", json={"progress": "lots"})
    assert resp.status_code == 422
    assert resp.json()["type"].endswith("/validation-error")
    assert "progress" in resp.json()["errors"]


async def test_persisted_session_survives_app_restart(tmp_path):
    path = tmp_path / "session.json"
    FileSessionStore(path).save(Session(user=EMPLOYEE))

    app = create_app(store=build_store(FileSessionStore(path)))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/api/v1/auth/session")
    assert resp.status_code == 200
    assert resp.json()["user"]["id"] == EMPLOYEE.id


@pytest.mark.parametrize(
    "module",
    [
        "teamdesk.auth.router",
        "teamdesk.navigation.router",
        "teamdesk.tasks.router",
        "teamdesk.leave.router",
        "teamdesk.dashboard.router",
        "teamdesk.employees.router",
    ],
)
def test_feature_routers_importable(module):
    assert importlib.import_module(module).__name__ == module
