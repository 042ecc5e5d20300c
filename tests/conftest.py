from __future__ import annotations

from datetime import datetime

import pytest

from src.absence_manager.absence_manager.container import build_container
from src.absence_manager.absence_manager.database.store import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.absence_manager.absence_manager.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username: str, password: str | None = None):
        resp = client.post("/api/auth/login", json={"username": username, "password": password or username})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()

    return _login


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 8, 30, 0)
