from __future__ import annotations

import pytest  # type: ignore[import-not-found]
from fastapi.testclient import TestClient

from catalog_service.main import create_app
from catalog_service.storage import CatalogState


@pytest.fixture
def state() -> CatalogState:
    return CatalogState()


@pytest.fixture
def client(state: CatalogState):
    app = create_app(state=state)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def logged_in(client):
    """Register and log in ``alice`` / ``secret``."""
    client.post("/register", json={"username": "alice", "password": "secret"})
    client.post("/login", json={"username": "alice", "password": "secret"})
    return "alice"
