from __future__ import annotations

import pytest

from splitbook import create_app
from splitbook.store import get_store

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture(params=["sqlalchemy", "memory"])
def app(request):
    test_app = create_app({**TEST_CONFIG, "SPLITBOOK_STORE": request.param})
    yield test_app


@pytest.fixture()
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def workspace_id(client):
    resp = client.post("/api/register", json={"name": "Ana", "email": "ana@example.com", "password": "pw"})
    return resp.get_json()["workspace_id"]


@pytest.fixture()
def add_member(client, workspace_id):
    def _add(name):
        resp = client.post("/api/members", json={"name": name, "workspace_id": workspace_id})
        assert resp.status_code == 200
        return resp.get_json()["id"]

    return _add
