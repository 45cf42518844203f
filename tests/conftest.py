import pytest
from fastapi.testclient import TestClient

from ecommerce_api.app.core.db import DocumentStore, get_store
from ecommerce_api.app.main import app


@pytest.fixture()
def store(tmp_path):
    """A migrated document store in a throwaway SQLite file."""
    store = DocumentStore(str(tmp_path / "ecommerce-test.db"), timeout=5)
    store.init()
    return store


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def user(client):
    response = client.post(
        "/users/register",
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "engine"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def product(client):
    response = client.post(
        "/products",
        json={"name": "Difference engine", "price": 1200.0, "description": "Brass", "stock": 3},
    )
    assert response.status_code == 201
    return response.json()
