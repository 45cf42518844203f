"""Integration tests for the order endpoints via TestClient."""

import time

import pytest

from ecommerce_api.app.core.config import settings
from ecommerce_api.app.core.db import DocumentStore, get_store
from ecommerce_api.app.core.exceptions import StoreError
from ecommerce_api.app.main import app


class UnreachableStore(DocumentStore):
    async def insert(self, collection, document):
        raise StoreError("database is locked")

    async def find_by_id(self, collection, document_id):
        raise StoreError("database is locked")


def _create_order(client, **fields):
    response = client.post("/orders", json=fields)
    assert response.status_code == 201
    return response.json()


class TestCreateOrderAPI:
    def test_create_returns_201_with_id(self, client):
        response = client.post("/orders", json={"userId": "U1", "productId": "P1", "quantity": 2})

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["userId"] == "U1"
        assert body["productId"] == "P1"
        assert body["quantity"] == 2

    def test_additional_fields_pass_through(self, client):
        body = _create_order(
            client,
            userId="U1",
            productId="P1",
            quantity=1,
            note="leave at the door",
            placedAt="2026-10-17T09:30:00Z",
        )

        assert body["note"] == "leave at the door"
        assert body["placedAt"] == "2026-10-17T09:30:00Z"

    def test_repeated_creates_get_distinct_ids(self, client):
        ids = {_create_order(client, userId="U1", productId="P1")["id"] for _ in range(3)}

        assert len(ids) == 3

    def test_empty_body_returns_400(self, client):
        response = client.post("/orders", json={})

        assert response.status_code == 400
        locs = {tuple(err["loc"]) for err in response.json()["detail"]}
        assert locs == {("userId",), ("productId",)}

    def test_missing_body_returns_400(self, client):
        response = client.post("/orders")

        assert response.status_code == 400

    def test_wrong_type_returns_400(self, client):
        response = client.post("/orders", json={"userId": ["U1"], "productId": "P1"})

        assert response.status_code == 400
        assert response.json()["detail"][0]["loc"] == ["userId"]

    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/orders",
            content=b'{"userId": "U1",',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"][0]["type"] == "json_invalid"

    def test_undecodable_body_returns_400(self, client):
        response = client.post(
            "/orders",
            content=b"\x80{}",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400

    def test_store_timeout_returns_500(self, client, store, monkeypatch):
        store.timeout = 0.05
        monkeypatch.setattr(store, "_insert_sync", lambda *args: time.sleep(0.5))

        response = client.post("/orders", json={"userId": "U1", "productId": "P1"})

        assert response.status_code == 500
        assert "timed out" in response.json()["detail"]

    def test_store_failure_returns_500(self, client, tmp_path):
        app.dependency_overrides[get_store] = lambda: UnreachableStore(str(tmp_path / "x.db"))

        response = client.post("/orders", json={"userId": "U1", "productId": "P1"})

        assert response.status_code == 500
        assert response.json() == {"detail": "database is locked"}


class TestGetOrderAPI:
    def test_get_resolves_user_and_product(self, client, user, product):
        created = _create_order(client, userId=user["id"], productId=product["id"], quantity=2)

        response = client.get(f"/orders/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["quantity"] == 2
        assert body["userId"] == user
        assert body["productId"] == product
        assert "password" not in body["userId"]

    def test_unknown_id_returns_404_with_empty_body(self, client):
        response = client.get("/orders/nonexistent-id")

        assert response.status_code == 404
        assert response.content == b""

    def test_dangling_reference_is_null(self, client, user):
        created = _create_order(client, userId=user["id"], productId="discontinued")

        body = client.get(f"/orders/{created['id']}").json()

        assert body["userId"] == user
        assert body["productId"] is None

    def test_repeated_reads_are_equal(self, client, user, product):
        created = _create_order(client, userId=user["id"], productId=product["id"])

        first = client.get(f"/orders/{created['id']}").json()
        second = client.get(f"/orders/{created['id']}").json()

        assert first == second

    def test_store_timeout_returns_500(self, client, store, monkeypatch):
        store.timeout = 0.05
        monkeypatch.setattr(store, "_find_sync", lambda *args: time.sleep(0.5))

        response = client.get("/orders/abc")

        assert response.status_code == 500
        assert "timed out" in response.json()["detail"]

    def test_store_failure_returns_500_with_detail(self, client, tmp_path):
        app.dependency_overrides[get_store] = lambda: UnreachableStore(str(tmp_path / "x.db"))

        response = client.get("/orders/abc")

        assert response.status_code == 500
        assert response.json() == {"detail": "database is locked"}

    @pytest.mark.parametrize("enabled", [True, False])
    def test_reference_check_setting(self, client, product, monkeypatch, enabled):
        monkeypatch.setattr(settings, "validate_references", enabled)

        response = client.post("/orders", json={"userId": "ghost", "productId": product["id"]})

        assert response.status_code == (400 if enabled else 201)
