"""Tests for the SQLite-backed document store."""

import sqlite3
import time

import pytest

from ecommerce_api.app.core.db import DocumentStore
from ecommerce_api.app.core.exceptions import StoreError, StoreTimeoutError


async def test_insert_assigns_id_and_returns_document(store):
    stored = await store.insert("products", {"name": "Lamp", "price": 10.0})

    assert stored["name"] == "Lamp"
    assert stored["price"] == 10.0
    assert isinstance(stored["id"], str) and len(stored["id"]) == 32


async def test_insert_ignores_caller_supplied_id(store):
    stored = await store.insert("orders", {"id": "chosen-by-client", "userId": "u", "productId": "p"})

    assert stored["id"] != "chosen-by-client"
    assert await store.find_by_id("orders", "chosen-by-client") is None


async def test_find_by_id_round_trip(store):
    stored = await store.insert("users", {"name": "Grace", "tags": ["admiral", "cobol"]})

    assert await store.find_by_id("users", stored["id"]) == stored


async def test_find_by_id_unknown_returns_none(store):
    assert await store.find_by_id("users", "nonexistent-id") is None


async def test_collections_are_isolated(store):
    stored = await store.insert("users", {"name": "Grace"})

    assert await store.find_by_id("products", stored["id"]) is None


async def test_unknown_collection_is_rejected(store):
    with pytest.raises(StoreError):
        await store.insert("carts", {"items": []})
    with pytest.raises(StoreError):
        await store.find_by_id("carts", "x")


async def test_slow_call_times_out(store, monkeypatch):
    store.timeout = 0.05
    monkeypatch.setattr(store, "_find_sync", lambda *args: time.sleep(0.5))

    with pytest.raises(StoreTimeoutError):
        await store.find_by_id("orders", "whatever")


async def test_sqlite_errors_become_store_errors(tmp_path):
    # No init(): the tables do not exist yet.
    store = DocumentStore(str(tmp_path / "empty.db"), timeout=5)

    with pytest.raises(StoreError, match="no such table"):
        await store.find_by_id("orders", "x")


def test_init_is_idempotent(store):
    store.init()

    with sqlite3.connect(store.database_path) as conn:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations")]
    assert versions == [1]
