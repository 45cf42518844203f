"""
SQLite-backed document store and simple migration system.

Records are schemaless JSON documents grouped into collections
(``users``, ``products``, ``orders``).  Each collection is a table
holding the store-generated identifier next to the serialised document,
so the services only ever see plain dicts keyed by ``id``.

All store calls are coroutines.  The blocking SQLite work runs in a
worker thread and every call is bounded by ``settings.store_timeout``,
so a wedged database fails the request instead of hanging it.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import asyncio
import json
import logging
import os
import sqlite3
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional

from .config import settings
from .exceptions import StoreError, StoreTimeoutError

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "products", "orders")

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: one table per collection
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS products (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS orders (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is an absolute path, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # ecommerce_api/
    return str((base_dir / db_url).resolve())


class DocumentStore:
    """Key-addressed JSON document store.

    Instances are cheap: they only remember where the database lives
    and how long a call may take.  A new SQLite connection is opened
    for every operation and closed when it completes.
    """

    def __init__(self, database_url: Optional[str] = None, timeout: Optional[float] = None):
        self.database_path = get_database_path(database_url)
        self.timeout = settings.store_timeout if timeout is None else timeout

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and always closing."""
        conn = self._connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    async def _run(self, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise StoreTimeoutError(
                f"Document store call timed out after {self.timeout:g}s"
            ) from exc
        except (sqlite3.Error, json.JSONDecodeError) as exc:
            raise StoreError(str(exc)) from exc

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise StoreError(f"Unknown collection {collection!r}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Persist ``document`` and return it with its generated ``id``.

        The store owns identifiers: an ``id`` key in ``document`` is
        discarded.
        """
        self._check_collection(collection)
        data = {key: value for key, value in document.items() if key != "id"}
        return await self._run(self._insert_sync, collection, data)

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Return the document stored under ``document_id`` or ``None``."""
        self._check_collection(collection)
        return await self._run(self._find_sync, collection, document_id)

    def init(self) -> None:
        """Create the database if needed and apply pending migrations."""
        with self._cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %s to %s", version, self.database_path)
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version

    # ------------------------------------------------------------------
    # Blocking implementations, executed in a worker thread
    # ------------------------------------------------------------------

    def _insert_sync(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        document_id = uuid.uuid4().hex
        with self._cursor() as cursor:
            # Collection names come from COLLECTIONS only, never from input.
            cursor.execute(
                f"INSERT INTO {collection} (id, data) VALUES (?, ?)",
                (document_id, json.dumps(data, ensure_ascii=False)),
            )
        return {"id": document_id, **data}

    def _find_sync(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        with self._cursor() as cursor:
            row = cursor.execute(
                f"SELECT id, data FROM {collection} WHERE id = ?",
                (document_id,),
            ).fetchone()
        if row is None:
            return None
        return {"id": row["id"], **json.loads(row["data"])}


def get_store() -> DocumentStore:
    """FastAPI dependency providing the document store for a request."""
    return DocumentStore(settings.database_url, settings.store_timeout)
