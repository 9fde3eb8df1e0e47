"""
pytest configuration and fixtures.
"""

import threading
from dataclasses import asdict, replace
from datetime import datetime
from typing import Optional

import pytest

from db.errors import ConstraintViolation, NotFound, RowCountMismatch
from db.query import compile_update, changed_columns


class FakeCursor:
    """Cursor double: records statements and replays scripted results."""

    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.rowcount = -1
        self._rows: list = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        result = self.conn.results.pop(0) if self.conn.results else {}
        if "error" in result:
            raise result["error"]
        self._rows = list(result.get("rows", []))
        self.rowcount = result.get("rowcount", len(self._rows))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows


class FakeConnection:
    """
    psycopg2 connection double.

    Queue one result dict per expected `execute` call in `results`:
    ``{"rows": [...]}``, ``{"rowcount": n}`` or ``{"error": exc}``.
    """

    def __init__(self):
        self.executed: list = []
        self.results: list = []
        self.commits = 0
        self.rollbacks = 0
        self.released = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def fake_db(monkeypatch) -> FakeConnection:
    """Route every store through a single FakeConnection."""
    conn = FakeConnection()

    def release(c):
        c.released += 1

    monkeypatch.setattr("stores.base.get_connection", lambda: conn)
    monkeypatch.setattr("stores.base.release_connection", release)
    return conn


class InMemoryStore:
    """
    Storage double keeping rows in a dict.

    Enforces the same contract as the SQL stores: NotFound on a missing
    read, RowCountMismatch on a missing delete or update, and
    ConstraintViolation for a duplicate value in `unique`.
    """

    def __init__(self, model: type, table: str, unique: Optional[str] = None):
        self.model = model
        self.table = table
        self.resource = table.rstrip("s")
        self.unique = unique
        self.rows: dict = {}
        self.deleted_ids: list = []
        self._next_id = 1
        self._lock = threading.Lock()

    def _check_unique(self, record) -> None:
        if not self.unique:
            return
        value = getattr(record, self.unique)
        for row_id, row in self.rows.items():
            if row_id != record.id and getattr(row, self.unique) == value:
                raise ConstraintViolation(f"duplicate {self.unique}: {value}")

    def create(self, record) -> int:
        with self._lock:
            self._check_unique(record)
            new_id = self._next_id
            self._next_id += 1
            if hasattr(record, "date") and record.date is None:
                record.date = datetime.now()
            self.rows[new_id] = replace(record, id=new_id)
            return new_id

    def read(self, record_id: int):
        with self._lock:
            if record_id not in self.rows:
                raise NotFound(f"not found: {self.resource} id {record_id}")
            return replace(self.rows[record_id])

    def update(self, record, fields=None):
        # Same validation as the SQL path: raises QueryCompilationError.
        compile_update(self.table, record, self.model(), fields)
        with self._lock:
            if record.id not in self.rows:
                raise RowCountMismatch(f"update {self.resource} error: 0 rows affected", 0)
            current = self.rows[record.id]
            columns = changed_columns(asdict(record), asdict(self.model()), fields)
            updated = replace(current, **{c: getattr(record, c) for c in columns})
            self._check_unique(updated)
            self.rows[record.id] = updated
        return record

    def delete(self, record_id: int) -> None:
        with self._lock:
            if record_id not in self.rows:
                raise RowCountMismatch(f"delete {self.resource} error: 0 rows affected", 0)
            del self.rows[record_id]
            self.deleted_ids.append(record_id)


@pytest.fixture
def memory_stores():
    """In-memory stores for users, posts and comments."""
    from models import Comment, Post, User

    return {
        "users": InMemoryStore(User, "users", unique="username"),
        "posts": InMemoryStore(Post, "posts", unique="title"),
        "comments": InMemoryStore(Comment, "comments"),
    }


@pytest.fixture
def client(memory_stores):
    """Flask test client backed by in-memory stores."""
    from app import create_app

    app = create_app(
        user_store=memory_stores["users"],
        post_store=memory_stores["posts"],
        comment_store=memory_stores["comments"],
        config={"TESTING": True},
    )
    return app.test_client()
