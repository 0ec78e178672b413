"""
Main pytest configuration.

Unit tests run against an in-memory stand-in for the psycopg2 pool so the
repository's SQL, transaction handling and cleanup can be checked without a
server. Integration tests (tests/integration) need a real PostgreSQL.
"""

import os

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from db import connection  # noqa: E402


class FakeCursor:
    """Records executed SQL and serves the connection's scripted results."""

    def __init__(self, conn, cursor_factory=None):
        self.conn = conn
        self.cursor_factory = cursor_factory
        self.closed = False
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def execute(self, sql, params=None):
        statement = " ".join(sql.split())
        self.conn.executed.append((statement, params))
        if self.conn.fail_on and self.conn.fail_on in statement:
            raise self.conn.error
        self._rows = self.conn.results.pop(0) if self.conn.results else []

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)


class FakeConnection:
    def __init__(self):
        self.results: list[list] = []
        self.executed: list[tuple] = []
        self.cursors: list[FakeCursor] = []
        self.commits = 0
        self.rollbacks = 0
        self.fail_on: str | None = None
        self.error: Exception | None = None
        self.commit_error: Exception | None = None
        self.rollback_error: Exception | None = None

    def cursor(self, cursor_factory=None):
        cur = FakeCursor(self, cursor_factory)
        self.cursors.append(cur)
        return cur

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.rollback_error is not None:
            raise self.rollback_error

    def fail_when(self, fragment: str, error: Exception) -> None:
        """Make the first statement containing `fragment` raise `error`."""
        self.fail_on = fragment
        self.error = error

    def fail_on_commit(self, error: Exception) -> None:
        self.commit_error = error

    def fail_on_rollback(self, error: Exception) -> None:
        """Make rollback raise, as it does once the server has dropped us."""
        self.rollback_error = error


class FakePool:
    def __init__(self, conn: FakeConnection):
        self.conn = conn
        self.checked_out = 0
        self.released = 0

    def getconn(self):
        self.checked_out += 1
        return self.conn

    def putconn(self, conn):
        assert conn is self.conn
        self.released += 1


@pytest.fixture
def fake_pool(monkeypatch):
    """Swap the module-level pool for a FakePool for one test."""
    fake = FakePool(FakeConnection())
    monkeypatch.setattr(connection, "_pool", fake)
    return fake


@pytest.fixture
def fake_conn(fake_pool):
    return fake_pool.conn
