"""
Integration test configuration.

Runs against the PostgreSQL database named by TEST_DATABASE_URL. The
project tables there are dropped and recreated, so never point it at a
database whose data you want to keep. Without the variable, or when the
server is unreachable, every integration test is skipped.
"""

import os

import psycopg2
import pytest

from db import connection
from db.connection import close_pool, init_pool, transaction
from db.init_db import create_tables, drop_tables

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture(scope="session")
def pg_pool():
    """Open a pool on the test database and build a fresh schema."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set - integration tests need PostgreSQL")

    close_pool()
    try:
        init_pool(1, 3, dsn=TEST_DATABASE_URL)
    except psycopg2.OperationalError as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")

    pool = connection._pool
    drop_tables()
    create_tables()
    yield pool
    drop_tables()
    close_pool()


@pytest.fixture
def db(pg_pool, monkeypatch):
    """Empty tables with identity counters reset, for one test."""
    monkeypatch.setattr(connection, "_pool", pg_pool)
    with transaction() as conn:
        with conn.cursor() as cur:
            cur.execute(
                "TRUNCATE project_category, category, step, material, project "
                "RESTART IDENTITY CASCADE;"
            )
    return pg_pool


def _execute(sql: str, params: tuple = ()) -> list[tuple]:
    """Run one statement in its own transaction and return any rows."""
    with transaction() as conn:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchall() if cur.description else []


@pytest.fixture
def run_sql(db):
    """Raw SQL helper for seeding child rows and checking table contents."""
    return _execute
