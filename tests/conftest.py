"""
Shared fixtures.

`fake_conn` swaps the pool-backed helpers in `core.db` for a single in-memory
connection that records every statement and answers from scripted queues.
"""

import re
from contextlib import asynccontextmanager

import pytest

from core import db


def squash(sql):
    """Collapse whitespace so assertions can match SQL fragments."""
    return re.sub(r"\s+", " ", sql).strip()


class FakeTransaction:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        self.conn.depth += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.conn.depth -= 1
        if exc_type is None:
            self.conn.commits += 1
        else:
            self.conn.rollbacks += 1
        return False


class FakeConnection:
    """Stands in for asyncpg.Connection."""

    def __init__(self):
        self.statements = []
        self.execute_results = []
        self.fetchrow_results = []
        self.fetch_results = []
        self.fetchval_result = 1
        self.commits = 0
        self.rollbacks = 0
        self.depth = 0

    def _record(self, sql, args):
        self.statements.append((squash(sql), args))

    async def execute(self, sql, *args):
        self._record(sql, args)
        if self.execute_results:
            result = self.execute_results.pop(0)
            if isinstance(result, BaseException):
                raise result
            return result
        return "UPDATE 1"

    async def executemany(self, sql, rows):
        self._record(sql, tuple(rows))

    async def fetchrow(self, sql, *args):
        self._record(sql, args)
        return self.fetchrow_results.pop(0) if self.fetchrow_results else None

    async def fetch(self, sql, *args):
        self._record(sql, args)
        return self.fetch_results.pop(0) if self.fetch_results else []

    async def fetchval(self, sql, *args):
        self._record(sql, args)
        return self.fetchval_result

    def transaction(self):
        return FakeTransaction(self)

    def sql(self):
        return [statement for statement, _ in self.statements]


@pytest.fixture
def fake_conn(monkeypatch):
    conn = FakeConnection()

    @asynccontextmanager
    async def connection():
        yield conn

    @asynccontextmanager
    async def transaction():
        async with conn.transaction():
            yield conn

    monkeypatch.setattr(db, "connection", connection)
    monkeypatch.setattr(db, "transaction", transaction)
    return conn
