"""
asyncpg pool and query helpers.

The pool is opened by the app lifespan in `main.py` and closed on shutdown.
Statements use positional $1, $2, ... placeholders.

Every helper acquires one connection for its own lifetime; `transaction()`
holds one connection for a multi-statement unit of work.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg

from . import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None
_acquire_timeout_s: float | None = None


async def init_pool() -> None:
    global _pool, _acquire_timeout_s
    if _pool is not None:
        return None
    settings = config.pool_settings()
    _pool = await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=settings.min_size,
        max_size=settings.max_size,
        timeout=settings.acquire_timeout_s,
        command_timeout=settings.command_timeout_s,
    )
    _acquire_timeout_s = settings.acquire_timeout_s
    logger.info("db_pool_started min_size=%s max_size=%s", settings.min_size, settings.max_size)


async def close_pool() -> None:
    global _pool, _acquire_timeout_s
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    _acquire_timeout_s = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@asynccontextmanager
async def connection() -> AsyncIterator[asyncpg.Connection]:
    """
    Borrow one pooled connection; it goes back to the pool on every exit path.
    """
    async with pool().acquire(timeout=_acquire_timeout_s) as conn:
        yield conn


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Borrow one connection and run the block inside a transaction.

    Leaving the block normally commits; an exception rolls back and re-raises.
    """
    async with connection() as conn:
        async with conn.transaction():
            yield conn


def rows_affected(status: str) -> int:
    """
    Parse the row count out of an asyncpg command status.

    "UPDATE 3" -> 3, "INSERT 0 1" -> 1, "DELETE 0" -> 0.
    """
    parts = (status or "").split()
    if not parts:
        return 0
    try:
        return int(parts[-1])
    except ValueError:
        return 0


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def records_to_dicts(records: list[asyncpg.Record]) -> list[dict[str, Any]]:
    return [_record_to_dict(r) for r in records]


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection() as conn:
        row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection() as conn:
        rows = await conn.fetch(sql, *args)
    return records_to_dicts(rows)


async def execute(sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
    """
    async with connection() as conn:
        status = await conn.execute(sql, *args)
    return rows_affected(status)


async def ping() -> bool:
    async with connection() as conn:
        value = await conn.fetchval("SELECT 1")
    return value == 1
