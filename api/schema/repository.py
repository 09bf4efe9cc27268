"""
Schema reset persistence (raw SQL DDL + seed inserts).

A reset runs in one transaction. Constraint and table drops run inside
savepoints so a failing drop is logged and skipped without aborting the
surrounding transaction.
"""

from __future__ import annotations

import logging

import asyncpg

from core import db

from .tables import TableSpec

logger = logging.getLogger(__name__)


FIND_REFERENCING_FKS_SQL = """
    SELECT child.relname AS table_name,
           fk.conname    AS constraint_name
    FROM pg_constraint fk
    JOIN pg_class child  ON child.oid = fk.conrelid
    JOIN pg_class parent ON parent.oid = fk.confrelid
    JOIN pg_constraint pk
      ON pk.conrelid = fk.confrelid
     AND pk.contype = 'p'
     AND pk.conindid = fk.conindid
    WHERE fk.contype = 'f'
      AND parent.relname = ANY($1::text[])
      AND pg_table_is_visible(parent.oid)
    ORDER BY child.relname, fk.conname
"""


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def find_referencing_constraints(conn: asyncpg.Connection, tables: tuple[str, ...]) -> list[dict]:
    """
    Foreign keys (in any table) that point at the primary key of `tables`.
    """
    rows = await conn.fetch(FIND_REFERENCING_FKS_SQL, list(tables))
    return db.records_to_dicts(rows)


async def _drop_quietly(conn: asyncpg.Connection, sql: str, *, what: str) -> bool:
    try:
        async with conn.transaction():
            await conn.execute(sql)
    except asyncpg.PostgresError as exc:
        logger.info("schema_drop_skipped target=%s error=%s", what, exc)
        return False
    return True


async def drop_referencing_constraints(conn: asyncpg.Connection, tables: tuple[str, ...]) -> int:
    dropped = 0
    for fk in await find_referencing_constraints(conn, tables):
        table_name = str(fk["table_name"])
        constraint_name = str(fk["constraint_name"])
        sql = f"ALTER TABLE {_quote_ident(table_name)} DROP CONSTRAINT {_quote_ident(constraint_name)}"
        if await _drop_quietly(conn, sql, what=f"{table_name}.{constraint_name}"):
            logger.info("schema_fk_dropped table=%s constraint=%s", table_name, constraint_name)
            dropped += 1
    return dropped


async def drop_tables(conn: asyncpg.Connection, tables: tuple[str, ...]) -> None:
    for table in tables:
        await _drop_quietly(conn, f"DROP TABLE IF EXISTS {_quote_ident(table)}", what=table)


async def create_and_seed(conn: asyncpg.Connection, spec: TableSpec) -> int:
    for statement in spec.ddl:
        await conn.execute(statement)

    inserted = 0
    for seed in spec.seeds:
        await conn.executemany(seed.insert_sql, list(seed.rows))
        inserted += len(seed.rows)
    return inserted


async def reset_entity(spec: TableSpec) -> int:
    """
    Drop and recreate the tables behind one entity, then load its seed rows.

    Returns the number of seed rows inserted. Any DDL or insert failure rolls
    the whole reset back and propagates.
    """
    async with db.transaction() as conn:
        await drop_referencing_constraints(conn, spec.tables)
        await drop_tables(conn, spec.tables)
        return await create_and_seed(conn, spec)

