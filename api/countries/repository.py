"""
Country, HomeCountry and ForeignCountry persistence (raw SQL).

HomeCountry and ForeignCountry duplicate Country's Population / GDP /
Government / PortAddress; the multi-table writes here keep the copies in
step inside one transaction.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db
from core.errors import DuplicateValueError, RecordNotFoundError

DEFAULT_DOCKING_FEE = 500.0


async def list_countries() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT Name, Population, Government, GDP, PortAddress
        FROM Country
        ORDER BY Name
        """
    )


async def list_home_countries() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT Name, Population, GDP, Government, PortAddress
        FROM HomeCountry
        ORDER BY Name
        """
    )


async def list_foreign_countries() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT Name, Population, GDP, Government, DockingFee, PortAddress
        FROM ForeignCountry
        ORDER BY Name
        """
    )


async def insert_country(
    *,
    name: str,
    population: int | None,
    government: str | None,
    gdp: float,
    port_address: str,
) -> int:
    return await db.execute(
        """
        INSERT INTO Country (Name, Population, Government, GDP, PortAddress)
        VALUES ($1, $2, $3, $4, $5)
        """,
        name,
        population,
        government,
        gdp,
        port_address,
    )


async def government_taken_by_other(conn: asyncpg.Connection, government: str | None, *, name: str) -> bool:
    if government is None:
        return False
    row = await conn.fetchrow(
        """
        SELECT 1 AS taken
        FROM Country
        WHERE Government = $1
          AND Name <> $2
        LIMIT 1
        """,
        government,
        name,
    )
    return row is not None


async def update_country_everywhere(
    *,
    name: str,
    population: int | None,
    government: str | None,
    gdp: float,
    port_address: str,
) -> None:
    """
    Update Country and propagate the same fields to HomeCountry and ForeignCountry.

    Raises DuplicateValueError when another country already uses `government`,
    and RecordNotFoundError when any of the three tables has no row for `name`.
    Either way nothing is written.
    """
    async with db.transaction() as conn:
        if await government_taken_by_other(conn, government, name=name):
            raise DuplicateValueError(f"Government {government!r} is already used by another country.")

        for table in ("Country", "HomeCountry", "ForeignCountry"):
            status = await conn.execute(
                f"""
                UPDATE {table}
                SET Population = $1,
                    Government = $2,
                    PortAddress = $3,
                    GDP = $4
                WHERE Name = $5
                """,
                population,
                government,
                port_address,
                gdp,
                name,
            )
            if db.rows_affected(status) < 1:
                raise RecordNotFoundError(f"{table} has no row named {name!r}.")


async def insert_home_country(
    *,
    name: str,
    population: int | None,
    government: str | None,
    gdp: float,
    port_address: str,
    docking_fee: float = DEFAULT_DOCKING_FEE,
) -> None:
    """
    Register an existing Country as a home country.

    The same row also goes into ForeignCountry (with a default docking fee) and
    the shared fields are written back to Country, all in one transaction.
    """
    async with db.transaction() as conn:
        home = await conn.execute(
            """
            INSERT INTO HomeCountry (Name, Population, Government, GDP, PortAddress)
            VALUES ($1, $2, $3, $4, $5)
            """,
            name,
            population,
            government,
            gdp,
            port_address,
        )
        foreign = await conn.execute(
            """
            INSERT INTO ForeignCountry (Name, Population, Government, GDP, PortAddress, DockingFee)
            VALUES ($1, $2, $3, $4, $5, $6)
            """,
            name,
            population,
            government,
            gdp,
            port_address,
            docking_fee,
        )
        country = await conn.execute(
            """
            UPDATE Country
            SET Population = $1,
                Government = $2,
                GDP = $3,
                PortAddress = $4
            WHERE Name = $5
            """,
            population,
            government,
            gdp,
            port_address,
            name,
        )
        if min(db.rows_affected(home), db.rows_affected(foreign), db.rows_affected(country)) < 1:
            raise RecordNotFoundError(f"Country {name!r} does not exist.")


async def insert_foreign_country(
    *,
    name: str,
    population: int | None,
    government: str | None,
    gdp: float,
    port_address: str,
    docking_fee: float,
) -> int:
    return await db.execute(
        """
        INSERT INTO ForeignCountry (Name, Population, Government, GDP, PortAddress, DockingFee)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        name,
        population,
        government,
        gdp,
        port_address,
        docking_fee,
    )


async def update_docking_fee(*, name: str, docking_fee: float) -> int:
    return await db.execute(
        """
        UPDATE ForeignCountry
        SET DockingFee = $1
        WHERE Name = $2
        """,
        docking_fee,
        name,
    )
