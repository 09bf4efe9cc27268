"""
Port and warehouse persistence (raw SQL).

Warehouse.NumContainers is bookkeeping kept by application code: every
container placed into or removed from a section adjusts it through
`adjust_container_count`, which holds the row lock for the rest of the
caller's transaction.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db
from core.errors import CapacityError, PortDataError, RecordNotFoundError
from schema.tables import NO_PORT_SENTINEL


async def list_ports() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT PortAddress, NumWorkers, DockedShips, CountryName
        FROM Port
        ORDER BY CountryName, PortAddress
        """
    )


async def list_warehouses() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT PortAddress, WarehouseSection, NumContainers, Capacity
        FROM Warehouse
        ORDER BY PortAddress, WarehouseSection
        """
    )


async def insert_port(
    *,
    port_address: str,
    num_workers: int | None,
    docked_ships: int | None,
    country_name: str,
) -> int:
    return await db.execute(
        """
        INSERT INTO Port (PortAddress, NumWorkers, DockedShips, CountryName)
        VALUES ($1, $2, $3, $4)
        """,
        port_address,
        num_workers,
        docked_ships,
        country_name,
    )


async def update_port(*, port_address: str, num_workers: int | None, docked_ships: int | None) -> int:
    return await db.execute(
        """
        UPDATE Port
        SET NumWorkers = $2,
            DockedShips = $3
        WHERE PortAddress = $1
        """,
        port_address,
        num_workers,
        docked_ships,
    )


async def delete_port(port_address: str) -> None:
    """
    Delete a port with its warehouses and un-point every country copy at it.

    Country, HomeCountry and ForeignCountry rows that referenced the address
    get the "no ports monitored" sentinel. Raises RecordNotFoundError (and
    changes nothing) when the port does not exist.
    """
    async with db.transaction() as conn:
        await conn.execute("DELETE FROM Warehouse WHERE PortAddress = $1", port_address)
        for table in ("Country", "HomeCountry", "ForeignCountry"):
            await conn.execute(
                f"UPDATE {table} SET PortAddress = $2 WHERE PortAddress = $1",
                port_address,
                NO_PORT_SENTINEL,
            )
        status = await conn.execute("DELETE FROM Port WHERE PortAddress = $1", port_address)
        if db.rows_affected(status) < 1:
            raise RecordNotFoundError(f"No port at {port_address!r}.")


async def insert_warehouse(*, port_address: str, section: int, num_containers: int, capacity: int) -> int:
    # The table CHECK rejects num_containers > capacity.
    return await db.execute(
        """
        INSERT INTO Warehouse (PortAddress, WarehouseSection, NumContainers, Capacity)
        VALUES ($1, $2, $3, $4)
        """,
        port_address,
        section,
        num_containers,
        capacity,
    )


async def update_warehouse_capacity(*, port_address: str, section: int, capacity: int) -> int:
    # Never shrink below what is already stored.
    return await db.execute(
        """
        UPDATE Warehouse
        SET Capacity = $3
        WHERE PortAddress = $1
          AND WarehouseSection = $2
          AND NumContainers <= $3
        """,
        port_address,
        section,
        capacity,
    )


async def delete_warehouse(*, port_address: str, section: int) -> int:
    return await db.execute(
        "DELETE FROM Warehouse WHERE PortAddress = $1 AND WarehouseSection = $2",
        port_address,
        section,
    )


async def adjust_container_count(conn: asyncpg.Connection, *, port_address: str, section: int, delta: int) -> int:
    """
    Add `delta` to a warehouse section's container count and return the new count.

    Raises RecordNotFoundError when the section does not exist and
    CapacityError when the result would fall outside 0..Capacity.
    """
    row = await conn.fetchrow(
        """
        SELECT NumContainers AS num_containers, Capacity AS capacity
        FROM Warehouse
        WHERE PortAddress = $1
          AND WarehouseSection = $2
        FOR UPDATE
        """,
        port_address,
        section,
    )
    if row is None:
        raise RecordNotFoundError(f"No warehouse section {section} at {port_address!r}.")

    current = int(row["num_containers"] or 0)
    capacity = int(row["capacity"] or 0)
    updated = current + delta
    if updated > capacity or updated < 0:
        raise CapacityError(
            port_address=port_address,
            section=section,
            current=current,
            delta=delta,
            capacity=capacity,
        )

    await conn.execute(
        """
        UPDATE Warehouse
        SET NumContainers = $3
        WHERE PortAddress = $1
          AND WarehouseSection = $2
        """,
        port_address,
        section,
        updated,
    )
    return updated


async def update_container_count(*, port_address: str, section: int, delta: int) -> int:
    async with db.transaction() as conn:
        return await adjust_container_count(conn, port_address=port_address, section=section, delta=delta)


async def place_container(*, ship_owner: str, ship_name: str, port_address: str, section: int) -> int:
    """
    Move a ship's container into a warehouse section.

    The target section must exist. A container leaving another section
    releases its slot there. Returns the target section's new count.
    """
    async with db.transaction() as conn:
        target = await conn.fetchrow(
            "SELECT 1 AS ok FROM Warehouse WHERE PortAddress = $1 AND WarehouseSection = $2",
            port_address,
            section,
        )
        if target is None:
            raise RecordNotFoundError(f"No warehouse section {section} at {port_address!r}.")

        current = await conn.fetchrow(
            """
            SELECT PortAddress AS port_address, WarehouseSection AS section
            FROM ShipmentContainer1
            WHERE ShipOwner = $1
              AND ShipName = $2
            FOR UPDATE
            """,
            ship_owner,
            ship_name,
        )
        if current is None:
            raise RecordNotFoundError(f"No shipment container for {ship_owner!r}/{ship_name!r}.")
        if current["port_address"] == port_address and current["section"] == section:
            raise PortDataError(f"Container {ship_owner!r}/{ship_name!r} is already in section {section}.")

        await conn.execute(
            """
            UPDATE ShipmentContainer1
            SET PortAddress = $3,
                WarehouseSection = $4
            WHERE ShipOwner = $1
              AND ShipName = $2
            """,
            ship_owner,
            ship_name,
            port_address,
            section,
        )
        if current["section"] is not None:
            await adjust_container_count(
                conn,
                port_address=str(current["port_address"]),
                section=int(current["section"]),
                delta=-1,
            )
        return await adjust_container_count(conn, port_address=port_address, section=section, delta=1)


async def remove_container(*, ship_owner: str, ship_name: str, port_address: str, section: int) -> int:
    """
    Take a ship's container out of its warehouse section and free the slot.

    Only a container currently stored in that section can be removed.
    """
    async with db.transaction() as conn:
        status = await conn.execute(
            """
            UPDATE ShipmentContainer1
            SET WarehouseSection = NULL
            WHERE ShipOwner = $1
              AND ShipName = $2
              AND PortAddress = $3
              AND WarehouseSection = $4
            """,
            ship_owner,
            ship_name,
            port_address,
            section,
        )
        if db.rows_affected(status) < 1:
            raise RecordNotFoundError(
                f"Container {ship_owner!r}/{ship_name!r} is not stored in section {section} at {port_address!r}."
            )
        return await adjust_container_count(conn, port_address=port_address, section=section, delta=-1)
