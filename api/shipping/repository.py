"""
Shipping-route, ship and shipment-container persistence (raw SQL).

Each of these is split over two tables:
- ShippingRoute1 (origin/terminal pair -> annual volume) and ShippingRoute2 (named route)
- Ship1 (owner/name -> size, route, port) and Ship2 (size -> capacity)
- ShipmentContainer1 (ship -> warehouse cell) and ShipmentContainer2 (tracking number -> cargo)
"""

from __future__ import annotations

from typing import Any

from core import db
from core.errors import RecordNotFoundError
from ports.repository import adjust_container_count


async def list_shipping_routes() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT s1.OriginCountryName,
               s1.TerminalCountryName,
               s1.AnnualVolumeOfGoods,
               s2.Name,
               s2.Length
        FROM ShippingRoute1 s1
        JOIN ShippingRoute2 s2
          ON s1.OriginCountryName = s2.OriginCountryName
         AND s1.TerminalCountryName = s2.TerminalCountryName
        ORDER BY s2.Name
        """
    )


async def insert_shipping_route(
    *,
    name: str,
    length: float | None,
    origin_country_name: str,
    terminal_country_name: str,
    annual_volume_of_goods: float | None,
) -> None:
    """
    Add a named route; its origin/terminal pair row is created or refreshed.
    """
    async with db.transaction() as conn:
        await conn.execute(
            """
            INSERT INTO ShippingRoute1 (AnnualVolumeOfGoods, OriginCountryName, TerminalCountryName)
            VALUES ($1, $2, $3)
            ON CONFLICT (OriginCountryName, TerminalCountryName)
            DO UPDATE SET AnnualVolumeOfGoods = COALESCE(EXCLUDED.AnnualVolumeOfGoods, ShippingRoute1.AnnualVolumeOfGoods)
            """,
            annual_volume_of_goods,
            origin_country_name,
            terminal_country_name,
        )
        await conn.execute(
            """
            INSERT INTO ShippingRoute2 (Name, Length, OriginCountryName, TerminalCountryName)
            VALUES ($1, $2, $3, $4)
            """,
            name,
            length,
            origin_country_name,
            terminal_country_name,
        )


async def update_shipping_route(
    *,
    name: str,
    length: float | None,
    annual_volume_of_goods: float | None,
) -> None:
    """
    Update a named route's length and its pair row's annual volume.

    A field left as None keeps its stored value. Raises RecordNotFoundError
    when the name is unknown.
    """
    async with db.transaction() as conn:
        route = await conn.fetchrow(
            """
            UPDATE ShippingRoute2
            SET Length = COALESCE($2, Length)
            WHERE Name = $1
            RETURNING OriginCountryName AS origin, TerminalCountryName AS terminal
            """,
            name,
            length,
        )
        if route is None:
            raise RecordNotFoundError(f"No shipping route named {name!r}.")

        await conn.execute(
            """
            UPDATE ShippingRoute1
            SET AnnualVolumeOfGoods = COALESCE($3, AnnualVolumeOfGoods)
            WHERE OriginCountryName = $1
              AND TerminalCountryName = $2
            """,
            route["origin"],
            route["terminal"],
            annual_volume_of_goods,
        )


async def delete_shipping_route(name: str) -> None:
    """
    Delete a named route, then its pair row if no other named route uses it.

    Raises RecordNotFoundError when the name is unknown.
    """
    async with db.transaction() as conn:
        route = await conn.fetchrow(
            """
            DELETE FROM ShippingRoute2
            WHERE Name = $1
            RETURNING OriginCountryName AS origin, TerminalCountryName AS terminal
            """,
            name,
        )
        if route is None:
            raise RecordNotFoundError(f"No shipping route named {name!r}.")

        await conn.execute(
            """
            DELETE FROM ShippingRoute1 s1
            WHERE s1.OriginCountryName = $1
              AND s1.TerminalCountryName = $2
              AND NOT EXISTS (
                  SELECT 1
                  FROM ShippingRoute2 s2
                  WHERE s2.OriginCountryName = s1.OriginCountryName
                    AND s2.TerminalCountryName = s1.TerminalCountryName
              )
            """,
            route["origin"],
            route["terminal"],
        )


async def list_ships() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT s1.Owner,
               s1.ShipName,
               s1.ShipSize,
               s1.ShippingRouteName,
               s1.DockedAtPortAddress,
               s2.Capacity
        FROM Ship1 s1
        LEFT JOIN Ship2 s2 ON s1.ShipSize = s2.ShipSize
        ORDER BY s1.Owner, s1.ShipName
        """
    )


async def insert_ship(
    *,
    owner: str,
    ship_name: str,
    ship_size: float,
    capacity: float,
    shipping_route_name: str | None,
    docked_at_port_address: str | None,
) -> None:
    async with db.transaction() as conn:
        # Capacity is a function of size; every ship of this size shares it.
        await conn.execute(
            """
            INSERT INTO Ship2 (ShipSize, Capacity)
            VALUES ($1, $2)
            ON CONFLICT (ShipSize) DO UPDATE SET Capacity = EXCLUDED.Capacity
            """,
            ship_size,
            capacity,
        )
        await conn.execute(
            """
            INSERT INTO Ship1 (Owner, ShipName, ShipSize, ShippingRouteName, DockedAtPortAddress)
            VALUES ($1, $2, $3, $4, $5)
            """,
            owner,
            ship_name,
            ship_size,
            shipping_route_name,
            docked_at_port_address,
        )


async def update_ship(
    *,
    owner: str,
    ship_name: str,
    ship_size: float,
    capacity: float | None,
    shipping_route_name: str | None,
    docked_at_port_address: str | None,
) -> None:
    """
    Rewrite a ship's size, route and dock.

    With a capacity the Ship2 row for the (possibly new) size is upserted
    first. Raises RecordNotFoundError when the ship is unknown.
    """
    async with db.transaction() as conn:
        if capacity is not None:
            await conn.execute(
                """
                INSERT INTO Ship2 (ShipSize, Capacity)
                VALUES ($1, $2)
                ON CONFLICT (ShipSize) DO UPDATE SET Capacity = EXCLUDED.Capacity
                """,
                ship_size,
                capacity,
            )
        status = await conn.execute(
            """
            UPDATE Ship1
            SET ShipSize = $3,
                ShippingRouteName = $4,
                DockedAtPortAddress = $5
            WHERE Owner = $1
              AND ShipName = $2
            """,
            owner,
            ship_name,
            ship_size,
            shipping_route_name,
            docked_at_port_address,
        )
        if db.rows_affected(status) < 1:
            raise RecordNotFoundError(f"No ship {ship_name!r} owned by {owner!r}.")


async def delete_ship(*, owner: str, ship_name: str) -> int:
    """
    Delete the ship's size row from Ship2, then the ship itself from Ship1.

    Raises RecordNotFoundError when the Ship2 delete matches nothing (unknown
    ship, or a ship whose size has no capacity row).
    """
    async with db.transaction() as conn:
        sizes = await conn.execute(
            """
            DELETE FROM Ship2
            WHERE ShipSize = (
                SELECT s.ShipSize
                FROM Ship1 s
                WHERE s.Owner = $1
                  AND s.ShipName = $2
            )
            """,
            owner,
            ship_name,
        )
        if db.rows_affected(sizes) < 1:
            raise RecordNotFoundError(f"No ship {ship_name!r} owned by {owner!r}.")

        status = await conn.execute("DELETE FROM Ship1 WHERE Owner = $1 AND ShipName = $2", owner, ship_name)
        return db.rows_affected(status)


async def list_shipment_containers() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT s2.ShipOwner,
               s2.ShipName,
               s2.GoodType,
               s2.GoodValue,
               s2.ContainerSize,
               s2.Weight,
               s2.TrackingNumber,
               s2.TradeAgreement,
               s2.CompanyName,
               s2.CompanyCEO,
               s1.PortAddress,
               s1.WarehouseSection
        FROM ShipmentContainer1 s1
        JOIN ShipmentContainer2 s2
          ON s1.ShipOwner = s2.ShipOwner
         AND s1.ShipName = s2.ShipName
        ORDER BY s2.TrackingNumber
        """
    )


async def insert_shipment_container(
    *,
    tracking_number: int,
    ship_owner: str,
    ship_name: str,
    port_address: str,
    section: int | None,
    good_type: str | None,
    good_value: float | None,
    container_size: float | None,
    weight: float | None,
    trade_agreement: str | None,
    company_name: str | None,
    company_ceo: str | None,
) -> None:
    """
    Add a container to a ship.

    The ship's placement row in ShipmentContainer1 is written only for its
    first container, and only then does a given section take a slot. Later
    containers on the same ship add a cargo row to ShipmentContainer2 only.
    """
    async with db.transaction() as conn:
        placed = await conn.fetchrow(
            """
            INSERT INTO ShipmentContainer1 (ShipOwner, ShipName, PortAddress, WarehouseSection)
            VALUES ($1, $2, $3, $4)
            ON CONFLICT (ShipOwner, ShipName) DO NOTHING
            RETURNING WarehouseSection AS section
            """,
            ship_owner,
            ship_name,
            port_address,
            section,
        )
        await conn.execute(
            """
            INSERT INTO ShipmentContainer2 (
                ShipOwner, ShipName, GoodType, GoodValue, ContainerSize, Weight,
                TrackingNumber, TradeAgreement, CompanyName, CompanyCEO
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            """,
            ship_owner,
            ship_name,
            good_type,
            good_value,
            container_size,
            weight,
            tracking_number,
            trade_agreement,
            company_name,
            company_ceo,
        )
        if placed is not None and placed["section"] is not None:
            await adjust_container_count(conn, port_address=port_address, section=placed["section"], delta=1)


async def update_shipment_container(
    *,
    tracking_number: int,
    good_type: str | None,
    good_value: float | None,
    container_size: float | None,
    weight: float | None,
    trade_agreement: str | None,
    company_name: str | None,
    company_ceo: str | None,
) -> None:
    """
    Rewrite a container's cargo fields. Its ship and placement stay as they are.

    Raises RecordNotFoundError when the tracking number is unknown.
    """
    async with db.transaction() as conn:
        status = await conn.execute(
            """
            UPDATE ShipmentContainer2
            SET GoodType = $2,
                GoodValue = $3,
                ContainerSize = $4,
                Weight = $5,
                TradeAgreement = $6,
                CompanyName = $7,
                CompanyCEO = $8
            WHERE TrackingNumber = $1
            """,
            tracking_number,
            good_type,
            good_value,
            container_size,
            weight,
            trade_agreement,
            company_name,
            company_ceo,
        )
        if db.rows_affected(status) < 1:
            raise RecordNotFoundError(f"No shipment container with tracking number {tracking_number}.")
