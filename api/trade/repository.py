"""
Tariff and company persistence (raw SQL).

A tariff is one logical record stored as Tariff1 (keyed by trade agreement)
plus Tariff2 (keyed by date, rate, home and foreign country). Both halves
are written and removed together.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db
from core.errors import RecordNotFoundError


async def list_tariffs() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT t1.TradeAgreement,
               t1.TariffRate,
               t1.HomeName,
               t1.ForeignName,
               t1.EnactmentDate,
               t2.AffectedGoods
        FROM Tariff1 t1
        JOIN Tariff2 t2
          ON t1.EnactmentDate = t2.EnactmentDate
         AND t1.TariffRate = t2.TariffRate
         AND t1.HomeName = t2.HomeName
         AND t1.ForeignName = t2.ForeignName
        ORDER BY t1.HomeName, t1.ForeignName, t1.TradeAgreement
        """
    )


async def insert_tariff(
    *,
    trade_agreement: str,
    tariff_rate: float,
    home_name: str,
    foreign_name: str,
    enactment_date: date,
    affected_goods: str | None,
) -> None:
    async with db.transaction() as conn:
        await conn.execute(
            """
            INSERT INTO Tariff1 (TradeAgreement, TariffRate, HomeName, ForeignName, EnactmentDate)
            VALUES ($1, $2, $3, $4, $5)
            """,
            trade_agreement,
            tariff_rate,
            home_name,
            foreign_name,
            enactment_date,
        )
        await conn.execute(
            """
            INSERT INTO Tariff2 (TariffRate, AffectedGoods, HomeName, ForeignName, EnactmentDate)
            VALUES ($1, $2, $3, $4, $5)
            """,
            tariff_rate,
            affected_goods,
            home_name,
            foreign_name,
            enactment_date,
        )


async def update_tariff(*, trade_agreement: str, affected_goods: str | None) -> int:
    """
    Rewrite a tariff's affected goods; the Tariff2 half is found through Tariff1.

    Raises RecordNotFoundError when no Tariff2 row matches the agreement.
    """
    async with db.transaction() as conn:
        status = await conn.execute(
            """
            UPDATE Tariff2 t2
            SET AffectedGoods = $2
            FROM Tariff1 t1
            WHERE t1.TradeAgreement = $1
              AND t1.EnactmentDate = t2.EnactmentDate
              AND t1.HomeName = t2.HomeName
              AND t1.ForeignName = t2.ForeignName
              AND t1.TariffRate = t2.TariffRate
            """,
            trade_agreement,
            affected_goods,
        )
        updated = db.rows_affected(status)
        if updated < 1:
            raise RecordNotFoundError(f"No tariff with trade agreement {trade_agreement!r}.")
        return updated


async def delete_tariff(trade_agreement: str) -> int:
    """
    Delete both halves of a tariff; the Tariff2 half goes first.

    Raises RecordNotFoundError when no Tariff2 row matches the agreement.
    """
    async with db.transaction() as conn:
        goods = await conn.execute(
            """
            DELETE FROM Tariff2 t2
            WHERE EXISTS (
                SELECT 1
                FROM Tariff1 t1
                WHERE t1.TradeAgreement = $1
                  AND t1.EnactmentDate = t2.EnactmentDate
                  AND t1.HomeName = t2.HomeName
                  AND t1.ForeignName = t2.ForeignName
                  AND t1.TariffRate = t2.TariffRate
            )
            """,
            trade_agreement,
        )
        if db.rows_affected(goods) < 1:
            raise RecordNotFoundError(f"No tariff with trade agreement {trade_agreement!r}.")

        status = await conn.execute("DELETE FROM Tariff1 WHERE TradeAgreement = $1", trade_agreement)
        return db.rows_affected(status)


async def list_companies() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT CEO, Name, Industry, YearlyRevenue, CountryName
        FROM Company
        ORDER BY Name, CEO
        """
    )


async def insert_company(
    *,
    ceo: str,
    name: str,
    industry: str | None,
    yearly_revenue: float | None,
    country_name: str,
) -> int:
    return await db.execute(
        """
        INSERT INTO Company (CEO, Name, Industry, YearlyRevenue, CountryName)
        VALUES ($1, $2, $3, $4, $5)
        """,
        ceo,
        name,
        industry,
        yearly_revenue,
        country_name,
    )


async def update_company(
    *,
    ceo: str,
    name: str,
    industry: str | None,
    yearly_revenue: float | None,
    country_name: str,
) -> int:
    return await db.execute(
        """
        UPDATE Company
        SET Industry = $3,
            YearlyRevenue = $4,
            CountryName = $5
        WHERE CEO = $1
          AND Name = $2
        """,
        ceo,
        name,
        industry,
        yearly_revenue,
        country_name,
    )


async def delete_company(*, name: str, ceo: str) -> int:
    return await db.execute(
        "DELETE FROM Company WHERE Name = $1 AND CEO = $2",
        name,
        ceo,
    )
