"""
Reporting queries (raw SQL, read-only).
"""

from __future__ import annotations

from typing import Any, Iterable

from core import db

from .filters import build_projection, parse_ship_query

GDP_BUCKETS_SQL = """
    SELECT bucket AS gdprange, COUNT(*) AS countrycount
    FROM (
        SELECT CASE
                   WHEN GDP < 1 THEN '0-1'
                   WHEN GDP < 5 THEN '1-5'
                   WHEN GDP < 10 THEN '5-10'
                   WHEN GDP < 15 THEN '10-15'
                   WHEN GDP >= 15 THEN '15+'
               END AS bucket,
               CASE
                   WHEN GDP < 1 THEN 0
                   WHEN GDP < 5 THEN 1
                   WHEN GDP < 10 THEN 2
                   WHEN GDP < 15 THEN 3
                   WHEN GDP >= 15 THEN 4
               END AS rank
        FROM Country
        WHERE GDP IS NOT NULL
    ) buckets
    GROUP BY bucket, rank
    ORDER BY rank
"""


async def count_countries_by_gdp() -> list[dict[str, Any]]:
    return await db.fetch_all(GDP_BUCKETS_SQL)


async def home_countries_trading_with_all() -> list[dict[str, Any]]:
    """
    Home countries holding a tariff with every foreign country.
    """
    return await db.fetch_all(
        """
        SELECT hc.Name
        FROM HomeCountry hc
        WHERE NOT EXISTS (
            SELECT 1
            FROM ForeignCountry fc
            WHERE NOT EXISTS (
                SELECT 1
                FROM Tariff1 t
                WHERE t.HomeName = hc.Name
                  AND t.ForeignName = fc.Name
            )
        )
        ORDER BY hc.Name
        """
    )


async def ports_with_ship_counts(*, min_size: float, max_size: float) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT p.PortAddress AS portlocation,
               COUNT(s.ShipName) AS numofships
        FROM Ship1 s
        JOIN Port p ON s.DockedAtPortAddress = p.PortAddress
        WHERE s.ShipSize BETWEEN $1 AND $2
        GROUP BY p.PortAddress
        HAVING COUNT(s.ShipName) > 0
        ORDER BY p.PortAddress
        """,
        min_size,
        max_size,
    )


async def max_ship_average() -> dict[str, Any] | None:
    """
    The ship whose containers have the highest average GoodValue.

    Ties are broken by ship name.
    """
    return await db.fetch_one(
        """
        SELECT ShipName AS ship_name, avg_value AS max_avg
        FROM (
            SELECT s1.Owner, s1.ShipName, AVG(s2.GoodValue) AS avg_value
            FROM Ship1 s1
            JOIN ShipmentContainer2 s2
              ON s1.Owner = s2.ShipOwner
             AND s1.ShipName = s2.ShipName
            GROUP BY s1.Owner, s1.ShipName
        ) averages
        WHERE avg_value IS NOT NULL
        ORDER BY avg_value DESC, ShipName
        LIMIT 1
        """
    )


async def company_shipments(*, company_name: str, company_ceo: str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT sc.ShipOwner,
               sc.ShipName,
               sc.GoodType,
               sc.TrackingNumber,
               sc.CompanyName,
               sc.CompanyCEO,
               c.Industry,
               c.YearlyRevenue
        FROM ShipmentContainer2 sc
        JOIN Company c
          ON sc.CompanyName = c.Name
         AND sc.CompanyCEO = c.CEO
        WHERE sc.CompanyName = $1
          AND sc.CompanyCEO = $2
        ORDER BY sc.TrackingNumber
        """,
        company_name,
        company_ceo,
    )


async def project_shipping_routes(attributes: Iterable[str]) -> list[dict[str, Any]]:
    select_list = build_projection(attributes)
    return await db.fetch_all(
        f"""
        SELECT {select_list}
        FROM ShippingRoute1
        JOIN ShippingRoute2
          ON ShippingRoute1.OriginCountryName = ShippingRoute2.OriginCountryName
         AND ShippingRoute1.TerminalCountryName = ShippingRoute2.TerminalCountryName
        """
    )


async def query_ships(text: str) -> list[dict[str, Any]]:
    """
    Ships matching a user filter; see `filters.parse_ship_query`.
    """
    where_clause, params = parse_ship_query(text)
    return await db.fetch_all(
        f"""
        SELECT s1.Owner,
               s1.ShipName,
               s1.ShipSize,
               s2.Capacity,
               s1.ShippingRouteName,
               s1.DockedAtPortAddress
        FROM Ship1 s1
        LEFT JOIN Ship2 s2 ON s1.ShipSize = s2.ShipSize
        WHERE {where_clause}
        """,
        *params,
    )
