"""
Reporting logic.

Unlike the record accessors, reports let failures propagate so the router
can tell a rejected request (400) from a failed query (500).
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import QueryValidationError

from . import repository

logger = logging.getLogger(__name__)


async def gdp_buckets() -> list[dict[str, Any]]:
    return await repository.count_countries_by_gdp()


async def home_countries_with_all_trade_agreements() -> list[dict[str, Any]]:
    return await repository.home_countries_trading_with_all()


async def ports_by_ship_size(*, min_size: float, max_size: float) -> list[dict[str, Any]]:
    if min_size > max_size:
        raise QueryValidationError(f"min ({min_size}) must not exceed max ({max_size}).")
    return await repository.ports_with_ship_counts(min_size=min_size, max_size=max_size)


async def max_ship_average() -> dict[str, Any] | None:
    """
    Returns {"shipName", "maxAvg"}, or None when no ship carries valued containers.
    """
    try:
        row = await repository.max_ship_average()
    except Exception:
        logger.exception("max_ship_average_failed")
        return None
    if row is None:
        logger.info("max_ship_average_empty")
        return None
    return {"shipName": row["ship_name"], "maxAvg": row["max_avg"]}


async def company_shipments(*, company_name: str, company_ceo: str) -> list[dict[str, Any]]:
    return await repository.company_shipments(company_name=company_name, company_ceo=company_ceo)


async def project_shipping_routes(attributes: list[str]) -> list[dict[str, Any]]:
    return await repository.project_shipping_routes(attributes)


async def query_ships(text: str) -> list[dict[str, Any]]:
    rows = await repository.query_ships(text)
    logger.info("ship_query rows=%s", len(rows))
    return rows
