"""
Reporting endpoints.

Successful reports answer `{"success": true, "data": [...]}`. Rejected input
answers 400, any other failure 500.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable

import asyncpg
from fastapi import APIRouter

from core.errors import QueryValidationError
from core.responses import rejected, server_error

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _report(event: str, pending: Awaitable[list[dict[str, Any]]]):
    try:
        rows = await pending
    except QueryValidationError as exc:
        logger.warning("%s_rejected reason=%s", event, exc)
        return rejected(str(exc))
    except asyncpg.DataError as exc:
        # A bound value the column type cannot take.
        logger.warning("%s_rejected reason=%s", event, exc)
        return rejected(str(exc))
    except Exception:
        logger.exception("%s_failed", event)
        return server_error()
    return {"success": True, "data": rows}


@router.get("/count-country")
async def count_country():
    return await _report("count_country", service.gdp_buckets())


@router.get("/homecountries-with-all-tradeagreements")
async def home_countries_with_all_trade_agreements():
    return await _report("division", service.home_countries_with_all_trade_agreements())


@router.post("/port-num-ship")
async def port_num_ship(request: schemas.ShipSizeRangeRequest):
    return await _report(
        "port_num_ship",
        service.ports_by_ship_size(min_size=request.min, max_size=request.max),
    )


@router.get("/max-ship-average")
async def max_ship_average() -> dict:
    result = await service.max_ship_average()
    if result is None:
        return {"message": "ERROR: No data found for the max average."}
    return result


@router.post("/join-Company-Shipment")
async def join_company_shipment(request: schemas.CompanyShipmentsRequest):
    return await _report(
        "join_company_shipment",
        service.company_shipments(company_name=request.company_name, company_ceo=request.company_ceo),
    )


@router.post("/project-shipping-route")
async def project_shipping_route(request: schemas.ProjectionRequest):
    return await _report("project_shipping_route", service.project_shipping_routes(request.attributes))


@router.post("/ship-query")
async def ship_query(request: schemas.ShipQueryRequest):
    return await _report("ship_query", service.query_ships(request.query))
