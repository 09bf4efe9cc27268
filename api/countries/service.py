"""
Country business logic.

Fetches return `[]` and writes return `False` when the database call fails;
the failure is logged with its traceback.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import PortDataError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def countries() -> list[dict[str, Any]]:
    try:
        return await repository.list_countries()
    except Exception:
        logger.exception("country_fetch_failed")
        return []


async def home_countries() -> list[dict[str, Any]]:
    try:
        return await repository.list_home_countries()
    except Exception:
        logger.exception("homecountry_fetch_failed")
        return []


async def foreign_countries() -> list[dict[str, Any]]:
    try:
        return await repository.list_foreign_countries()
    except Exception:
        logger.exception("foreigncountry_fetch_failed")
        return []


async def add_country(payload: schemas.CountryInsertRequest) -> bool:
    try:
        inserted = await repository.insert_country(
            name=payload.name,
            population=payload.population,
            government=payload.government,
            gdp=payload.gdp,
            port_address=payload.port_address,
        )
    except Exception:
        logger.exception("country_insert_failed name=%s", payload.name)
        return False
    return inserted > 0


async def update_country(payload: schemas.CountryUpdateRequest) -> bool:
    """
    Update a country and its HomeCountry/ForeignCountry copies together.

    False when the new government belongs to a different country, when any of
    the three rows is missing, or when the database rejects the change.
    """
    try:
        await repository.update_country_everywhere(
            name=payload.name,
            population=payload.population,
            government=payload.government,
            gdp=payload.gdp,
            port_address=payload.port_address,
        )
    except PortDataError as exc:
        logger.warning("country_update_rejected name=%s reason=%s", payload.name, exc)
        return False
    except Exception:
        logger.exception("country_update_failed name=%s", payload.name)
        return False
    return True


async def add_home_country(payload: schemas.CountryInsertRequest) -> bool:
    try:
        await repository.insert_home_country(
            name=payload.name,
            population=payload.population,
            government=payload.government,
            gdp=payload.gdp,
            port_address=payload.port_address,
        )
    except Exception:
        logger.exception("homecountry_insert_failed name=%s", payload.name)
        return False
    return True


async def add_foreign_country(payload: schemas.ForeignCountryInsertRequest) -> bool:
    try:
        inserted = await repository.insert_foreign_country(
            name=payload.name,
            population=payload.population,
            government=payload.government,
            gdp=payload.gdp,
            port_address=payload.port_address,
            docking_fee=payload.docking_fee,
        )
    except Exception:
        logger.exception("foreigncountry_insert_failed name=%s", payload.name)
        return False
    return inserted > 0


async def update_docking_fee(payload: schemas.DockingFeeUpdateRequest) -> bool:
    try:
        updated = await repository.update_docking_fee(name=payload.name, docking_fee=payload.docking_fee)
    except Exception:
        logger.exception("foreigncountry_update_failed name=%s", payload.name)
        return False
    return updated > 0
