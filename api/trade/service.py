"""
Tariff and company logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import PortDataError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def tariffs() -> list[dict[str, Any]]:
    try:
        return await repository.list_tariffs()
    except Exception:
        logger.exception("tariff_fetch_failed")
        return []


async def add_tariff(payload: schemas.TariffInsertRequest) -> bool:
    try:
        await repository.insert_tariff(
            trade_agreement=payload.trade_agreement,
            tariff_rate=payload.tariff_rate,
            home_name=payload.home_name,
            foreign_name=payload.foreign_name,
            enactment_date=payload.enactment_date,
            affected_goods=payload.affected_goods,
        )
    except Exception:
        logger.exception("tariff_insert_failed trade_agreement=%s", payload.trade_agreement)
        return False
    return True


async def update_tariff(payload: schemas.TariffUpdateRequest) -> bool:
    try:
        await repository.update_tariff(
            trade_agreement=payload.trade_agreement,
            affected_goods=payload.affected_goods,
        )
    except PortDataError as exc:
        logger.warning("tariff_update_rejected trade_agreement=%s reason=%s", payload.trade_agreement, exc)
        return False
    except Exception:
        logger.exception("tariff_update_failed trade_agreement=%s", payload.trade_agreement)
        return False
    return True


async def remove_tariff(trade_agreement: str) -> bool:
    try:
        deleted = await repository.delete_tariff(trade_agreement)
    except PortDataError as exc:
        logger.warning("tariff_delete_rejected trade_agreement=%s reason=%s", trade_agreement, exc)
        return False
    except Exception:
        logger.exception("tariff_delete_failed trade_agreement=%s", trade_agreement)
        return False
    return deleted > 0


async def companies() -> list[dict[str, Any]]:
    try:
        return await repository.list_companies()
    except Exception:
        logger.exception("company_fetch_failed")
        return []


async def add_company(payload: schemas.CompanyInsertRequest) -> bool:
    try:
        inserted = await repository.insert_company(
            ceo=payload.ceo,
            name=payload.name,
            industry=payload.industry,
            yearly_revenue=payload.yearly_revenue,
            country_name=payload.country_name,
        )
    except Exception:
        logger.exception("company_insert_failed name=%s ceo=%s", payload.name, payload.ceo)
        return False
    return inserted > 0


async def update_company(payload: schemas.CompanyUpdateRequest) -> bool:
    try:
        updated = await repository.update_company(
            ceo=payload.ceo,
            name=payload.name,
            industry=payload.industry,
            yearly_revenue=payload.yearly_revenue,
            country_name=payload.country_name,
        )
    except Exception:
        logger.exception("company_update_failed name=%s ceo=%s", payload.name, payload.ceo)
        return False
    return updated > 0


async def remove_company(*, name: str, ceo: str) -> bool:
    try:
        deleted = await repository.delete_company(name=name, ceo=ceo)
    except Exception:
        logger.exception("company_delete_failed name=%s ceo=%s", name, ceo)
        return False
    return deleted > 0
