"""
Schema reset orchestration.

Every reset reports success as a bool; failures are logged here and never
reach the caller as exceptions.
"""

from __future__ import annotations

import logging

from core import db

from . import repository
from .tables import RESET_ORDER, spec_for

logger = logging.getLogger(__name__)


async def check_connection() -> bool:
    try:
        return await db.ping()
    except Exception:
        logger.exception("db_connection_check_failed")
        return False


async def reset(entity: str) -> bool:
    spec = spec_for(entity)
    try:
        inserted = await repository.reset_entity(spec)
    except Exception:
        logger.exception("schema_reset_failed entity=%s", entity)
        return False
    logger.info("schema_reset entity=%s tables=%s seeded=%s", entity, ",".join(spec.tables), inserted)
    return True


async def reset_all() -> bool:
    """
    Reset every entity in dependency order, stopping at the first failure.
    """
    for spec in RESET_ORDER:
        logger.info("schema_reset_start entity=%s", spec.entity)
        if not await reset(spec.entity):
            logger.error("schema_reset_all_aborted entity=%s", spec.entity)
            return False
    logger.info("schema_reset_all_complete entities=%s", len(RESET_ORDER))
    return True
