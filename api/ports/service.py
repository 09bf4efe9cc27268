"""
Port, warehouse and container-placement logic.

Every operation here reports a bool (or `[]` for fetches); the reason for a
rejection ends up in the log, not in the response.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import PortDataError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def ports() -> list[dict[str, Any]]:
    try:
        return await repository.list_ports()
    except Exception:
        logger.exception("port_fetch_failed")
        return []


async def warehouses() -> list[dict[str, Any]]:
    try:
        return await repository.list_warehouses()
    except Exception:
        logger.exception("warehouse_fetch_failed")
        return []


async def add_port(payload: schemas.PortInsertRequest) -> bool:
    try:
        inserted = await repository.insert_port(
            port_address=payload.port_address,
            num_workers=payload.num_workers,
            docked_ships=payload.docked_ships,
            country_name=payload.country_name,
        )
    except Exception:
        logger.exception("port_insert_failed port_address=%s", payload.port_address)
        return False
    return inserted > 0


async def update_port(payload: schemas.PortUpdateRequest) -> bool:
    try:
        updated = await repository.update_port(
            port_address=payload.port_address,
            num_workers=payload.num_workers,
            docked_ships=payload.docked_ships,
        )
    except Exception:
        logger.exception("port_update_failed port_address=%s", payload.port_address)
        return False
    return updated > 0


async def remove_port(port_address: str) -> bool:
    try:
        await repository.delete_port(port_address)
    except PortDataError as exc:
        logger.warning("port_delete_rejected port_address=%s reason=%s", port_address, exc)
        return False
    except Exception:
        logger.exception("port_delete_failed port_address=%s", port_address)
        return False
    logger.info("port_deleted port_address=%s", port_address)
    return True


async def add_warehouse(payload: schemas.WarehouseInsertRequest) -> bool:
    try:
        inserted = await repository.insert_warehouse(
            port_address=payload.port_address,
            section=payload.section,
            num_containers=payload.num_containers,
            capacity=payload.capacity,
        )
    except Exception:
        logger.exception("warehouse_insert_failed port_address=%s section=%s", payload.port_address, payload.section)
        return False
    return inserted > 0


async def update_warehouse(payload: schemas.WarehouseUpdateRequest) -> bool:
    try:
        updated = await repository.update_warehouse_capacity(
            port_address=payload.port_address,
            section=payload.section,
            capacity=payload.capacity,
        )
    except Exception:
        logger.exception("warehouse_update_failed port_address=%s section=%s", payload.port_address, payload.section)
        return False
    return updated > 0


async def remove_warehouse(*, port_address: str, section: int) -> bool:
    try:
        deleted = await repository.delete_warehouse(port_address=port_address, section=section)
    except Exception:
        logger.exception("warehouse_delete_failed port_address=%s section=%s", port_address, section)
        return False
    return deleted > 0


async def update_container_count(*, port_address: str, section: int, delta: int) -> bool:
    """
    Shift a section's container count by `delta`, refusing to leave 0..Capacity.
    """
    try:
        count = await repository.update_container_count(port_address=port_address, section=section, delta=delta)
    except PortDataError as exc:
        logger.warning("container_count_rejected port_address=%s section=%s reason=%s", port_address, section, exc)
        return False
    except Exception:
        logger.exception("container_count_failed port_address=%s section=%s", port_address, section)
        return False
    logger.info("container_count_updated port_address=%s section=%s count=%s", port_address, section, count)
    return True


async def add_container(payload: schemas.ContainerPlacementRequest) -> bool:
    try:
        count = await repository.place_container(
            ship_owner=payload.ship_owner,
            ship_name=payload.ship_name,
            port_address=payload.port_address,
            section=payload.section,
        )
    except PortDataError as exc:
        logger.warning("container_place_rejected ship=%s/%s reason=%s", payload.ship_owner, payload.ship_name, exc)
        return False
    except Exception:
        logger.exception("container_place_failed ship=%s/%s", payload.ship_owner, payload.ship_name)
        return False
    logger.info(
        "container_placed ship=%s/%s section=%s count=%s",
        payload.ship_owner,
        payload.ship_name,
        payload.section,
        count,
    )
    return True


async def remove_container(payload: schemas.ContainerPlacementRequest) -> bool:
    try:
        count = await repository.remove_container(
            ship_owner=payload.ship_owner,
            ship_name=payload.ship_name,
            port_address=payload.port_address,
            section=payload.section,
        )
    except PortDataError as exc:
        logger.warning("container_remove_rejected ship=%s/%s reason=%s", payload.ship_owner, payload.ship_name, exc)
        return False
    except Exception:
        logger.exception("container_remove_failed ship=%s/%s", payload.ship_owner, payload.ship_name)
        return False
    logger.info(
        "container_removed ship=%s/%s section=%s count=%s",
        payload.ship_owner,
        payload.ship_name,
        payload.section,
        count,
    )
    return True
