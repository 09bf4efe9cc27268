"""
Shipping-route, ship and shipment-container logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import PortDataError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def shipping_routes() -> list[dict[str, Any]]:
    try:
        return await repository.list_shipping_routes()
    except Exception:
        logger.exception("shipping_route_fetch_failed")
        return []


async def add_shipping_route(payload: schemas.ShippingRouteInsertRequest) -> bool:
    try:
        await repository.insert_shipping_route(
            name=payload.name,
            length=payload.length,
            origin_country_name=payload.origin_country_name,
            terminal_country_name=payload.terminal_country_name,
            annual_volume_of_goods=payload.annual_volume_of_goods,
        )
    except Exception:
        logger.exception("shipping_route_insert_failed name=%s", payload.name)
        return False
    return True


async def update_shipping_route(payload: schemas.ShippingRouteUpdateRequest) -> bool:
    try:
        await repository.update_shipping_route(
            name=payload.name,
            length=payload.length,
            annual_volume_of_goods=payload.annual_volume_of_goods,
        )
    except PortDataError as exc:
        logger.warning("shipping_route_update_rejected name=%s reason=%s", payload.name, exc)
        return False
    except Exception:
        logger.exception("shipping_route_update_failed name=%s", payload.name)
        return False
    return True


async def remove_shipping_route(name: str) -> bool:
    try:
        await repository.delete_shipping_route(name)
    except PortDataError as exc:
        logger.warning("shipping_route_delete_rejected name=%s reason=%s", name, exc)
        return False
    except Exception:
        logger.exception("shipping_route_delete_failed name=%s", name)
        return False
    return True


async def ships() -> list[dict[str, Any]]:
    try:
        return await repository.list_ships()
    except Exception:
        logger.exception("ship_fetch_failed")
        return []


async def add_ship(payload: schemas.ShipInsertRequest) -> bool:
    try:
        await repository.insert_ship(
            owner=payload.owner,
            ship_name=payload.ship_name,
            ship_size=payload.ship_size,
            capacity=payload.capacity,
            shipping_route_name=payload.shipping_route_name,
            docked_at_port_address=payload.docked_at_port_address,
        )
    except Exception:
        logger.exception("ship_insert_failed owner=%s ship=%s", payload.owner, payload.ship_name)
        return False
    return True


async def update_ship(payload: schemas.ShipUpdateRequest) -> bool:
    try:
        await repository.update_ship(
            owner=payload.owner,
            ship_name=payload.ship_name,
            ship_size=payload.ship_size,
            capacity=payload.capacity,
            shipping_route_name=payload.shipping_route_name,
            docked_at_port_address=payload.docked_at_port_address,
        )
    except PortDataError as exc:
        logger.warning("ship_update_rejected owner=%s ship=%s reason=%s", payload.owner, payload.ship_name, exc)
        return False
    except Exception:
        logger.exception("ship_update_failed owner=%s ship=%s", payload.owner, payload.ship_name)
        return False
    return True


async def remove_ship(*, owner: str, ship_name: str) -> bool:
    try:
        deleted = await repository.delete_ship(owner=owner, ship_name=ship_name)
    except PortDataError as exc:
        logger.warning("ship_delete_rejected owner=%s ship=%s reason=%s", owner, ship_name, exc)
        return False
    except Exception:
        logger.exception("ship_delete_failed owner=%s ship=%s", owner, ship_name)
        return False
    return deleted > 0


async def shipment_containers() -> list[dict[str, Any]]:
    try:
        return await repository.list_shipment_containers()
    except Exception:
        logger.exception("shipment_container_fetch_failed")
        return []


async def add_shipment_container(payload: schemas.ShipmentContainerInsertRequest) -> bool:
    try:
        await repository.insert_shipment_container(
            tracking_number=payload.tracking_number,
            ship_owner=payload.ship_owner,
            ship_name=payload.ship_name,
            port_address=payload.port_address,
            section=payload.section,
            good_type=payload.good_type,
            good_value=payload.good_value,
            container_size=payload.container_size,
            weight=payload.weight,
            trade_agreement=payload.trade_agreement,
            company_name=payload.company_name,
            company_ceo=payload.company_ceo,
        )
    except PortDataError as exc:
        logger.warning("shipment_container_insert_rejected tracking=%s reason=%s", payload.tracking_number, exc)
        return False
    except Exception:
        logger.exception("shipment_container_insert_failed tracking=%s", payload.tracking_number)
        return False
    return True


async def update_shipment_container(payload: schemas.ShipmentContainerUpdateRequest) -> bool:
    try:
        await repository.update_shipment_container(
            tracking_number=payload.tracking_number,
            good_type=payload.good_type,
            good_value=payload.good_value,
            container_size=payload.container_size,
            weight=payload.weight,
            trade_agreement=payload.trade_agreement,
            company_name=payload.company_name,
            company_ceo=payload.company_ceo,
        )
    except PortDataError as exc:
        logger.warning("shipment_container_update_rejected tracking=%s reason=%s", payload.tracking_number, exc)
        return False
    except Exception:
        logger.exception("shipment_container_update_failed tracking=%s", payload.tracking_number)
        return False
    return True
