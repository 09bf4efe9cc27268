"""
Shipping-route, ship and shipment-container endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.responses import outcome, table

from . import schemas, service

router = APIRouter()


@router.get("/shippingroute")
async def get_shipping_routes() -> dict:
    return table(await service.shipping_routes())


@router.post("/insert-shippingroute")
async def insert_shipping_route(request: schemas.ShippingRouteInsertRequest):
    return outcome(await service.add_shipping_route(request))


@router.post("/update-shippingroute")
async def update_shipping_route(request: schemas.ShippingRouteUpdateRequest):
    return outcome(await service.update_shipping_route(request))


@router.post("/delete-shipping-route")
async def delete_shipping_route(request: schemas.ShippingRouteDeleteRequest):
    return outcome(await service.remove_shipping_route(request.name))


@router.get("/ship")
async def get_ships() -> dict:
    return table(await service.ships())


@router.post("/insert-ship")
async def insert_ship(request: schemas.ShipInsertRequest):
    return outcome(await service.add_ship(request))


@router.post("/update-ship")
async def update_ship(request: schemas.ShipUpdateRequest):
    return outcome(await service.update_ship(request))


@router.post("/delete-ship")
async def delete_ship(request: schemas.ShipDeleteRequest):
    return outcome(await service.remove_ship(owner=request.owner, ship_name=request.ship_name))


@router.get("/shipmentcontainer")
async def get_shipment_containers() -> dict:
    return table(await service.shipment_containers())


@router.post("/insert-shipmentcontainer")
async def insert_shipment_container(request: schemas.ShipmentContainerInsertRequest):
    return outcome(await service.add_shipment_container(request))


@router.post("/update-shipmentcontainer")
async def update_shipment_container(request: schemas.ShipmentContainerUpdateRequest):
    return outcome(await service.update_shipment_container(request))
