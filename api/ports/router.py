"""
Port, warehouse and container-placement endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.responses import outcome, table

from . import schemas, service

router = APIRouter()


@router.get("/port")
async def get_ports() -> dict:
    return table(await service.ports())


@router.post("/insert-port")
async def insert_port(request: schemas.PortInsertRequest):
    return outcome(await service.add_port(request))


@router.post("/update-port")
async def update_port(request: schemas.PortUpdateRequest):
    return outcome(await service.update_port(request))


@router.post("/delete-port")
async def delete_port(request: schemas.PortDeleteRequest):
    return outcome(await service.remove_port(request.port_address))


@router.get("/warehouse")
async def get_warehouses() -> dict:
    return table(await service.warehouses())


@router.post("/insert-warehouse")
async def insert_warehouse(request: schemas.WarehouseInsertRequest):
    return outcome(await service.add_warehouse(request))


@router.post("/update-warehouse")
async def update_warehouse(request: schemas.WarehouseUpdateRequest):
    return outcome(await service.update_warehouse(request))


@router.post("/delete-warehouse")
async def delete_warehouse(request: schemas.WarehouseDeleteRequest):
    return outcome(await service.remove_warehouse(port_address=request.port_address, section=request.section))


@router.post("/add-Shipment-Container")
async def add_shipment_container(request: schemas.ContainerPlacementRequest):
    return outcome(await service.add_container(request))


@router.post("/remove-Shipment-Container")
async def remove_shipment_container(request: schemas.ContainerPlacementRequest):
    return outcome(await service.remove_container(request))


@router.post("/update-Num-Containers")
async def update_num_containers(request: schemas.ContainerCountRequest):
    return outcome(
        await service.update_container_count(
            port_address=request.port_address,
            section=request.section,
            delta=request.delta,
        )
    )
