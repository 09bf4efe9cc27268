"""
Pydantic schemas for port, warehouse and container-placement endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PortInsertRequest(_Request):
    port_address: str = Field(..., alias="portaddress", min_length=1, max_length=200)
    num_workers: int | None = Field(default=None, alias="numworkers", ge=0)
    docked_ships: int | None = Field(default=None, alias="dockedships", ge=0)
    country_name: str = Field(..., alias="countryname", min_length=1, max_length=100)


class PortUpdateRequest(_Request):
    port_address: str = Field(..., alias="portaddress", min_length=1, max_length=200)
    num_workers: int | None = Field(default=None, alias="numworkers", ge=0)
    docked_ships: int | None = Field(default=None, alias="dockedships", ge=0)


class PortDeleteRequest(_Request):
    port_address: str = Field(..., alias="addy", min_length=1, max_length=200)


class WarehouseInsertRequest(_Request):
    port_address: str = Field(..., alias="portaddress", min_length=1, max_length=200)
    section: int = Field(..., ge=0)
    num_containers: int = Field(default=0, alias="numcontainers", ge=0)
    capacity: int = Field(..., ge=0)


class WarehouseUpdateRequest(_Request):
    port_address: str = Field(..., alias="portaddress", min_length=1, max_length=200)
    section: int = Field(..., ge=0)
    capacity: int = Field(..., ge=0)


class WarehouseDeleteRequest(_Request):
    port_address: str = Field(..., alias="pAddy", min_length=1, max_length=200)
    section: int = Field(..., alias="wSection", ge=0)


class ContainerPlacementRequest(_Request):
    ship_owner: str = Field(..., alias="shipOwner", min_length=1, max_length=100)
    ship_name: str = Field(..., alias="shipName", min_length=1, max_length=100)
    port_address: str = Field(..., alias="portAddress", min_length=1, max_length=200)
    section: int = Field(..., ge=0)


class ContainerCountRequest(_Request):
    port_address: str = Field(..., alias="portAddress", min_length=1, max_length=200)
    section: int = Field(..., ge=0)
    delta: int = Field(..., alias="n")
