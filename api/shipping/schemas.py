"""
Pydantic schemas for shipping-route, ship and shipment-container endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ShippingRouteInsertRequest(_Request):
    name: str = Field(..., min_length=1, max_length=100)
    length: float | None = Field(default=None, ge=0.0)
    origin_country_name: str = Field(..., alias="originCountryName", min_length=1, max_length=100)
    terminal_country_name: str = Field(..., alias="terminalCountryName", min_length=1, max_length=100)
    annual_volume_of_goods: float | None = Field(default=None, alias="annualVolumeOfGoods", ge=0.0)


class ShippingRouteUpdateRequest(_Request):
    name: str = Field(..., min_length=1, max_length=100)
    length: float | None = Field(default=None, ge=0.0)
    annual_volume_of_goods: float | None = Field(default=None, alias="annualVolumeOfGoods", ge=0.0)


class ShippingRouteDeleteRequest(_Request):
    name: str = Field(..., alias="sName", min_length=1, max_length=100)


class ShipInsertRequest(_Request):
    owner: str = Field(..., min_length=1, max_length=100)
    ship_name: str = Field(..., alias="shipName", min_length=1, max_length=100)
    ship_size: float = Field(..., alias="shipSize", gt=0.0)
    capacity: float = Field(..., ge=0.0)
    shipping_route_name: str | None = Field(default=None, alias="shippingRouteName", max_length=100)
    docked_at_port_address: str | None = Field(default=None, alias="dockedAtPortAddress", max_length=200)


class ShipUpdateRequest(_Request):
    owner: str = Field(..., min_length=1, max_length=100)
    ship_name: str = Field(..., alias="shipName", min_length=1, max_length=100)
    ship_size: float = Field(..., alias="shipSize", gt=0.0)
    capacity: float | None = Field(default=None, ge=0.0)
    shipping_route_name: str | None = Field(default=None, alias="shippingRouteName", max_length=100)
    docked_at_port_address: str | None = Field(default=None, alias="dockedAtPortAddress", max_length=200)


class ShipDeleteRequest(_Request):
    owner: str = Field(..., alias="sOwner", min_length=1, max_length=100)
    ship_name: str = Field(..., alias="sName", min_length=1, max_length=100)


class ShipmentContainerInsertRequest(_Request):
    tracking_number: int = Field(..., alias="trackingNumber", ge=0)
    ship_owner: str = Field(..., alias="shipOwner", min_length=1, max_length=100)
    ship_name: str = Field(..., alias="shipName", min_length=1, max_length=100)
    port_address: str = Field(..., alias="portAddress", min_length=1, max_length=200)
    section: int | None = Field(default=None, ge=0)
    good_type: str | None = Field(default=None, alias="goodType", max_length=100)
    good_value: float | None = Field(default=None, alias="goodValue", ge=0.0)
    container_size: float | None = Field(default=None, alias="containerSize", ge=0.0)
    weight: float | None = Field(default=None, ge=0.0)
    trade_agreement: str | None = Field(default=None, alias="tradeAgreement", max_length=100)
    company_name: str | None = Field(default=None, alias="companyName", max_length=100)
    company_ceo: str | None = Field(default=None, alias="companyCEO", max_length=100)


class ShipmentContainerUpdateRequest(_Request):
    tracking_number: int = Field(..., alias="trackingNumber", ge=0)
    good_type: str | None = Field(default=None, alias="goodType", max_length=100)
    good_value: float | None = Field(default=None, alias="goodValue", ge=0.0)
    container_size: float | None = Field(default=None, alias="containerSize", ge=0.0)
    weight: float | None = Field(default=None, ge=0.0)
    trade_agreement: str | None = Field(default=None, alias="tradeAgreement", max_length=100)
    company_name: str | None = Field(default=None, alias="companyName", max_length=100)
    company_ceo: str | None = Field(default=None, alias="companyCEO", max_length=100)
