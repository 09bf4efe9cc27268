"""
Pydantic schemas for country endpoints.

Aliases keep the JSON keys the browser UI already sends.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CountryFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    population: int | None = Field(default=None, ge=0)
    government: str | None = Field(default=None, max_length=100)
    gdp: float
    port_address: str = Field(..., alias="portaddress", min_length=1, max_length=200)


class CountryInsertRequest(CountryFields):
    name: str = Field(..., min_length=1, max_length=100)


class CountryUpdateRequest(CountryFields):
    name: str = Field(..., alias="cname", min_length=1, max_length=100)


class ForeignCountryInsertRequest(CountryInsertRequest):
    docking_fee: float = Field(..., alias="dockingfee", ge=0.0)


class DockingFeeUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    docking_fee: float = Field(..., alias="dockingfee", ge=0.0)
