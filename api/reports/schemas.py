"""
Pydantic schemas for reporting endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ShipSizeRangeRequest(BaseModel):
    min: float
    max: float


class CompanyShipmentsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company_name: str = Field(..., alias="companyName", min_length=1, max_length=100)
    company_ceo: str = Field(..., alias="companyCEO", min_length=1, max_length=100)


class ProjectionRequest(BaseModel):
    attributes: list[str] = Field(..., min_length=1)


class ShipQueryRequest(BaseModel):
    query: str = Field(..., max_length=1000)
