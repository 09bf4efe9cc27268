"""
Pydantic schemas for tariff and company endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TariffInsertRequest(_Request):
    trade_agreement: str = Field(..., alias="tradeAgreement", min_length=1, max_length=100)
    tariff_rate: float = Field(..., alias="tariffRate", ge=0.0)
    home_name: str = Field(..., alias="homeName", min_length=1, max_length=100)
    foreign_name: str = Field(..., alias="foreignName", min_length=1, max_length=100)
    enactment_date: date = Field(..., alias="enactmentDate")
    affected_goods: str | None = Field(default=None, alias="affectedGoods", max_length=100)


class TariffUpdateRequest(_Request):
    trade_agreement: str = Field(..., alias="tradeAgreement", min_length=1, max_length=100)
    affected_goods: str | None = Field(default=None, alias="affectedGoods", max_length=100)


class TariffDeleteRequest(_Request):
    trade_agreement: str = Field(..., alias="tName", min_length=1, max_length=100)


class CompanyInsertRequest(_Request):
    ceo: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=100)
    industry: str | None = Field(default=None, max_length=100)
    yearly_revenue: float | None = Field(default=None, alias="yearlyRevenue")
    country_name: str = Field(..., alias="countryName", min_length=1, max_length=100)


class CompanyUpdateRequest(CompanyInsertRequest):
    pass


class CompanyDeleteRequest(_Request):
    name: str = Field(..., alias="cName", min_length=1, max_length=100)
    ceo: str = Field(..., min_length=1, max_length=100)
