"""
Country, home-country and foreign-country endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.responses import outcome, table

from . import schemas, service

router = APIRouter()


@router.get("/country")
async def get_countries() -> dict:
    return table(await service.countries())


@router.post("/insert-country")
async def insert_country(request: schemas.CountryInsertRequest):
    return outcome(await service.add_country(request))


@router.post("/update-country")
async def update_country(request: schemas.CountryUpdateRequest):
    return outcome(await service.update_country(request))


@router.get("/homecountry")
async def get_home_countries() -> dict:
    return table(await service.home_countries())


@router.post("/insert-homecountry")
async def insert_home_country(request: schemas.CountryInsertRequest):
    return outcome(await service.add_home_country(request))


@router.post("/update-homecountry")
async def update_home_country(request: schemas.CountryUpdateRequest):
    # HomeCountry shares its fields with Country and ForeignCountry.
    return outcome(await service.update_country(request))


@router.get("/foreigncountry")
async def get_foreign_countries() -> dict:
    return table(await service.foreign_countries())


@router.post("/insert-foreigncountry")
async def insert_foreign_country(request: schemas.ForeignCountryInsertRequest):
    return outcome(await service.add_foreign_country(request))


@router.post("/update-foreigncountry")
async def update_foreign_country(request: schemas.DockingFeeUpdateRequest):
    return outcome(await service.update_docking_fee(request))
