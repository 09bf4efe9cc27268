"""
Tariff and company endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.responses import outcome, table

from . import schemas, service

router = APIRouter()


@router.get("/tariff")
async def get_tariffs() -> dict:
    return table(await service.tariffs())


@router.post("/insert-tariff")
async def insert_tariff(request: schemas.TariffInsertRequest):
    return outcome(await service.add_tariff(request))


@router.post("/update-tariff")
async def update_tariff(request: schemas.TariffUpdateRequest):
    return outcome(await service.update_tariff(request))


@router.post("/delete-tariff")
async def delete_tariff(request: schemas.TariffDeleteRequest):
    return outcome(await service.remove_tariff(request.trade_agreement))


@router.get("/company")
async def get_companies() -> dict:
    return table(await service.companies())


@router.post("/insert-company")
async def insert_company(request: schemas.CompanyInsertRequest):
    return outcome(await service.add_company(request))


@router.post("/update-company")
async def update_company(request: schemas.CompanyUpdateRequest):
    return outcome(await service.update_company(request))


@router.post("/delete-company")
async def delete_company(request: schemas.CompanyDeleteRequest):
    return outcome(await service.remove_company(name=request.name, ceo=request.ceo))
