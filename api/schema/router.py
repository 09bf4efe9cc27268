"""
Schema reset API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from core.responses import outcome

from . import service
from .tables import RESET_ORDER

router = APIRouter()


@router.get("/check-db-connection", response_class=PlainTextResponse)
async def check_db_connection() -> str:
    if await service.check_connection():
        return "connected"
    return "unable to connect"


@router.post("/initiate-all")
async def initiate_all():
    return outcome(await service.reset_all())


def _add_initiate_route(entity: str) -> None:
    async def initiate():
        return outcome(await service.reset(entity))

    initiate.__name__ = f"initiate_{entity}"
    router.add_api_route(f"/initiate-{entity}", initiate, methods=["POST"])


for _spec in RESET_ORDER:
    _add_initiate_route(_spec.entity)
