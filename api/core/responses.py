"""
Response shapes shared by every router.

Mutations answer `{"success": bool}` (HTTP 500 when false); fetches answer
`{"data": [...]}`.
"""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse


def outcome(ok: bool) -> dict | JSONResponse:
    if ok:
        return {"success": True}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False},
    )


def rejected(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message},
    )


def server_error(message: str = "Internal Server Error") -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": message},
    )


def table(rows: list[dict[str, Any]]) -> dict:
    return {"data": rows}
