"""Heartbeat endpoint.

The UI polls this to detect that the server (and its session) is alive.
Only mounted when enable_heartbeat is set.
"""

from __future__ import annotations

__all__ = ["router"]

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..result import ResultCode, envelope_response

router = APIRouter(tags=["heartbeat"])


@router.get("/heart_beat")
async def heart_beat() -> JSONResponse:
    """Report that the server is alive."""
    return envelope_response(ResultCode.OK.result(True))
