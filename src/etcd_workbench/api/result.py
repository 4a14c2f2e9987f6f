"""Result envelope for domain outcomes.

Domain outcomes, including classified domain errors, are delivered with
HTTP 200 and a uniform JSON body so that the UI only branches on `code`:

    {"code": 10002, "msg": "connection refused", "data": false}

Only transport-level failures (authentication, missing assets,
unexpected errors) use non-200 statuses.
"""

from __future__ import annotations

__all__ = [
    "ResultCode",
    "ResultEnvelope",
    "envelope_response",
]

from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from etcd_workbench.constants import CORS_ALLOW_ORIGIN, CORS_HEADER


class ResultEnvelope(BaseModel):
    """Structured response payload.

    Attributes:
        code: Domain result code (0 on success).
        msg: Human-readable message.
        data: Payload, or false for classified errors.
    """

    code: int
    msg: str
    data: Any = None

    model_config = {"frozen": True}


class ResultCode(Enum):
    """Fixed result categories with their code and default message."""

    OK = (0, "ok")
    INVALID_KEY = (10001, "Invalid key spec")
    CONNECT_ERROR = (10002, "Connect error")

    def __init__(self, code: int, default_message: str) -> None:
        self.code = code
        self.default_message = default_message

    def result(self, data: Any = None, *, message: str | None = None) -> ResultEnvelope:
        """Build an envelope for this category.

        Args:
            data: Payload (None when omitted).
            message: Overrides the category's default message.

        Returns:
            Immutable ResultEnvelope.
        """
        return ResultEnvelope(
            code=self.code,
            msg=self.default_message if message is None else message,
            data=data,
        )


def envelope_response(envelope: ResultEnvelope) -> JSONResponse:
    """Render an envelope as an HTTP 200 JSON response."""
    return JSONResponse(
        status_code=200,
        content=envelope.model_dump(),
        headers={CORS_HEADER: CORS_ALLOW_ORIGIN},
    )
