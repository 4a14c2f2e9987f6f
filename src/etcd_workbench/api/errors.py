"""Exception classification into result envelopes.

Failures raised while handling a request are classified once, at the
controller boundary:

    Exception                               Envelope        Log level
    --------------------------------------  --------------  ---------
    InvalidKeySpecError, UnsupportedAlgorithm,
    InvalidKey                              INVALID_KEY     ERROR
    EtcdExecuteError                        CONNECT_ERROR   ERROR
    TimeoutError                            CONNECT_ERROR   DEBUG
    anything else                           (framework default 500)

Classified failures are answered with HTTP 200 and an envelope whose
data is false. Nothing is retried here.
"""

from __future__ import annotations

__all__ = [
    "CLASSIFIED_EXCEPTIONS",
    "ErrorKind",
    "classify_exception",
    "domain_error_handler",
    "register_exception_handlers",
]

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from etcd_workbench.constants import APP_NAME
from etcd_workbench.exceptions import KEY_SPEC_ERRORS, EtcdExecuteError

from .result import ResultCode, envelope_response

_logger = logging.getLogger(f"{APP_NAME}.api.errors")

# Every exception type that classify_exception() maps to a domain error
CLASSIFIED_EXCEPTIONS: tuple[type[BaseException], ...] = (
    *KEY_SPEC_ERRORS,
    EtcdExecuteError,
    TimeoutError,
)


class ErrorKind(str, Enum):
    """Classification of a request failure."""

    INVALID_KEY = "INVALID_KEY"
    EXECUTE_FAILURE = "EXECUTE_FAILURE"
    TIMEOUT = "TIMEOUT"
    UNCLASSIFIED = "UNCLASSIFIED"


def classify_exception(exc: BaseException) -> ErrorKind:
    """Classify a failure, in priority order.

    Args:
        exc: Exception raised while handling a request.

    Returns:
        ErrorKind for the exception; UNCLASSIFIED if no rule applies.
    """
    if isinstance(exc, KEY_SPEC_ERRORS):
        return ErrorKind.INVALID_KEY
    if isinstance(exc, EtcdExecuteError):
        return ErrorKind.EXECUTE_FAILURE
    if isinstance(exc, TimeoutError):
        return ErrorKind.TIMEOUT
    return ErrorKind.UNCLASSIFIED


def _log_failure(level: int, event: str, request: Request, exc: BaseException) -> None:
    _logger.log(
        level,
        {
            "event": event,
            "message": str(exc) or type(exc).__name__,
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
        exc_info=exc,
    )


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn a classified failure into a result envelope.

    Args:
        request: Request whose handling failed.
        exc: The failure.

    Returns:
        HTTP 200 JSONResponse with the envelope.

    Raises:
        Exception: The original exception if it is unclassified, so the
            framework's default error handling applies.
    """
    kind = classify_exception(exc)
    message = str(exc)

    if kind is ErrorKind.INVALID_KEY:
        _log_failure(logging.ERROR, "invalid_key_spec", request, exc)
        envelope = ResultCode.INVALID_KEY.result(False, message=f"Invalid key spec: {message}")
    elif kind is ErrorKind.EXECUTE_FAILURE:
        _log_failure(logging.ERROR, "etcd_execute_failed", request, exc)
        envelope = ResultCode.CONNECT_ERROR.result(False, message=message)
    elif kind is ErrorKind.TIMEOUT:
        _log_failure(logging.DEBUG, "etcd_execute_timeout", request, exc)
        envelope = ResultCode.CONNECT_ERROR.result(False, message=message)
    else:
        # ErrorKind.UNCLASSIFIED: framework default handling
        raise exc

    return envelope_response(envelope)


def register_exception_handlers(app: FastAPI) -> None:
    """Route every classified exception type through domain_error_handler."""
    for exc_type in CLASSIFIED_EXCEPTIONS:
        app.add_exception_handler(exc_type, domain_error_handler)
