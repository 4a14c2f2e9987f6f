"""Front controller: the pipeline every request goes through.

    request
      -> FrontControllerMiddleware: auth gate (401 and stop on rejection)
      -> router: API routes
           -> StaticFallback (router default, only if no route matched)
                -> bundled asset, or the router's own 404
      -> exception handlers (api/errors.py), once per failed request
      -> FrontControllerMiddleware: CORS header on the response
"""

from __future__ import annotations

__all__ = [
    "FrontControllerMiddleware",
    "StaticFallback",
]

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from etcd_workbench.constants import APP_NAME, CORS_ALLOW_ORIGIN, CORS_HEADER

from .auth import AuthGate
from .static import StaticAssetResolver

_logger = logging.getLogger(f"{APP_NAME}.api.controller")

AUTH_REALM = APP_NAME


class FrontControllerMiddleware(BaseHTTPMiddleware):
    """Pre-dispatch authentication and response headers."""

    def __init__(self, app: ASGIApp, gate: AuthGate) -> None:
        """Initialize middleware.

        Args:
            app: ASGI application.
            gate: Authentication gate checked before routing.
        """
        super().__init__(app)
        self.gate = gate

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Gate the request, route it, and decorate the response.

        Args:
            request: Incoming request.
            call_next: Router (with exception handlers).

        Returns:
            401 response on rejection, otherwise the routed response.
        """
        if not self.gate.is_authorized(request.headers.get("authorization")):
            # Path only; credentials never reach the log
            _logger.warning(
                {
                    "event": "unauthorized_request_rejected",
                    "message": f"Rejected unauthorized request: {request.method} {request.url.path}",
                    "details": {"method": request.method, "path": request.url.path},
                }
            )
            response: Response = JSONResponse(
                status_code=401,
                content={"error": "Unauthorized"},
                headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
            )
        else:
            response = await call_next(request)

        # Also covers 401 and router 404 responses, which set no CORS header themselves
        response.headers[CORS_HEADER] = CORS_ALLOW_ORIGIN
        return response


class StaticFallback:
    """ASGI app run by the router when no route matches the path.

    Serves the bundled asset for the path, or hands the request back to
    the router's not-found handling. It never produces a 404 itself.
    """

    def __init__(self, resolver: StaticAssetResolver, not_found: ASGIApp) -> None:
        """Initialize the fallback.

        Args:
            resolver: Asset resolver for the UI build.
            not_found: The router's own not-found app.
        """
        self.resolver = resolver
        self.not_found = not_found

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.not_found(scope, receive, send)
            return

        response = await self.resolver.resolve(scope["path"])
        if response is None:
            await self.not_found(scope, receive, send)
            return

        await response(scope, receive, send)
