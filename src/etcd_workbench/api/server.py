"""FastAPI application factory for etcd-workbench."""

from __future__ import annotations

__all__ = [
    "create_app",
]

from collections.abc import Iterable
from pathlib import Path

from fastapi import APIRouter, FastAPI

from etcd_workbench import __version__
from etcd_workbench.config import RuntimeConfig
from etcd_workbench.constants import STATIC_DIR

from .auth import AuthGate
from .controller import FrontControllerMiddleware, StaticFallback
from .errors import register_exception_handlers
from .routes import heartbeat
from .static import StaticAssetResolver


def create_app(
    config: RuntimeConfig,
    static_dir: Path | None = None,
    routers: Iterable[APIRouter] = (),
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Runtime configuration, built once at startup.
        static_dir: UI asset root. Defaults to the bundled UI build.
        routers: Additional API routers (etcd operations).

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="etcd-workbench",
        description="HTTP front-end for the etcd management UI",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.config = config

    # Classified failures become result envelopes (HTTP 200)
    register_exception_handlers(app)

    app.add_middleware(FrontControllerMiddleware, gate=AuthGate.from_config(config))

    if config.enable_heartbeat:
        app.include_router(heartbeat.router)
    for router in routers:
        app.include_router(router)

    # Unmatched paths fall back to the bundled UI
    resolver = StaticAssetResolver(static_dir if static_dir is not None else STATIC_DIR)
    app.router.default = StaticFallback(resolver, not_found=app.router.not_found)

    return app
