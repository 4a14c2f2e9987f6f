"""Server process entry point (run_server)."""

from __future__ import annotations

__all__ = [
    "run_server",
]

import logging
from pathlib import Path

import uvicorn

from etcd_workbench.api import create_app
from etcd_workbench.config import RuntimeConfig
from etcd_workbench.constants import API_SERVER_SHUTDOWN_TIMEOUT_SECONDS, APP_NAME

from .log_config import configure_logging

_logger = logging.getLogger(f"{APP_NAME}.server")


async def run_server(config: RuntimeConfig) -> None:
    """Run the HTTP server until it is told to stop (SIGINT/SIGTERM).

    Args:
        config: Runtime configuration, fully loaded.

    Raises:
        OSError: If the data directory cannot be created.
    """
    configure_logging(config)

    Path(config.data_dir).mkdir(parents=True, exist_ok=True)

    app = create_app(config)

    _logger.info(
        {
            "event": "server_starting",
            "message": f"Server starting: http://{config.host}:{config.port} (auth={'on' if config.enable_auth else 'off'})",
            "details": {
                "host": config.host,
                "port": config.port,
                "data_dir": config.data_dir,
                "enable_auth": config.enable_auth,
                "users": len(config.users),
            },
        }
    )

    http_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_config=None,
        timeout_graceful_shutdown=API_SERVER_SHUTDOWN_TIMEOUT_SECONDS,
    )
    server = uvicorn.Server(http_config)
    await server.serve()

    _logger.info({"event": "server_stopped", "message": "Server shutdown complete"})
