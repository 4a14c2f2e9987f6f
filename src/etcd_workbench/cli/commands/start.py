"""Start command for etcd-workbench CLI."""

from __future__ import annotations

__all__ = ["start"]

import asyncio
import sys
from pathlib import Path

import click

from etcd_workbench.config import load_runtime_config
from etcd_workbench.constants import DEFAULT_CONFIG_FILENAME
from etcd_workbench.exceptions import ConfigurationError
from etcd_workbench.server import run_server

from ..styling import style_error, style_label, style_warning


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    help="Path to the JSON configuration file",
)
@click.option("--port", "-p", type=click.IntRange(1, 65535), default=None, help="Override the configured port")
@click.option("--host", default=None, help="Override the configured bind address")
def start(config_path: Path, port: int | None, host: str | None) -> None:
    """Start the HTTP server.

    Serves the web UI and its API until interrupted (Ctrl+C).
    """
    try:
        config = load_runtime_config(config_path)
    except ConfigurationError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    if port is not None:
        config.port = port
    if host is not None:
        config.host = host

    if not config.enable_auth:
        click.echo(style_warning("Authentication is disabled, anyone who can reach the port can use the UI"))

    click.echo(style_label("Listening") + f" http://{config.host}:{config.port}")
    click.echo(style_label("Data dir") + f" {config.data_dir}")
    click.echo()
    click.echo("Press Ctrl+C to stop")

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        click.echo()
        click.echo("Server stopped.")
    except OSError as e:
        click.echo(style_error(f"Failed to start: {e}"), err=True)
        sys.exit(1)
