"""Config command group for etcd-workbench CLI."""

from __future__ import annotations

__all__ = ["config"]

import json
import sys
from pathlib import Path

import click

from etcd_workbench.config import load_runtime_config
from etcd_workbench.constants import DEFAULT_CONFIG_FILENAME
from etcd_workbench.exceptions import ConfigurationError

from ..styling import style_error

MASK = "********"


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    help="Path to the JSON configuration file",
)
def show(config_path: Path) -> None:
    """Show the effective configuration.

    Passwords and the encryption key are masked.
    """
    try:
        runtime_config = load_runtime_config(config_path)
    except ConfigurationError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    data = runtime_config.model_dump()
    data["config_encrypt_key"] = MASK
    data["users"] = {user: MASK for user in runtime_config.users}
    click.echo(json.dumps(data, indent=2))
