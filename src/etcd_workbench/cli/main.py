"""Main CLI entry point for etcd-workbench.

Commands:
    start   - Start the HTTP server
    config  - Configuration inspection (show)

Subcommand help:
    etcd-workbench COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys

import click

from etcd_workbench import __version__
from etcd_workbench.constants import APP_NAME

from .commands.config import config
from .commands.start import start


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """etcd-workbench: web UI server for managing etcd clusters."""
    if version:
        click.echo(f"{APP_NAME} {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(config)
cli.add_command(start)


def main() -> None:
    """CLI entry point."""
    cli()
