"""Command-line interface for etcd-workbench.

Provides commands for starting the server and inspecting configuration.
"""

from .main import cli, main

__all__ = ["cli", "main"]
