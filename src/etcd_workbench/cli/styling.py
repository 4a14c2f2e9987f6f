"""CLI output styling utilities.

- Cyan bold for labels
- Red for error messages (with cross)
- Yellow for warnings
"""

from __future__ import annotations

__all__ = [
    "style_error",
    "style_label",
    "style_warning",
]

import click


def style_label(label: str) -> str:
    """Style a label for summary lines.

    Example:
        >>> click.echo(style_label("Port") + " 8080")
        Port: 8080
    """
    return click.style(f"{label}:", fg="cyan", bold=True)


def style_error(message: str) -> str:
    """Style an error message with cross mark.

    Example:
        >>> click.echo(style_error("Config file not readable"), err=True)
        ✗ Config file not readable
    """
    return click.style(f"✗ {message}", fg="red")


def style_warning(message: str) -> str:
    """Style a warning message with yellow color."""
    return click.style(f"Warning: {message}", fg="yellow", bold=True)
