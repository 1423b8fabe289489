"""Console output helpers for the covid-chart CLI.

User-facing feedback goes through these functions; diagnostics go through
logging (see core.logging_config) so they can be filtered and shipped as JSON.
"""

from __future__ import annotations

from enum import Enum

import typer


class OutputColor(str, Enum):
    """Valid color options for plain text output."""

    WHITE = "WHITE"
    CYAN = "CYAN"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


def _emit(symbol: str, message: str, color: str, *, prefix: bool, err: bool = False) -> None:
    typer.secho(f"{symbol} {message}" if prefix else message, fg=color, err=err)


def success(message: str, *, prefix: bool = True) -> None:
    """Green line with a checkmark, e.g. ``✅ Chart written to summary.html``."""
    _emit("✅", message, typer.colors.GREEN, prefix=prefix)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Red line with a cross, written to stderr unless ``err`` is False."""
    _emit("❌", message, typer.colors.RED, prefix=prefix, err=err)


def info(message: str, *, prefix: bool = True) -> None:
    _emit("ℹ️ ", message, typer.colors.CYAN, prefix=prefix)


def warning(message: str, *, prefix: bool = True) -> None:
    _emit("⚠️ ", message, typer.colors.YELLOW, prefix=prefix)


def data(message: str, *, prefix: bool = True) -> None:
    """Cyan heading for tabular output, e.g. ``📊 Top countries:``."""
    _emit("📊", message, typer.colors.CYAN, prefix=prefix)


def plain(message: str, *, color: OutputColor | None = None) -> None:
    """Display a message without prefix, optionally colored."""
    if color:
        typer.secho(message, fg=getattr(typer.colors, color.value))
    else:
        typer.echo(message)
