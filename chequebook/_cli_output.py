"""Console output for the chequebook commands.

Status lines are tagged ([info], [warn], ...) and go through Typer; converted
wordings are rendered with Rich in the result or error style.
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

RESULT_STYLE = "bold green"
ERROR_STYLE = "bold red"

console = Console()


def wording(text: str, *, is_error: bool = False) -> None:
    """Render one converted amount (or rejection message) on its own line."""
    console.print(text, style=ERROR_STYLE if is_error else RESULT_STYLE, highlight=False)


def info(message: str) -> None:
    typer.echo(f"[info] {message}")


def warn(message: str) -> None:
    typer.secho(f"[warn] {message}", fg=typer.colors.YELLOW)


def success(message: str) -> None:
    typer.secho(f"[ok] {message}", fg=typer.colors.GREEN)


def error(message: str, *, err: bool = True) -> None:
    typer.secho(f"[error] {message}", fg=typer.colors.RED, err=err)


def fatal(message: str, *, code: int = 1, err: bool = True) -> NoReturn:
    """Report an error and stop the command with the given exit code."""
    error(message, err=err)
    raise typer.Exit(code=code)
