"""chequebook package: Traditional Chinese cheque amount wording."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from . import cheque, verify
from .cheque import convert


@dataclass(frozen=True)
class ToolCommand:
    """Declarative CLI registration entry for a chequebook subcommand."""

    name: str
    app: typer.Typer
    invoke_without_command: bool = False


TOOL_COMMANDS: tuple[ToolCommand, ...] = (
    ToolCommand(name="cheque", app=cheque.app, invoke_without_command=False),
    ToolCommand(name="verify", app=verify.app, invoke_without_command=True),
)


__all__ = [
    "cheque",
    "verify",
    "convert",
    "ToolCommand",
    "TOOL_COMMANDS",
]
