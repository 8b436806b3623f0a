"""Typer app construction shared by the chequebook commands and cli.py."""

from __future__ import annotations

from typing import Any, Iterable

import typer

HELP_OPTION_NAMES = ("-h", "--help")


def new_typer_app(**kwargs: Any) -> typer.Typer:
    """Typer app with -h/--help shortcuts and no shell-completion options."""
    context_settings = dict(kwargs.pop("context_settings", {}) or {})
    context_settings.setdefault("help_option_names", list(HELP_OPTION_NAMES))
    kwargs.setdefault("add_completion", False)
    return typer.Typer(context_settings=context_settings, **kwargs)


def mount_tools(root: typer.Typer, commands: Iterable[Any]) -> typer.Typer:
    """Add every registered sub-app (see chequebook.TOOL_COMMANDS) under its name."""
    for command in commands:
        root.add_typer(command.app, name=command.name, invoke_without_command=command.invoke_without_command)
    return root
