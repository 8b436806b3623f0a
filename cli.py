#!/usr/bin/env python3
"""Chequebook CLI entry point.

This aggregates subcommands from the chequebook/ package using Typer.

Subcommands:
    - cheque:  write an amount as a Traditional Chinese cheque amount
    - verify:  check the converter against a CSV of expected wordings

Examples:
    py cli.py cheque convert 1234.5        # 壹仟貳佰叁拾肆圓伍角
    py cli.py cheque convert 10001         # 壹萬零壹圓整
    py cli.py cheque watch -c              # convert each typed line, flag uncopyable results
    py cli.py verify tests/fixtures/cases.csv
"""

from chequebook import TOOL_COMMANDS
from chequebook._cli_common import mount_tools, new_typer_app


# Root Typer app; expose -h/--help on all levels. Sub-apps mounted with
# invoke_without_command=True, e.g. `py cli.py verify`, run their callback.
app = mount_tools(new_typer_app(no_args_is_help=True), TOOL_COMMANDS)


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
