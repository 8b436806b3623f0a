"""CLI: write an arabic-numeral amount as a Traditional Chinese cheque amount.

Examples:
    py cli.py cheque convert 1234.5       # 壹仟貳佰叁拾肆圓伍角
    py cli.py cheque convert "1,000,001"  # 壹佰萬零壹圓整
    py cli.py cheque convert -- -5        # 不支持負數 (exit code 1)
    py cli.py cheque watch                # convert each line typed
"""

from __future__ import annotations

import typer

from ._cli_common import new_typer_app
from ._cli_output import error, info, warn, wording
from .amount import Amount, AmountRejected, parse_amount
from .numerals import DIGIT_GLYPHS, ZERO, convert_integer

YUAN = "圓"
JIAO = "角"
FEN = "分"
WHOLE = "整"
ZERO_AMOUNT = ZERO + YUAN + WHOLE

# Markers the input box uses to decide how a result is shown
_ERROR_MARKERS = ("錯誤", "不支持", "過大")
_NOT_COPYABLE_MARKERS = ("請輸入",) + _ERROR_MARKERS
COPY_REFUSED = "請先輸入有效的金額"


# User can access help message with shortcut -h
app = new_typer_app()


def convert_fraction(amount: Amount) -> str:
    """Render the 角/分 tail, or 整 for a whole amount."""
    jiao, fen = amount.jiao, amount.fen
    if amount.is_whole or (jiao == "0" and fen == "0"):
        return WHOLE
    if jiao != "0":
        tail = DIGIT_GLYPHS[int(jiao)] + JIAO
        if fen != "0":
            tail += DIGIT_GLYPHS[int(fen)] + FEN
        return tail
    return ZERO + DIGIT_GLYPHS[int(fen)] + FEN


def convert(raw: str) -> str:
    """Convert raw input text to the legal amount written on a cheque.

    Never raises for text input: rejected input yields its fixed message,
    e.g. "不支持負數" for "-5".
    """
    try:
        amount = parse_amount(raw)
    except AmountRejected as exc:
        return exc.rejection.message

    if amount.is_zero:
        return ZERO_AMOUNT
    return convert_integer(amount.integer) + YUAN + convert_fraction(amount)


def is_error_text(text: str) -> bool:
    """True when a converted text should be shown in the error style."""
    return any(marker in text for marker in _ERROR_MARKERS)


def is_copyable(text: str) -> bool:
    """True when a converted text is a real amount and may be copied."""
    return not any(marker in text for marker in _NOT_COPYABLE_MARKERS)


@app.command("convert")
def convert_command(
    value: str = typer.Argument(..., help="Amount in arabic numerals, e.g. 1,234.56 (at most 2 decimals)."),
):
    """Print the cheque wording of VALUE.

    Rejected input (empty, malformed, negative, too large) is reported on
    stderr and exits with code 1.
    """
    text = convert(value)
    if not is_copyable(text):
        error(text)
        raise typer.Exit(code=1)
    typer.echo(text)


@app.command("watch")
def watch(
    copy_check: bool = typer.Option(False, "-c", "--copy-check", help="Also tell whether each result may be copied"),
):
    """Convert every line typed until an empty line, 'q' or EOF."""
    info("Type an amount and press Enter (empty line or 'q' to quit)")
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            break
        if raw.strip() in ("", "q"):
            break

        text = convert(raw)
        # The empty-input hint is not an error and keeps the result style
        wording(text, is_error=is_error_text(text))
        if copy_check and not is_copyable(text):
            warn(COPY_REFUSED)


# Entry point for running the script directly
if __name__ == '__main__':
    app()
