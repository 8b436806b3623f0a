"""Parsing and validation of a typed cheque amount."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

MAX_AMOUNT = Decimal("999999999999.99")
DECIMAL_PLACES = 2

# Optional minus, ASCII digits, optional point with up to two decimals
_AMOUNT_RE = re.compile(r"^-?[0-9]+(\.[0-9]{0,2})?$")
_STRIP_RE = re.compile(r"[,\s]")


class Rejection(Enum):
    """Reasons an input cannot be written as an amount, with the fixed message."""

    EMPTY_INPUT = "請輸入金額"
    INVALID_FORMAT = "輸入格式錯誤（請輸入有效數字）"
    NEGATIVE_NOT_SUPPORTED = "不支持負數"
    AMOUNT_TOO_LARGE = "金額過大（最大支持 999,999,999,999.99）"

    @property
    def message(self) -> str:
        return self.value


class AmountRejected(ValueError):
    """Raised when raw text does not describe a supported amount."""

    def __init__(self, rejection: Rejection):
        super().__init__(rejection.message)
        self.rejection = rejection


@dataclass(frozen=True)
class Amount:
    """A validated non-negative amount.

    ``fraction`` is None when the input had no decimal point (a whole
    amount), otherwise exactly two digits: tenths (角) then hundredths (分).
    """

    integer: int
    fraction: Optional[str] = None

    @property
    def jiao(self) -> str:
        return self.fraction[0] if self.fraction else "0"

    @property
    def fen(self) -> str:
        return self.fraction[1] if self.fraction else "0"

    @property
    def is_whole(self) -> bool:
        return self.fraction is None

    @property
    def is_zero(self) -> bool:
        return self.integer == 0 and self.jiao == "0" and self.fen == "0"


def normalize(raw: str) -> str:
    """Drop whitespace and thousands-separator commas."""
    return _STRIP_RE.sub("", raw)


def parse_amount(raw: str) -> Amount:
    """Validate raw text and split it into integer and fractional parts.

    Raises AmountRejected for empty, malformed, negative or too large input.
    """
    text = normalize(raw)
    if not text:
        raise AmountRejected(Rejection.EMPTY_INPUT)
    if not _AMOUNT_RE.match(text):
        raise AmountRejected(Rejection.INVALID_FORMAT)

    value = Decimal(text)
    # -0 and -0.00 compare equal to zero and pass through
    if value < 0:
        raise AmountRejected(Rejection.NEGATIVE_NOT_SUPPORTED)
    if value > MAX_AMOUNT:
        raise AmountRejected(Rejection.AMOUNT_TOO_LARGE)

    # The integer comes from the bounded Decimal: the digit text itself may
    # carry any number of leading zeros.
    _, point, fraction_text = text.partition(".")
    fraction = fraction_text.ljust(DECIMAL_PLACES, "0") if point else None
    return Amount(integer=int(value), fraction=fraction)
