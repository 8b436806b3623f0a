"""Traditional Chinese financial numerals for cheque amounts.

Integers are written in 4-digit groups joined by the group units 萬(10^4),
億(10^8) and 兆(10^12). Inside a group every digit carries an explicit
positional unit, so 10 is 壹拾 and never just 拾.
"""

from __future__ import annotations

# Financial uppercase numerals used on cheques, indexed by digit value
DIGIT_GLYPHS: tuple[str, ...] = ("零", "壹", "貳", "叁", "肆", "伍", "陸", "柒", "捌", "玖")

# Units inside a 4-digit group: ones, tens, hundreds, thousands
POSITION_UNITS: tuple[str, ...] = ("", "拾", "佰", "仟")
GROUP_UNITS: tuple[str, ...] = ("", "萬", "億", "兆")

ZERO = DIGIT_GLYPHS[0]
GROUP_SIZE = 10000
MAX_INTEGER = 999_999_999_999

# Group units a placeholder 零 may never sit in front of
_NO_ZERO_BEFORE = frozenset(("萬", "億"))


def convert_group(n: int) -> str:
    """Convert 0..9999 to financial uppercase WITHOUT a group unit.

    Rules in this 4-digit scope:
    - Every non-zero digit is followed by its positional unit.
    - Internal zeros collapse into a single 零 between non-zero digits.
    - No leading or trailing 零; 0 itself yields "".
    """
    if not 0 <= n < GROUP_SIZE:
        raise ValueError(f"group value out of range 0..9999: {n}")
    if n == 0:
        return ""

    parts: list[str] = []
    zero_pending = False
    for position in range(len(POSITION_UNITS) - 1, -1, -1):  # thousands -> ones
        d = (n // 10 ** position) % 10
        if d == 0:
            zero_pending = True
            continue
        if zero_pending and parts:
            parts.append(ZERO)
        parts.append(DIGIT_GLYPHS[d] + POSITION_UNITS[position])
        zero_pending = False
    return "".join(parts)


def split_groups(n: int) -> list[int]:
    """Split a non-negative integer into base-10000 groups, lowest first."""
    groups: list[int] = []
    while n > 0:
        groups.append(n % GROUP_SIZE)
        n //= GROUP_SIZE
    return groups


def convert_integer(n: int) -> str:
    """Convert 0..999,999,999,999 to cheque wording in Traditional Chinese.

    Example: 120034 -> "壹拾貳萬零叁拾肆"
    """
    if not 0 <= n <= MAX_INTEGER:
        raise ValueError(f"integer out of supported range: {n}")
    if n == 0:
        return ZERO

    groups = split_groups(n)
    parts: list[str] = []
    zero_pending = False  # crossed one/more empty groups since the last populated one
    for idx in range(len(groups) - 1, -1, -1):  # high -> low
        g = groups[idx]
        if g == 0:
            if parts:
                zero_pending = True
            continue
        # A lower group links to the higher text with one 零 when its own
        # thousands digit is missing (壹萬零壹) or a whole group was skipped
        # (壹億零壹仟).
        if parts and (zero_pending or g < 1000):
            parts.append(ZERO)
        zero_pending = False
        parts.append(convert_group(g) + GROUP_UNITS[idx])

    return tidy_zeros("".join(parts))


# --- Zero cleanup passes ---------------------------------------------------
# Each pass is a single left-to-right scan and is idempotent.

def collapse_zeros(text: str) -> str:
    """Collapse every run of 零 into one 零."""
    out: list[str] = []
    for ch in text:
        if ch == ZERO and out and out[-1] == ZERO:
            continue
        out.append(ch)
    return "".join(out)


def drop_zero_before_group_unit(text: str) -> str:
    """Remove a 零 that directly precedes 萬 or 億."""
    out: list[str] = []
    for ch in text:
        if ch in _NO_ZERO_BEFORE:
            while out and out[-1] == ZERO:
                out.pop()
        out.append(ch)
    return "".join(out)


def strip_trailing_zeros(text: str) -> str:
    """Remove the run of 零 at the end of the text."""
    end = len(text)
    while end > 0 and text[end - 1] == ZERO:
        end -= 1
    return text[:end]


def tidy_zeros(text: str) -> str:
    """Apply the three cleanup passes in order."""
    text = collapse_zeros(text)
    text = drop_zero_before_group_unit(text)
    return strip_trailing_zeros(text)
