"""
Unit normalization: base-unit integers (18 decimals) to display quantities.

Upstream records carry amounts as decimal strings and the RPC node returns
hex quantities. Anything absent or unparsable is treated as 0 so one bad
field never aborts a report.

Amounts have no upper bound, so arithmetic runs in a decimal context whose
precision grows with the operands (see wide_context) instead of the default
28 digits.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal, getcontext, localcontext
from typing import Any

DECIMALS = 18
BASE_UNITS_PER_UNIT = Decimal(10) ** DECIMALS
DISPLAY_PLACES = 4

# ASCII only: int() would also take "1_000" and non-ASCII digits
_DECIMAL_DIGITS_RE = re.compile(r"[0-9]+")
_HEX_DIGITS_RE = re.compile(r"[0-9a-f]+")


def parse_int(raw: Any) -> int:
    """Decimal string or int -> int. None, empty, non-numeric or negative -> 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw >= 0 else 0
    text = str(raw).strip()
    if not _DECIMAL_DIGITS_RE.fullmatch(text):
        return 0
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int/str conversion limit
        return 0


def parse_hex_quantity(raw: Any) -> int:
    """JSON-RPC hex quantity ("0x1bc16d674ec80000") -> int; absent/invalid -> 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw >= 0 else 0
    text = str(raw).strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    if not _HEX_DIGITS_RE.fullmatch(text):
        return 0
    return int(text, 16)


def wide_context(*values: Decimal) -> Context:
    """
    Copy of the current context with room for the integer digits of `values`.

    Precision is the sum of the operands' integer digits plus the current
    precision, so products, quotients by small integers and quantize() to a
    handful of places stay exact or keep the usual 28 significant digits
    after the integer part.
    """
    ctx = getcontext().copy()
    magnitude = sum(max(v.adjusted() + 1, 0) for v in values if v.is_finite() and v)
    ctx.prec = max(ctx.prec, magnitude + ctx.prec)
    return ctx


def wei_to_decimal(amount: Any) -> Decimal:
    """Exact base units / 10^18 as Decimal, for any magnitude."""
    units = Decimal(parse_int(amount))
    with localcontext(wide_context(units)):
        return units / BASE_UNITS_PER_UNIT


def format_fixed(value: Decimal | int | float, places: int = DISPLAY_PLACES) -> str:
    """Render with exactly `places` fractional digits, rounding half up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext(wide_context(value)):
        return str(value.quantize(quantum, rounding=ROUND_HALF_UP))


def to_decimal(amount: Any) -> str:
    """
    Base-unit integer -> decimal string with 4 fractional digits.

    >>> to_decimal("1000000000000000000")
    '1.0000'
    >>> to_decimal(None)
    '0.0000'
    """
    return format_fixed(wei_to_decimal(amount), DISPLAY_PLACES)
