"""Numeric extraction for free-text quantity columns.

Area and count columns are typed in by hand and carry currency symbols,
Indian digit grouping, units and stray text ("₹1,23,456.00", "450 sq.m.").
Everything except digits and the decimal point is discarded, then the
longest leading decimal number is parsed.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")

_NOISE = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d*\.?\d*")


def extract_number(raw: Any) -> Decimal:
    """Parse a noisy numeric string; anything unparseable counts as zero.

    Dots left over from unit suffixes ("sq.m.") end the number rather than
    invalidating it, so "450 sq.m." is 450 and "1.2.3" is 1.2.
    """
    if raw is None or isinstance(raw, bool):
        return ZERO
    text = format(raw, "f") if isinstance(raw, Decimal) else str(raw)
    prefix = _LEADING_NUMBER.match(_NOISE.sub("", text)).group()
    if not any(ch.isdigit() for ch in prefix):
        return ZERO
    try:
        value = Decimal(prefix)
    except InvalidOperation:
        return ZERO
    return value if value.is_finite() else ZERO
