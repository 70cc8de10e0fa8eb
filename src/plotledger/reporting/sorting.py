"""Sort keys shared by every backend so listings order identically."""

from __future__ import annotations

import re
from typing import Iterable

_LEADING_INT = re.compile(r"\s*(\d+)")


def collation_key(text: str) -> tuple[str, str]:
    """Case-insensitive alphabetical order, raw string as tie-break."""
    return (text.casefold(), text)


def sector_key(sector: str) -> tuple[int, int, tuple[str, str]]:
    """Sectors sort on their leading integer; values without one come last."""
    match = _LEADING_INT.match(sector)
    if match:
        return (0, int(match.group(1)), collation_key(sector))
    return (1, 0, collation_key(sector))


def distinct_sorted(values: Iterable[str | None], key=collation_key) -> list[str]:
    """Distinct non-empty values in ``key`` order."""
    return sorted({v for v in values if v}, key=key)
