"""Display ordering for summary rows.

Plot-use summaries lead with the four planning uses in a fixed order,
followed by every other use alphabetically. Department summaries keep the
aggregator's alphabetical order.
"""

from __future__ import annotations

from typing import Iterable

from plotledger.models.summary import AggregateRow, Dimension, SummaryPartition
from plotledger.reporting.sorting import collation_key

PRIMARY_USE_ORDER: tuple[str, ...] = (
    "COMMERCIAL",
    "RESIDENTIAL",
    "RESIDENTIAL + COMMERCIAL",
    "SERVICE INDUSTRY",
)


def _normalize(category: str) -> str:
    return category.strip().upper()


def partition_rows(rows: Iterable[AggregateRow], dimension: Dimension) -> SummaryPartition:
    """Split rows into ordered primary/other halves without a separator."""
    data = [row for row in rows if not row.is_separator]
    if dimension is Dimension.DEPARTMENT:
        return SummaryPartition(other=data)

    primary = [row for row in data if _normalize(row.category) in PRIMARY_USE_ORDER]
    other = [row for row in data if _normalize(row.category) not in PRIMARY_USE_ORDER]
    primary.sort(key=lambda row: PRIMARY_USE_ORDER.index(_normalize(row.category)))
    other.sort(key=lambda row: collation_key(row.category))
    return SummaryPartition(primary=primary, other=other)


def apply_ordering(rows: Iterable[AggregateRow], dimension: Dimension) -> list[AggregateRow]:
    """Order rows for display, inserting the OTHERS separator for plot-use summaries."""
    rows = list(rows)
    if dimension is Dimension.DEPARTMENT:
        return rows
    return partition_rows(rows, dimension).rows(separator=True)
