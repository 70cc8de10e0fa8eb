"""Group plot records by a category column and compute area shares."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from plotledger.models.plot_record import AREA_FIELD, COUNT_FIELD, PlotRecord
from plotledger.models.summary import (
    UNKNOWN_CATEGORY,
    AggregateRow,
    SummaryFilter,
    SummaryTotals,
)
from plotledger.reporting.numeric import ZERO, extract_number
from plotledger.reporting.sorting import collation_key

HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def matches_filter(record: PlotRecord, summary_filter: SummaryFilter | None) -> bool:
    """True when the record satisfies every non-empty filter constraint."""
    if summary_filter is None:
        return True
    return all(record.value(column) == wanted for column, wanted in summary_filter.criteria().items())


def percent_of(area: Decimal, grand_total: Decimal) -> Decimal:
    if grand_total <= 0:
        return ZERO
    return (area / grand_total * HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)


def aggregate(
    records: Iterable[PlotRecord],
    category_field: str,
    summary_filter: SummaryFilter | None = None,
) -> list[AggregateRow]:
    """Sum area and additional count per category.

    Categories whose summed area is zero are dropped. Rows come back in
    alphabetical category order with each row's percentage share of the
    total area across all surviving categories.
    """
    areas: dict[str, Decimal] = {}
    counts: dict[str, Decimal] = {}

    for record in records:
        if not matches_filter(record, summary_filter):
            continue
        category = record.value(category_field) or UNKNOWN_CATEGORY
        areas[category] = areas.get(category, ZERO) + extract_number(record.value(AREA_FIELD))
        counts[category] = counts.get(category, ZERO) + extract_number(record.value(COUNT_FIELD))

    # A category with no recorded area is not reported at all.
    surviving = sorted((c for c, a in areas.items() if a != 0), key=collation_key)
    grand_total = sum((areas[c] for c in surviving), ZERO)

    return [
        AggregateRow(
            category=category,
            area=areas[category],
            additional_count=counts[category],
            percent=percent_of(areas[category], grand_total),
        )
        for category in surviving
    ]


def totals(rows: Iterable[AggregateRow]) -> SummaryTotals:
    """Grand totals over data rows; the separator row is skipped."""
    area = ZERO
    count = ZERO
    for row in rows:
        if row.is_separator:
            continue
        area += row.area
        count += row.additional_count
    return SummaryTotals(area=area, additional_count=count)
