"""Summary report models: aggregate rows, filters, partitions and totals."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from plotledger.models.plot_record import DEPARTMENT_FIELD, NODE_FIELD, SECTOR_FIELD, USE_FIELD

SEPARATOR_CATEGORY = "--- OTHERS ---"
UNKNOWN_CATEGORY = "Unknown"


class Dimension(StrEnum):
    USE = "use"
    DEPARTMENT = "department"

    @property
    def field(self) -> str:
        """Record column this dimension groups by."""
        return USE_FIELD if self is Dimension.USE else DEPARTMENT_FIELD


class SummaryFilter(BaseModel):
    """Optional node/sector constraints applied before grouping."""

    node: Optional[str] = None
    sector: Optional[str] = None

    def criteria(self) -> dict[str, str]:
        """Non-empty constraints keyed by record column."""
        out: dict[str, str] = {}
        if self.node:
            out[NODE_FIELD] = self.node
        if self.sector:
            out[SECTOR_FIELD] = self.sector
        return out


class AggregateRow(BaseModel):
    """One category of a summary: summed area, summed additional count, share of area."""

    category: str
    area: Decimal = Decimal("0")
    additional_count: Decimal = Field(default=Decimal("0"), alias="additionalCount")
    percent: Decimal = Decimal("0")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_separator(self) -> bool:
        return self.category == SEPARATOR_CATEGORY

    @field_serializer("area", "additional_count", "percent", when_used="json")
    def _as_number(self, value: Decimal) -> int | float:
        return int(value) if value == value.to_integral_value() else float(value)


# Display-only divider between the fixed plot uses and everything else.
SEPARATOR_ROW = AggregateRow(category=SEPARATOR_CATEGORY)


class SummaryTotals(BaseModel):
    """Grand totals over the data rows of a summary (separator excluded)."""

    area: Decimal = Decimal("0")
    additional_count: Decimal = Field(default=Decimal("0"), alias="additionalCount")

    model_config = {"populate_by_name": True}

    @field_serializer("area", "additional_count", when_used="json")
    def _as_number(self, value: Decimal) -> int | float:
        return int(value) if value == value.to_integral_value() else float(value)


class SummaryPartition(BaseModel):
    """Ordered summary split into the fixed primary categories and the rest."""

    primary: list[AggregateRow] = Field(default_factory=list)
    other: list[AggregateRow] = Field(default_factory=list)

    def rows(self, separator: bool = True) -> list[AggregateRow]:
        """Flatten; the separator is inserted only when both halves are non-empty."""
        if separator and self.primary and self.other:
            return [*self.primary, SEPARATOR_ROW, *self.other]
        return [*self.primary, *self.other]


class SummaryReport(BaseModel):
    """Summary rows together with their partition and grand totals."""

    dimension: Dimension
    rows: list[AggregateRow]
    primary: list[AggregateRow]
    other: list[AggregateRow]
    totals: SummaryTotals
