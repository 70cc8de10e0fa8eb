"""PlotService: the query surface over a record store.

Stores only answer equality-filtered fetches, point lookups and partial
updates. Distinct listings, sorting, grouping and numeric parsing all run
here, so the live DynamoDB store and the in-memory demo store return the
same rows in the same order for the same data.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field

from plotledger.core.exceptions import RecordNotFoundError
from plotledger.core.protocols import IAssetResolver, IRecordStore
from plotledger.models.plot_record import (
    AREA_FIELD,
    BLOCK_FIELD,
    COMPUTED_FIELDS,
    COUNT_FIELD,
    ID_FIELD,
    NODE_FIELD,
    PLOT_FIELD,
    SEARCH_FIELDS,
    SECTOR_FIELD,
    PlotDetail,
    SearchHit,
)
from plotledger.models.summary import (
    AggregateRow,
    Dimension,
    SummaryFilter,
    SummaryPartition,
    SummaryReport,
)
from plotledger.reporting.aggregator import aggregate, totals
from plotledger.reporting.ordering import apply_ordering, partition_rows
from plotledger.reporting.sorting import distinct_sorted, sector_key

logger = logging.getLogger(__name__)


class UpdateResult(BaseModel):
    """Outcome of a partial record update."""

    updated: bool
    applied: list[str] = Field(default_factory=list)
    dropped: list[str] = Field(default_factory=list)
    message: str = ""


class PlotService:
    """Listings, search, detail, edit and summaries for plot records."""

    def __init__(self, store: IRecordStore, assets: IAssetResolver) -> None:
        self._store = store
        self._assets = assets

    # ---- Dropdowns ----

    def list_nodes(self) -> list[str]:
        rows = self._store.list_records(fields=[NODE_FIELD])
        return distinct_sorted(r.value(NODE_FIELD) for r in rows)

    def list_sectors(self, node: str) -> list[str]:
        rows = self._store.list_records({NODE_FIELD: node}, fields=[SECTOR_FIELD])
        return distinct_sorted((r.value(SECTOR_FIELD) for r in rows), key=sector_key)

    def list_blocks(self, node: str, sector: str) -> list[str]:
        rows = self._store.list_records({NODE_FIELD: node, SECTOR_FIELD: sector}, fields=[BLOCK_FIELD])
        return distinct_sorted(r.value(BLOCK_FIELD) for r in rows)

    def list_plots(self, node: str, sector: str) -> list[str]:
        rows = self._store.list_records({NODE_FIELD: node, SECTOR_FIELD: sector}, fields=[PLOT_FIELD])
        return distinct_sorted(r.value(PLOT_FIELD) for r in rows)

    # ---- Search & detail ----

    def search(self, node: str, sector: str | None = None, block: str | None = None,
               plot: str | None = None) -> list[SearchHit]:
        """Records in ``node``; sector, block and plot narrow the match when given."""
        criteria = {NODE_FIELD: node}
        for column, value in ((SECTOR_FIELD, sector), (BLOCK_FIELD, block), (PLOT_FIELD, plot)):
            if value:
                criteria[column] = value
        rows = self._store.list_records(criteria, fields=list(SEARCH_FIELDS))
        hits = [SearchHit.from_record(r) for r in rows]
        return sorted(hits, key=_id_key)

    def get_record(self, record_id: str) -> PlotDetail:
        record = self._store.get_record(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return PlotDetail.from_parts(record, self._assets.resolve(record.record_id or record_id))

    def update_record(self, record_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        """Apply a partial update.

        ``ID``, asset-derived keys and non-scalar values (lists, objects) are
        dropped; empty strings clear the column. A payload with nothing left
        to write is a successful no-op.
        """
        applied: dict[str, str | None] = {}
        dropped: list[str] = []
        for column, value in fields.items():
            if column == ID_FIELD or column in COMPUTED_FIELDS or isinstance(value, (list, tuple, set, dict)):
                dropped.append(column)
                continue
            applied[column] = None if value is None or value == "" else str(value)

        if dropped:
            logger.debug("Record %s: ignoring non-persisted keys %s", record_id, dropped)
        if not applied:
            message = "No changes" if not fields else "No valid columns to update"
            return UpdateResult(updated=True, dropped=dropped, message=message)

        if not self._store.update_record(record_id, applied):
            return UpdateResult(updated=False, dropped=dropped, message="Not found")
        return UpdateResult(updated=True, applied=list(applied), dropped=dropped, message="Record updated successfully")

    # ---- Summaries ----

    def _aggregate(self, dimension: Dimension, summary_filter: SummaryFilter | None) -> list[AggregateRow]:
        summary_filter = summary_filter or SummaryFilter()
        rows = self._store.list_records(
            summary_filter.criteria(),
            fields=[dimension.field, AREA_FIELD, COUNT_FIELD, NODE_FIELD, SECTOR_FIELD],
        )
        return aggregate(rows, dimension.field, summary_filter)

    def get_summary(self, dimension: Dimension, summary_filter: SummaryFilter | None = None) -> list[AggregateRow]:
        return apply_ordering(self._aggregate(dimension, summary_filter), dimension)

    def get_summary_partition(self, dimension: Dimension,
                              summary_filter: SummaryFilter | None = None) -> SummaryPartition:
        return partition_rows(self._aggregate(dimension, summary_filter), dimension)

    def get_summary_report(self, dimension: Dimension,
                           summary_filter: SummaryFilter | None = None) -> SummaryReport:
        partition = self.get_summary_partition(dimension, summary_filter)
        rows = partition.rows(separator=dimension is Dimension.USE)
        return SummaryReport(
            dimension=dimension,
            rows=rows,
            primary=partition.primary,
            other=partition.other,
            totals=totals(rows),
        )


def _id_key(hit: SearchHit) -> tuple[int, int, str]:
    raw = hit.ID or ""
    return (0, int(raw), raw) if raw.isdigit() else (1, 0, raw)
