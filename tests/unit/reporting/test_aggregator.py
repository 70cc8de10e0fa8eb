"""Tests for grouping, percentage shares and totals."""

from __future__ import annotations

from decimal import Decimal

from plotledger.models.plot_record import DEPARTMENT_FIELD, USE_FIELD, PlotRecord
from plotledger.models.summary import SEPARATOR_ROW, AggregateRow, SummaryFilter
from plotledger.reporting.aggregator import aggregate, percent_of, totals


def _rec(use: str | None, area: str | None, count: str | None = None, *,
         node: str = "N1", sector: str = "S1", dept: str | None = None) -> PlotRecord:
    return PlotRecord.model_validate({
        "NAME_OF_NODE": node,
        "SECTOR_NO_": sector,
        "PLOT_USE_FOR_INVOICE": use,
        "Department_Remark": dept,
        "PLOT_AREA_FOR_INVOICE": area,
        "Additional_Plot_Count": count,
    })


# ---------- grouping ----------

class TestGrouping:
    def test_sums_area_and_count_per_category(self):
        rows = aggregate([
            _rec("COMMERCIAL", "100", "1"),
            _rec("COMMERCIAL", "₹50.50", "2 plots"),
            _rec("RESIDENTIAL", "49.50", ""),
        ], USE_FIELD)
        by_cat = {r.category: r for r in rows}
        assert by_cat["COMMERCIAL"].area == Decimal("150.50")
        assert by_cat["COMMERCIAL"].additional_count == Decimal("3")
        assert by_cat["RESIDENTIAL"].additional_count == 0

    def test_missing_and_empty_category_map_to_unknown(self):
        rows = aggregate([_rec(None, "10"), _rec("", "5")], USE_FIELD)
        assert [(r.category, r.area) for r in rows] == [("Unknown", Decimal("15"))]

    def test_groups_by_department_field(self):
        rows = aggregate([_rec("X", "10", dept="ESTATE"), _rec("Y", "30", dept="ESTATE")], DEPARTMENT_FIELD)
        assert [(r.category, r.area) for r in rows] == [("ESTATE", Decimal("40"))]

    def test_rows_sorted_alphabetically_ignoring_case(self):
        rows = aggregate([_rec("b", "1"), _rec("C", "1"), _rec("A", "1")], USE_FIELD)
        assert [r.category for r in rows] == ["A", "b", "C"]

    def test_same_input_gives_identical_output(self):
        records = [_rec("B", "3.3"), _rec("A", "1.1"), _rec("C", "2.2")]
        first = [r.model_dump(mode="json") for r in aggregate(records, USE_FIELD)]
        second = [r.model_dump(mode="json") for r in aggregate(list(reversed(records)), USE_FIELD)]
        assert first == second


# ---------- zero-area groups ----------

class TestZeroAreaGroups:
    def test_zero_area_group_dropped_even_with_count(self):
        rows = aggregate([_rec("PUBLIC UTILITY", "N/A", "5"), _rec("COMMERCIAL", "10", "1")], USE_FIELD)
        assert [r.category for r in rows] == ["COMMERCIAL"]

    def test_all_unparseable_yields_no_rows_and_no_error(self):
        rows = aggregate([_rec("A", "abc", "1"), _rec("B", "", "2"), _rec("C", None)], USE_FIELD)
        assert rows == []
        assert all(r.percent == 0 for r in rows)


# ---------- percentages ----------

class TestPercent:
    def test_share_of_grand_total(self):
        rows = aggregate([_rec("A", "300"), _rec("B", "100")], USE_FIELD)
        assert [r.percent for r in rows] == [Decimal("75.00"), Decimal("25.00")]

    def test_rounds_half_up_to_two_places(self):
        rows = aggregate([_rec("A", "1"), _rec("B", "2")], USE_FIELD)
        assert [r.percent for r in rows] == [Decimal("33.33"), Decimal("66.67")]

    def test_percentages_sum_to_100_within_rounding(self):
        rows = aggregate([_rec(c, "1") for c in "ABCDEFG"], USE_FIELD)
        total = sum(r.percent for r in rows)
        assert abs(total - 100) <= Decimal("0.01") * len(rows)

    def test_zero_grand_total_gives_zero_percent(self):
        assert percent_of(Decimal("0"), Decimal("0")) == 0
        assert percent_of(Decimal("5"), Decimal("0")) == 0


# ---------- filters ----------

class TestFilter:
    def test_node_filter(self):
        records = [_rec("A", "10", node="N1"), _rec("A", "20", node="N2")]
        rows = aggregate(records, USE_FIELD, SummaryFilter(node="N2"))
        assert rows[0].area == Decimal("20")
        assert rows[0].percent == Decimal("100.00")

    def test_node_and_sector_combine(self):
        records = [
            _rec("A", "10", node="N1", sector="1"),
            _rec("A", "20", node="N1", sector="2"),
            _rec("A", "40", node="N2", sector="1"),
        ]
        rows = aggregate(records, USE_FIELD, SummaryFilter(node="N1", sector="1"))
        assert rows[0].area == Decimal("10")

    def test_empty_filter_values_are_no_constraint(self):
        records = [_rec("A", "10", node="N1"), _rec("A", "20", node="N2")]
        rows = aggregate(records, USE_FIELD, SummaryFilter(node="", sector=None))
        assert rows[0].area == Decimal("30")


# ---------- totals ----------

class TestTotals:
    def test_separator_excluded(self):
        rows = [
            AggregateRow(category="COMMERCIAL", area=Decimal("10"), additional_count=Decimal("1")),
            SEPARATOR_ROW,
            AggregateRow(category="INDUSTRIAL", area=Decimal("5.5"), additional_count=Decimal("2")),
        ]
        result = totals(rows)
        assert result.area == Decimal("15.5")
        assert result.additional_count == Decimal("3")

    def test_area_total_matches_grand_total_used_for_percent(self):
        records = [_rec("A", "12.25"), _rec("B", "7.75"), _rec("C", "abc")]
        rows = aggregate(records, USE_FIELD)
        grand = totals(rows).area
        assert grand == Decimal("20.00")
        assert rows[0].percent == percent_of(rows[0].area, grand)
