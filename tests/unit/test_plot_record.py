"""Tests for the PlotRecord schema and its column accessor."""

from __future__ import annotations

from decimal import Decimal

from plotledger.models.plot_record import (
    PlotDetail,
    PlotRecord,
    RecordAssets,
    SearchHit,
)


def test_value_reads_known_column():
    record = PlotRecord(NAME_OF_NODE="VASHI", PLOT_AREA_FOR_INVOICE="450")
    assert record.value("NAME_OF_NODE") == "VASHI"
    assert record.value("PLOT_AREA_FOR_INVOICE") == "450"
    assert record.value("FSI") is None


def test_underscore_columns_round_trip_by_storage_name():
    record = PlotRecord.model_validate({"ID": "2", "_2ND_OWNER_TRANSFER_DATE": "04/11/2001"})
    assert record.value("_2ND_OWNER_TRANSFER_DATE") == "04/11/2001"
    assert record.to_dict()["_2ND_OWNER_TRANSFER_DATE"] == "04/11/2001"


def test_unknown_columns_pass_through():
    record = PlotRecord.model_validate({"ID": "1", "LEGACY_NOTE": "moved to box 4"})
    assert record.value("LEGACY_NOTE") == "moved to box 4"
    assert record.to_dict()["LEGACY_NOTE"] == "moved to box 4"


def test_numeric_storage_values_become_strings():
    record = PlotRecord.model_validate({"ID": Decimal("7"), "PLOT_AREA_FOR_INVOICE": Decimal("120.50")})
    assert record.ID == "7"
    assert record.value("PLOT_AREA_FOR_INVOICE") == "120.50"


def test_detail_merges_assets():
    record = PlotRecord(ID="3", NAME_OF_NODE="NERUL")
    assets = RecordAssets(images=["http://x/uploads/images/3/a.jpg"], has_pdf=True)
    detail = PlotDetail.from_parts(record, assets).model_dump(by_alias=True)
    assert detail["NAME_OF_NODE"] == "NERUL"
    assert detail["images"] == ["http://x/uploads/images/3/a.jpg"]
    assert detail["has_pdf"] is True
    assert detail["has_map"] is False


def test_search_hit_projection():
    record = PlotRecord(ID="1", NAME_OF_NODE="VASHI", SECTOR_NO_="17", PLOT_NO_="12", FSI="1.5")
    hit = SearchHit.from_record(record)
    assert hit.model_dump() == {
        "ID": "1",
        "NAME_OF_NODE": "VASHI",
        "SECTOR_NO_": "17",
        "BLOCK_ROAD_NAME": None,
        "PLOT_NO_": "12",
        "PLOT_NO_AFTER_SURVEY": None,
    }
