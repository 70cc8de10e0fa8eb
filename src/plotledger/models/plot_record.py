"""Plot Record: one row of allotment data as held by the record store.

Attribute names are the storage column names so that a record read from
DynamoDB, the demo fixture or an edit form maps onto the same schema.
Columns that are not part of the known schema are passed through as extras.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

# --- Columns the reporting engine reads ---
ID_FIELD = "ID"
NODE_FIELD = "NAME_OF_NODE"
SECTOR_FIELD = "SECTOR_NO_"
BLOCK_FIELD = "BLOCK_ROAD_NAME"
PLOT_FIELD = "PLOT_NO_"
USE_FIELD = "PLOT_USE_FOR_INVOICE"
DEPARTMENT_FIELD = "Department_Remark"
AREA_FIELD = "PLOT_AREA_FOR_INVOICE"
COUNT_FIELD = "Additional_Plot_Count"

# Owned by the asset resolver, never written to the record store.
COMPUTED_FIELDS = frozenset({"images", "has_pdf", "has_map"})

SEARCH_FIELDS = (ID_FIELD, NODE_FIELD, SECTOR_FIELD, BLOCK_FIELD, PLOT_FIELD, "PLOT_NO_AFTER_SURVEY")


def _to_text(value: Any) -> Any:
    """Render numeric storage values (DynamoDB Decimal, JSON numbers) as strings."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (int, float)):
        return str(value)
    return value


class PlotRecord(BaseModel):
    """Single plot row. Every column is an optional string."""

    # --- Location ---
    ID: Optional[str] = None
    NAME_OF_NODE: Optional[str] = None
    SECTOR_NO_: Optional[str] = None
    BLOCK_ROAD_NAME: Optional[str] = None
    PLOT_NO_AFTER_SURVEY: Optional[str] = None
    PLOT_NO_: Optional[str] = None
    SUB_PLOT_NO_: Optional[str] = None
    UID: Optional[str] = None

    # --- Allotment ---
    DATE_OF_ALLOTMENT: Optional[str] = None
    NAME_OF_ORIGINAL_ALLOTTEE: Optional[str] = None

    # --- Areas & Pricing ---
    PLOT_AREA_SQM_: Optional[str] = None
    BUILTUP_AREA_SQM_: Optional[str] = None
    USE_OF_PLOT_ACCORDING_TO_FILE: Optional[str] = None
    TOTAL_PRICE_RS_: Optional[str] = None
    RATE_SQM_: Optional[str] = None
    LEASE_TERM_YEARS_: Optional[str] = None
    FSI: Optional[str] = None

    # --- Certificates ---
    COMENCEMENT_CERTIFICATE: Optional[str] = None
    OCCUPANCY_CERTIFICATE: Optional[str] = None

    # --- Ownership Transfers (storage columns carry a leading underscore) ---
    NAME_OF_2ND_OWNER: Optional[str] = None
    OWNER_2ND_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_2ND_OWNER_TRANSFER_DATE")
    NAME_OF_3RD_OWNER: Optional[str] = None
    OWNER_3RD_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_3RD_OWNER_TRANSFER_DATE")
    NAME_OF_4TH_OWNER: Optional[str] = None
    OWNER_4TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_4TH_OWNER_TRANSFER_DATE")
    NAME_OF_5TH_OWNER: Optional[str] = None
    OWNER_5TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_5TH_OWNER_TRANSFER_DATE")
    NAME_OF_6TH_OWNER: Optional[str] = None
    OWNER_6TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_6TH_OWNER_TRANSFER_DATE")
    NAME_OF_7TH_OWNER: Optional[str] = None
    OWNER_7TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_7TH_OWNER_TRANSFER_DATE")
    NAME_OF_8TH_OWNER: Optional[str] = None
    OWNER_8TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_8TH_OWNER_TRANSFER_DATE")
    NAME_OF_9TH_OWNER: Optional[str] = None
    OWNER_9TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_9TH_OWNER_TRANSFER_DATE")
    NAME_OF_10TH_OWNER: Optional[str] = None
    OWNER_10TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_10TH_OWNER_TRANSFER_DATE")
    NAME_OF_11TH_OWNER: Optional[str] = None
    OWNER_11TH_TRANSFER_DATE: Optional[str] = Field(default=None, alias="_11TH_OWNER_TRANSFER_DATE")

    # --- Investigation & File Location ---
    INVESTIGATOR_REMARKS: Optional[str] = None
    INVESTIGATOR_NAME: Optional[str] = None
    FILE_LOCATION: Optional[str] = None
    FILE_NAME: Optional[str] = None

    # --- Survey ---
    TOTAL_AREA_SQM: Optional[str] = None
    USE_OF_PLOT: Optional[str] = None
    SUB_USE_OF_PLOT: Optional[str] = None
    PLOT_STATUS: Optional[str] = None
    SURVEY_REMARKS: Optional[str] = None
    PHOTO_FOLDER: Optional[str] = None
    PLANNING_USE: Optional[str] = None

    # --- Invoice & Counts ---
    PLOT_AREA_FOR_INVOICE: Optional[str] = None
    PLOT_USE_FOR_INVOICE: Optional[str] = None
    Tentative_Plot_Count: Optional[str] = None
    Minimum_Plot_Count: Optional[str] = None
    Additional_Plot_Count: Optional[str] = None
    Percentage_Match: Optional[str] = None

    # --- Other ---
    Department_Remark: Optional[str] = None
    MAP_AREA: Optional[str] = None
    SUBMISSION: Optional[str] = None
    IMAGES_PRESENT: Optional[str] = None
    PDFS_PRESENT: Optional[str] = None

    model_config = {"extra": "allow", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _stringify_numbers(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: _to_text(v) for k, v in data.items()}
        return data

    @property
    def record_id(self) -> str:
        return self.ID or ""

    def value(self, column: str) -> str | None:
        """Return a column by its storage name, known or pass-through."""
        attr = _COLUMN_ATTRS.get(column)
        if attr is not None:
            return getattr(self, attr)
        extra = self.model_extra or {}
        raw = extra.get(column)
        return None if raw is None else str(raw)

    def to_dict(self, *, exclude_none: bool = False) -> dict[str, Any]:
        """Serialize with storage column names."""
        return self.model_dump(by_alias=True, exclude_none=exclude_none)


_COLUMN_ATTRS: dict[str, str] = {
    (info.alias or name): name for name, info in PlotRecord.model_fields.items()
}


class RecordAssets(BaseModel):
    """Images and document flags resolved for a record. Never persisted."""

    images: list[str] = Field(default_factory=list)
    has_pdf: bool = False
    has_map: bool = False


class PlotDetail(PlotRecord):
    """A record merged with its resolved assets, as served by the detail view."""

    images: list[str] = Field(default_factory=list)
    has_pdf: bool = False
    has_map: bool = False

    @classmethod
    def from_parts(cls, record: PlotRecord, assets: RecordAssets) -> PlotDetail:
        return cls.model_validate({**record.to_dict(), **assets.model_dump()})


class SearchHit(BaseModel):
    """Projection returned by plot search."""

    ID: Optional[str] = None
    NAME_OF_NODE: Optional[str] = None
    SECTOR_NO_: Optional[str] = None
    BLOCK_ROAD_NAME: Optional[str] = None
    PLOT_NO_: Optional[str] = None
    PLOT_NO_AFTER_SURVEY: Optional[str] = None

    @classmethod
    def from_record(cls, record: PlotRecord) -> SearchHit:
        return cls(**{column: record.value(column) for column in SEARCH_FIELDS})
