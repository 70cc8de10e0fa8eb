"""Summary endpoints: area and additional count by plot use or department remark."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from plotledger.api.deps import get_plot_service
from plotledger.models.summary import AggregateRow, Dimension, SummaryFilter, SummaryReport
from plotledger.services.plot_service import PlotService

router = APIRouter(prefix="/summary", tags=["summary"])


def summary_filter(node: Optional[str] = Query(None), sector: Optional[str] = Query(None)) -> SummaryFilter:
    return SummaryFilter(node=node, sector=sector)


@router.get("", response_model=list[AggregateRow])
def use_summary(flt: SummaryFilter = Depends(summary_filter),
                service: PlotService = Depends(get_plot_service)) -> list[AggregateRow]:
    """Plot-use summary; fixed uses first, then an OTHERS separator and the rest."""
    return service.get_summary(Dimension.USE, flt)


@router.get("/department", response_model=list[AggregateRow])
def department_summary(flt: SummaryFilter = Depends(summary_filter),
                       service: PlotService = Depends(get_plot_service)) -> list[AggregateRow]:
    return service.get_summary(Dimension.DEPARTMENT, flt)


@router.get("/report", response_model=SummaryReport)
def summary_report(dimension: Dimension = Query(Dimension.USE),
                   flt: SummaryFilter = Depends(summary_filter),
                   service: PlotService = Depends(get_plot_service)) -> SummaryReport:
    return service.get_summary_report(dimension, flt)
