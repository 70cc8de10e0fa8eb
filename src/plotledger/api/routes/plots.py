"""Dropdown, search, detail and edit endpoints for plot records."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from plotledger.api.deps import get_plot_service
from plotledger.models.plot_record import ID_FIELD, SearchHit
from plotledger.services.plot_service import PlotService

router = APIRouter(tags=["plots"])


class SearchRequest(BaseModel):
    node: str
    sector: str
    block: Optional[str] = None
    plot: Optional[str] = None


@router.get("/nodes")
def list_nodes(service: PlotService = Depends(get_plot_service)) -> list[str]:
    return service.list_nodes()


@router.get("/sectors")
def list_sectors(node: str = Query(...), service: PlotService = Depends(get_plot_service)) -> list[str]:
    return service.list_sectors(node)


@router.get("/blocks")
def list_blocks(node: str = Query(...), sector: str = Query(...),
                service: PlotService = Depends(get_plot_service)) -> list[str]:
    return service.list_blocks(node, sector)


@router.get("/plots")
def list_plots(node: str = Query(...), sector: str = Query(...),
               service: PlotService = Depends(get_plot_service)) -> list[str]:
    return service.list_plots(node, sector)


@router.post("/search")
def search(req: SearchRequest, service: PlotService = Depends(get_plot_service)) -> list[SearchHit]:
    return service.search(req.node, req.sector, req.block, req.plot)


@router.get("/record/{record_id}")
def get_record(record_id: str, service: PlotService = Depends(get_plot_service)) -> dict[str, Any]:
    """Full record merged with its images and document flags."""
    return service.get_record(record_id).model_dump(mode="json", by_alias=True)


@router.post("/record/update")
def update_record(payload: dict[str, Any] = Body(...),
                  service: PlotService = Depends(get_plot_service)) -> JSONResponse:
    updates = dict(payload)
    record_id = updates.pop(ID_FIELD, None)
    if not record_id:
        return JSONResponse(status_code=400, content={"error": "ID required"})

    result = service.update_record(str(record_id), updates)
    if not result.updated:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(content={"message": result.message})
