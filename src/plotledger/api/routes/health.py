"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from plotledger.api.deps import get_settings
from plotledger.core.config import AppSettings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(settings: AppSettings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ready", "backend": settings.backend, "assets": settings.asset_backend}
