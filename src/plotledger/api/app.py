"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from plotledger.api.routes import auth, health, plots, summary
from plotledger.core.config import AppSettings
from plotledger.core.exceptions import (
    AuthError,
    InvalidCredentialsError,
    PlotLedgerError,
    RecordNotFoundError,
)
from plotledger.core.log import configure_logging
from plotledger.persistence import Backends, create_persistence
from plotledger.services.auth_service import AuthService
from plotledger.services.plot_service import PlotService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)

    backends: Backends | None = app.state.backends
    if backends is None:
        backends = create_persistence(settings)

    app.state.plot_service = PlotService(backends.records, backends.assets)
    app.state.auth_service = AuthService(
        backends.users,
        backends.tokens,
        reset_token_ttl=settings.auth.reset_token_ttl,
        frontend_url=settings.auth.frontend_url,
    )
    logger.info("PlotLedger started (environment=%s, backend=%s)", settings.environment, settings.backend)
    yield


async def _not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Not found"})


async def _auth_failed(request: Request, exc: AuthError) -> JSONResponse:
    status = 401 if isinstance(exc, InvalidCredentialsError) else 400
    return JSONResponse(status_code=status, content={"error": str(exc)})


async def _server_error(request: Request, exc: PlotLedgerError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: AppSettings | None = None, backends: Backends | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``backends`` overrides the stores built from ``settings``.
    """
    app = FastAPI(
        title="PlotLedger Plot Records Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()
    app.state.backends = backends

    app.add_exception_handler(RecordNotFoundError, _not_found)
    app.add_exception_handler(AuthError, _auth_failed)
    app.add_exception_handler(PlotLedgerError, _server_error)

    app.include_router(health.router)
    app.include_router(plots.router, prefix="/api")
    app.include_router(summary.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    return app
