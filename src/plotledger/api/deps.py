"""Request-scoped accessors for services built in the app lifespan."""

from __future__ import annotations

from fastapi import Request

from plotledger.core.config import AppSettings
from plotledger.services.auth_service import AuthService
from plotledger.services.plot_service import PlotService


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_plot_service(request: Request) -> PlotService:
    return request.app.state.plot_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service
