"""PlotLedger exception hierarchy."""

from __future__ import annotations


class PlotLedgerError(Exception):
    """Base exception for all PlotLedger errors."""


class RecordStoreError(PlotLedgerError):
    """The record store could not be reached or rejected the operation."""


class RecordNotFoundError(PlotLedgerError):
    """No plot record exists for the requested ID."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Plot record {record_id!r} not found")


class AssetStoreError(PlotLedgerError):
    """Image/document lookup for a record failed."""


class CacheError(PlotLedgerError):
    """Redis cache operation failed."""


class AuthError(PlotLedgerError):
    """Base class for authentication failures."""


class InvalidCredentialsError(AuthError):
    """Username/password pair did not match."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class UserExistsError(AuthError):
    """Username or email already registered."""

    def __init__(self) -> None:
        super().__init__("Username or Email already exists")


class InvalidResetTokenError(AuthError):
    """Password-reset token is unknown or has expired."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")
