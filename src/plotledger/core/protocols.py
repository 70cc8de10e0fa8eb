"""Protocol interfaces for all PlotLedger abstractions.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable

from plotledger.models.plot_record import PlotRecord, RecordAssets
from plotledger.models.user import StoredUser


# ---------------------------------------------------------------------------
# Persistence: Record Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordStore(Protocol):
    """System of record for plot rows, keyed by ID.

    ``criteria`` are exact-match equality predicates on column names;
    ``fields`` limits the returned columns (``None`` returns every column).
    """

    def list_records(
        self,
        criteria: Mapping[str, str] | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[PlotRecord]: ...

    def get_record(self, record_id: str) -> PlotRecord | None: ...

    def update_record(self, record_id: str, fields: Mapping[str, str | None]) -> bool: ...


# ---------------------------------------------------------------------------
# Asset Resolver
# ---------------------------------------------------------------------------

@runtime_checkable
class IAssetResolver(Protocol):
    """Looks up images, the allotment PDF and the map PDF for a record."""

    def resolve(self, record_id: str) -> RecordAssets: ...


# ---------------------------------------------------------------------------
# Persistence: User Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IUserStore(Protocol):
    """Application users and their password hashes.

    ``add`` raises ``UserExistsError`` when the username or a non-empty
    email is already taken; the check and the insert are atomic.
    """

    def get_by_id(self, user_id: str) -> StoredUser | None: ...

    def get_by_username(self, username: str) -> StoredUser | None: ...

    def get_by_email(self, email: str) -> StoredUser | None: ...

    def add(self, user: StoredUser) -> StoredUser: ...

    def set_password_hash(self, user_id: str, password_hash: str) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...
