"""In-memory backends: the demo fixture store, also used as test doubles."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterable, Mapping, Sequence

from plotledger.core.exceptions import UserExistsError
from plotledger.models.plot_record import PlotRecord, RecordAssets
from plotledger.models.user import StoredUser
from plotledger.persistence.fixtures import DEMO_RECORDS, DEMO_USERS


class MemoryRecordStore:
    """Dict-backed IRecordStore, used as the fixture backend in demo mode."""

    def __init__(self, records: Iterable[Mapping[str, Any] | PlotRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._rows: dict[str, dict[str, Any]] = {}
        for record in records:
            row = PlotRecord.model_validate(record.to_dict() if isinstance(record, PlotRecord) else dict(record))
            # Empty columns are stored as absent, the same as a cleared column.
            self._rows[row.record_id] = {k: v for k, v in row.to_dict().items() if v not in (None, "")}

    @classmethod
    def with_demo_data(cls) -> MemoryRecordStore:
        return cls(DEMO_RECORDS)

    def list_records(
        self,
        criteria: Mapping[str, str] | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[PlotRecord]:
        criteria = criteria or {}
        with self._lock:
            rows = [dict(row) for row in self._rows.values()]
        out: list[PlotRecord] = []
        for row in rows:
            if any(row.get(column) != wanted for column, wanted in criteria.items()):
                continue
            if fields is not None:
                row = {f: row[f] for f in fields if f in row}
            out.append(PlotRecord.model_validate(row))
        return out

    def get_record(self, record_id: str) -> PlotRecord | None:
        with self._lock:
            row = self._rows.get(str(record_id))
            return None if row is None else PlotRecord.model_validate(dict(row))

    def update_record(self, record_id: str, fields: Mapping[str, str | None]) -> bool:
        with self._lock:
            row = self._rows.get(str(record_id))
            if row is None:
                return False
            for column, value in fields.items():
                if value is None:
                    row.pop(column, None)
                else:
                    row[column] = value
            return True


class MemoryAssetResolver:
    """Dict-backed IAssetResolver; records without an entry have no assets."""

    def __init__(self, assets: Mapping[str, RecordAssets] | None = None) -> None:
        self._assets: dict[str, RecordAssets] = dict(assets or {})

    def set_assets(self, record_id: str, assets: RecordAssets) -> None:
        self._assets[str(record_id)] = assets

    def resolve(self, record_id: str) -> RecordAssets:
        return self._assets.get(str(record_id), RecordAssets()).model_copy(deep=True)


class MemoryUserStore:
    """Dict-backed IUserStore seeded with the demo administrator."""

    def __init__(self, users: Iterable[Mapping[str, Any]] = ()) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, StoredUser] = {}
        for raw in users:
            user = StoredUser.model_validate(raw)
            self._users[user.id] = user

    @classmethod
    def with_demo_data(cls) -> MemoryUserStore:
        return cls(DEMO_USERS)

    def _match(self, attribute: str, value: str) -> StoredUser | None:
        with self._lock:
            return next((u for u in self._users.values() if getattr(u, attribute) == value), None)

    def get_by_id(self, user_id: str) -> StoredUser | None:
        with self._lock:
            return self._users.get(str(user_id))

    def get_by_username(self, username: str) -> StoredUser | None:
        return self._match("username", username)

    def get_by_email(self, email: str) -> StoredUser | None:
        return self._match("email", email) if email else None

    def add(self, user: StoredUser) -> StoredUser:
        with self._lock:
            for existing in self._users.values():
                if (existing.id == user.id or existing.username == user.username
                        or (user.email and existing.email == user.email)):
                    raise UserExistsError()
            self._users[user.id] = user
            return user

    def set_password_hash(self, user_id: str, password_hash: str) -> bool:
        with self._lock:
            user = self._users.get(str(user_id))
            if user is None:
                return False
            self._users[user.id] = user.model_copy(update={"password_hash": password_hash})
            return True


class MemoryCacheBackend:
    """Dict-backed ICacheBackend that honours TTLs."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._store: dict[str, tuple[str, float]] = {}

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._store[key]
                return None
            return value

    def setex(self, key: str, ttl: int, value: str) -> None:
        with self._lock:
            self._store[key] = (value, self._clock() + ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)
