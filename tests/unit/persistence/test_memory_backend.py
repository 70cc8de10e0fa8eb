"""Tests for the in-memory demo backends."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from plotledger.core.exceptions import UserExistsError
from plotledger.models.plot_record import RecordAssets
from plotledger.models.user import StoredUser
from plotledger.persistence.memory_backend import (
    MemoryAssetResolver,
    MemoryCacheBackend,
    MemoryRecordStore,
    MemoryUserStore,
)


class TestMemoryRecordStore:
    def test_demo_data_loaded(self):
        store = MemoryRecordStore.with_demo_data()
        assert len(store.list_records()) == 10

    def test_empty_columns_stored_as_absent(self):
        store = MemoryRecordStore([{"ID": "1", "REMARK": "", "NAME_OF_NODE": "VASHI"}])
        assert store.get_record("1").to_dict(exclude_none=True) == {"ID": "1", "NAME_OF_NODE": "VASHI"}

    def test_criteria_and_projection(self):
        store = MemoryRecordStore.with_demo_data()
        rows = store.list_records({"NAME_OF_NODE": "NERUL", "SECTOR_NO_": "19"}, fields=["ID"])
        assert sorted(r.to_dict(exclude_none=True)["ID"] for r in rows) == ["8", "9"]

    def test_update_sets_and_clears(self):
        store = MemoryRecordStore([{"ID": "1", "BLOCK_ROAD_NAME": "A"}])
        assert store.update_record("1", {"BLOCK_ROAD_NAME": None, "PLOT_NO_": "5"})
        record = store.get_record("1")
        assert record.value("BLOCK_ROAD_NAME") is None
        assert record.value("PLOT_NO_") == "5"

    def test_update_unknown_returns_false(self):
        store = MemoryRecordStore()
        assert store.update_record("1", {"PLOT_NO_": "5"}) is False
        assert store.get_record("1") is None

    def test_returned_records_are_copies(self):
        store = MemoryRecordStore([{"ID": "1", "PLOT_NO_": "5"}])
        store.get_record("1").PLOT_NO_ = "changed"
        assert store.get_record("1").value("PLOT_NO_") == "5"


class TestMemoryAssetResolver:
    def test_default_is_empty(self):
        assert MemoryAssetResolver().resolve("1") == RecordAssets()

    def test_set_assets(self):
        resolver = MemoryAssetResolver()
        resolver.set_assets("1", RecordAssets(images=["a.jpg"], has_pdf=True))
        assert resolver.resolve("1").has_pdf is True


class TestMemoryUserStore:
    def test_demo_admin(self):
        users = MemoryUserStore.with_demo_data()
        assert users.get_by_username("admin").role == "admin"

    def test_set_password_hash(self):
        users = MemoryUserStore([StoredUser(id="u1", username="a", password_hash="x").model_dump()])
        assert users.set_password_hash("u1", "y")
        assert users.get_by_id("u1").password_hash == "y"
        assert users.set_password_hash("nobody", "y") is False


    def test_add_duplicate_username_rejected(self):
        users = MemoryUserStore.with_demo_data()
        with pytest.raises(UserExistsError):
            users.add(StoredUser(id="u2", username="admin"))

    def test_add_duplicate_email_rejected(self):
        users = MemoryUserStore.with_demo_data()
        with pytest.raises(UserExistsError):
            users.add(StoredUser(id="u2", username="other", email="admin@plotledger.local"))

    def test_concurrent_adds_keep_one_username(self):
        users = MemoryUserStore()
        outcomes: list[bool] = []

        def add(i: int) -> None:
            try:
                users.add(StoredUser(id=f"u{i}", username="clerk"))
                outcomes.append(True)
            except UserExistsError:
                outcomes.append(False)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(add, range(32)))
        assert outcomes.count(True) == 1

    def test_lookups_during_adds(self):
        users = MemoryUserStore()

        def add(i: int) -> None:
            users.add(StoredUser(id=f"u{i}", username=f"user{i}", email=f"u{i}@example.com"))

        def lookup(i: int) -> None:
            users.get_by_username(f"user{i}")
            users.get_by_email("missing@example.com")

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(add, i) for i in range(200)] + [pool.submit(lookup, i) for i in range(200)]
            for future in futures:
                future.result()
        assert users.get_by_username("user199").id == "u199"


class TestMemoryCacheBackend:
    def test_expires_after_ttl(self):
        now = [100.0]
        cache = MemoryCacheBackend(clock=lambda: now[0])
        cache.setex("k", 10, "v")
        assert cache.get("k") == "v"
        now[0] = 110.0
        assert cache.get("k") is None

    def test_delete(self):
        cache = MemoryCacheBackend()
        cache.setex("k", 10, "v")
        cache.delete("k")
        assert cache.get("k") is None

    def test_concurrent_writes_and_expiry(self):
        cache = MemoryCacheBackend()

        def touch(i: int) -> None:
            cache.setex(f"k{i}", 0 if i % 2 else 60, "v")
            cache.get(f"k{i}")
            cache.delete(f"k{i - 1}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(touch, range(200)))
        assert cache.get("k199") is None
