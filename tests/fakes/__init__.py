"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from plotledger.persistence.memory_backend import (
    MemoryAssetResolver,
    MemoryCacheBackend,
    MemoryRecordStore,
    MemoryUserStore,
)

__all__ = ["MemoryAssetResolver", "MemoryCacheBackend", "MemoryRecordStore", "MemoryUserStore"]
