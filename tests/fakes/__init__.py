"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from saidverify.persistence.memory_backend import MemoryPreferencesStore, MemoryResultLog

__all__ = ["MemoryPreferencesStore", "MemoryResultLog"]
