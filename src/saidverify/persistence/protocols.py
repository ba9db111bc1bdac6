"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from saidverify.core.protocols import IPreferencesStore, IResultLog

__all__ = ["IPreferencesStore", "IResultLog"]
