"""Protocol interfaces for the pluggable collaborators of the verifier.

The core depends on these Protocols only; concrete stores live in
``saidverify.persistence``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from saidverify.models.verification import ResultFormat, UserPreferences


# ---------------------------------------------------------------------------
# Preferences Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IPreferencesStore(Protocol):
    """Session-scoped load/save hooks for user preferences."""

    def load(self) -> UserPreferences: ...

    def save(self, preferences: UserPreferences) -> None: ...


# ---------------------------------------------------------------------------
# Result Log
# ---------------------------------------------------------------------------

@runtime_checkable
class IResultLog(Protocol):
    """Append-only record of successful verifications."""

    def append(
        self,
        id_number: str,
        result_format: ResultFormat,
        verified_at: datetime | None = None,
    ) -> None: ...
