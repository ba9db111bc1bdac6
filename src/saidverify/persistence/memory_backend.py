"""In-memory backends for unit tests — list/attribute-backed fakes."""

from __future__ import annotations

from datetime import datetime

from saidverify.core.exceptions import LogWriteError
from saidverify.models.verification import ResultFormat, UserPreferences


class MemoryPreferencesStore:
    """IPreferencesStore that keeps the last saved value and counts calls."""

    def __init__(self, initial: UserPreferences | None = None) -> None:
        self._stored = initial or UserPreferences()
        self.load_calls = 0
        self.save_calls = 0

    @property
    def stored(self) -> UserPreferences:
        return self._stored

    def load(self) -> UserPreferences:
        self.load_calls += 1
        return self._stored.model_copy()

    def save(self, preferences: UserPreferences) -> None:
        self.save_calls += 1
        self._stored = preferences.model_copy()


class MemoryResultLog:
    """IResultLog collecting records in a list; can be told to fail."""

    def __init__(self, fail: bool = False) -> None:
        self.records: list[tuple[str, ResultFormat, datetime]] = []
        self._fail = fail

    def append(
        self,
        id_number: str,
        result_format: ResultFormat,
        verified_at: datetime | None = None,
    ) -> None:
        if self._fail:
            raise LogWriteError("<memory>", "simulated failure")
        self.records.append((id_number, result_format, verified_at or datetime.now()))
