"""Preferences stores implementing IPreferencesStore."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from saidverify.core.exceptions import PreferencesError
from saidverify.models.verification import ResultFormat, UserPreferences


class NullPreferencesStore:
    """Load returns fixed defaults and save does nothing."""

    def __init__(self, default_format: ResultFormat = ResultFormat.DETAILED) -> None:
        self._default_format = default_format

    def load(self) -> UserPreferences:
        return UserPreferences(result_format=self._default_format)

    def save(self, preferences: UserPreferences) -> None:
        return None


class JsonFilePreferencesStore:
    """IPreferencesStore persisted as a JSON document on local disk."""

    def __init__(self, path: str | Path, default_format: ResultFormat = ResultFormat.DETAILED) -> None:
        self._path = Path(path)
        self._default_format = default_format

    def load(self) -> UserPreferences:
        if not self._path.exists():
            return UserPreferences(result_format=self._default_format)
        try:
            return UserPreferences.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            raise PreferencesError(f"Preferences load failed for {str(self._path)!r}: {exc}") from exc

    def save(self, preferences: UserPreferences) -> None:
        try:
            self._path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise PreferencesError(f"Preferences save failed for {str(self._path)!r}: {exc}") from exc
