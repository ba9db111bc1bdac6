"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from saidverify.core.config import AppSettings
from saidverify.persistence.protocols import IPreferencesStore, IResultLog
from saidverify.persistence.preferences_store import JsonFilePreferencesStore, NullPreferencesStore
from saidverify.persistence.result_log import FileResultLog, NullResultLog


def create_persistence(settings: AppSettings | None = None) -> tuple[IPreferencesStore, IResultLog]:
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (preferences_store, result_log).
    """
    if settings is None:
        settings = AppSettings()

    preferences: IPreferencesStore
    if settings.preferences.backend == "file":
        preferences = JsonFilePreferencesStore(
            settings.preferences.path, default_format=settings.result_format,
        )
    else:
        preferences = NullPreferencesStore(default_format=settings.result_format)

    result_log: IResultLog
    if settings.result_log.enabled:
        result_log = FileResultLog(settings.result_log.path)
    else:
        result_log = NullResultLog()

    return preferences, result_log
