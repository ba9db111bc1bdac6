"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from saidverify.core.config import AppSettings, PreferencesConfig, ResultLogConfig
from saidverify.models.verification import LeapYearBasis, ResultFormat
from saidverify.persistence import create_persistence
from saidverify.persistence.preferences_store import JsonFilePreferencesStore, NullPreferencesStore
from saidverify.persistence.result_log import FileResultLog, NullResultLog


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.result_format is ResultFormat.DETAILED
    assert settings.leap_year_basis is LeapYearBasis.BIRTH_YEAR


def test_result_log_config_defaults():
    config = ResultLogConfig()
    assert config.path == "verification_results.txt"
    assert config.enabled is True


def test_env_override(monkeypatch):
    monkeypatch.setenv("SAIDVERIFY_RESULT_FORMAT", "summary")
    monkeypatch.setenv("SAIDVERIFY_LEAP_YEAR_BASIS", "current_year")
    settings = AppSettings()
    assert settings.result_format is ResultFormat.SUMMARY
    assert settings.leap_year_basis is LeapYearBasis.CURRENT_YEAR


def test_create_persistence_defaults():
    preferences, result_log = create_persistence(AppSettings())
    assert isinstance(preferences, NullPreferencesStore)
    assert isinstance(result_log, FileResultLog)


def test_create_persistence_file_backends(tmp_path):
    settings = AppSettings(
        result_log=ResultLogConfig(enabled=False),
        preferences=PreferencesConfig(backend="file", path=str(tmp_path / "prefs.json")),
    )
    preferences, result_log = create_persistence(settings)
    assert isinstance(preferences, JsonFilePreferencesStore)
    assert isinstance(result_log, NullResultLog)
