"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

from saidverify.models.verification import LeapYearBasis, ResultFormat


class ResultLogConfig(BaseSettings):
    """Append-only verification result log."""

    model_config = {"env_prefix": "SAIDVERIFY_LOG_"}

    path: str = "verification_results.txt"
    enabled: bool = True


class PreferencesConfig(BaseSettings):
    """User preferences persistence."""

    model_config = {"env_prefix": "SAIDVERIFY_PREFS_"}

    backend: Literal["none", "file"] = "none"
    path: str = "saidverify_preferences.json"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SAIDVERIFY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    result_format: ResultFormat = ResultFormat.DETAILED
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR

    result_log: ResultLogConfig = ResultLogConfig()
    preferences: PreferencesConfig = PreferencesConfig()
