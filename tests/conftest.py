"""Shared fixtures: a pinned calendar date and an in-memory result log."""

from __future__ import annotations

from datetime import date

import pytest

from tests.fakes import MemoryResultLog


@pytest.fixture
def today() -> date:
    return date(2024, 7, 24)


@pytest.fixture
def result_log() -> MemoryResultLog:
    return MemoryResultLog()
