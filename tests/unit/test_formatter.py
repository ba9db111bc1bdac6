"""Tests for summary/detailed rendering."""

from __future__ import annotations

import pytest

from saidverify.models.verification import ResultFormat
from saidverify.reporting.formatter import DETAILED_FOOTER, DETAILED_HEADER, render_result
from saidverify.verifier.orchestrator import verify_id
from tests.fakes.ids import FEMALE_CITIZEN_ID

EXPECTED_FIELDS = [
    "Born: 01/01/2020",
    "Age: 4",
    "Gender: Female",
    "Citizenship Status: SA Citizen",
]


def test_summary_is_four_field_lines(today):
    result = verify_id(FEMALE_CITIZEN_ID, today=today)
    assert render_result(result, ResultFormat.SUMMARY) == EXPECTED_FIELDS


def test_detailed_wraps_same_fields(today):
    result = verify_id(FEMALE_CITIZEN_ID, today=today)
    lines = render_result(result, ResultFormat.DETAILED)
    assert lines == [DETAILED_HEADER, *EXPECTED_FIELDS, DETAILED_FOOTER, ""]


def test_invalid_result_cannot_be_rendered(today):
    result = verify_id("123", today=today)
    with pytest.raises(ValueError):
        render_result(result, ResultFormat.SUMMARY)
