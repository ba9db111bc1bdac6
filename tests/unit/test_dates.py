"""Tests for date-of-birth extraction and century resolution."""

from __future__ import annotations

from datetime import date

import pytest

from saidverify.core.exceptions import InvalidDateError
from saidverify.models.verification import LeapYearBasis
from saidverify.verifier.checksum import compute_check_digit
from saidverify.verifier.dates import is_valid_date, resolve_century, resolve_date_of_birth
from saidverify.verifier.orchestrator import verify_id

LEAP_RUN = date(2024, 3, 1)
NON_LEAP_RUN = date(2025, 3, 1)


class TestIsValidDate:
    @pytest.mark.parametrize("run_date", [LEAP_RUN, NON_LEAP_RUN])
    @pytest.mark.parametrize("basis", list(LeapYearBasis))
    def test_february_thirtieth_is_never_valid(self, run_date, basis):
        assert not is_valid_date("000230", today=run_date, leap_year_basis=basis)

    def test_month_thirteen_is_invalid(self, today):
        assert not is_valid_date("001301", today=today)

    def test_month_zero_is_invalid(self, today):
        assert not is_valid_date("000001", today=today)

    def test_first_of_january_is_valid(self, today):
        assert is_valid_date("000101", today=today)

    def test_day_zero_is_invalid(self, today):
        assert not is_valid_date("000100", today=today)

    def test_thirty_first_of_april_is_invalid(self, today):
        assert not is_valid_date("800431", today=today)
        assert is_valid_date("800430", today=today)

    def test_non_numeric_is_invalid(self, today):
        assert not is_valid_date("80a101", today=today)
        assert not is_valid_date("8001", today=today)


class TestLeapDay:
    def test_birth_year_basis_follows_encoded_year(self):
        # 2000 is a leap year, 2001 is not
        assert is_valid_date("000229", today=NON_LEAP_RUN)
        assert not is_valid_date("010229", today=LEAP_RUN)

    def test_current_year_basis_follows_run_year(self):
        basis = LeapYearBasis.CURRENT_YEAR
        assert is_valid_date("010229", today=LEAP_RUN, leap_year_basis=basis)
        assert not is_valid_date("000229", today=NON_LEAP_RUN, leap_year_basis=basis)

    def test_current_year_basis_accepts_missing_calendar_date(self):
        stem = "010229500008"
        result = verify_id(
            stem + compute_check_digit(stem),
            today=date(2028, 3, 1),
            leap_year_basis=LeapYearBasis.CURRENT_YEAR,
        )
        assert result.is_valid
        assert result.date_of_birth.resolved_full_year == 2001
        assert result.date_of_birth.day == 29
        assert result.date_of_birth.date_of_birth is None


class TestResolveCentury:
    def test_equal_to_current_year_resolves_to_2000s(self, today):
        assert resolve_century(24, today=today) == 2024

    def test_after_current_year_resolves_to_1900s(self, today):
        assert resolve_century(25, today=today) == 1925
        assert resolve_century(99, today=today) == 1999

    def test_before_current_year_resolves_to_2000s(self, today):
        assert resolve_century(0, today=today) == 2000
        assert resolve_century(23, today=today) == 2023


class TestResolveDateOfBirth:
    def test_fields(self, today):
        dob = resolve_date_of_birth("800415", today=today)
        assert dob.two_digit_year == 80
        assert dob.month == 4
        assert dob.day == 15
        assert dob.resolved_full_year == 1980
        assert dob.date_of_birth == date(1980, 4, 15)

    def test_invalid_digits_raise(self, today):
        with pytest.raises(InvalidDateError):
            resolve_date_of_birth("001301", today=today)
