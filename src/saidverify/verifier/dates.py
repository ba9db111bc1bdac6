"""Date-of-birth extraction from the YYMMDD prefix of an ID number."""

from __future__ import annotations

import calendar
from datetime import date

from saidverify.core.exceptions import InvalidDateError
from saidverify.models.verification import DateOfBirthFields, LeapYearBasis


def resolve_century(two_digit_year: int, *, today: date | None = None) -> int:
    """Expand a two-digit year; years after the current one belong to the 1900s."""
    today = today or date.today()
    if two_digit_year > today.year % 100:
        return 1900 + two_digit_year
    return 2000 + two_digit_year


def _split(six_digits: str) -> tuple[int, int, int]:
    if len(six_digits) != 6 or not six_digits.isdigit():
        raise ValueError(f"expected six digits, got {six_digits!r}")
    return int(six_digits[0:2]), int(six_digits[2:4]), int(six_digits[4:6])


def max_day(
    month: int,
    two_digit_year: int,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> int:
    """Number of days in ``month``, with February sized by the chosen basis year."""
    today = today or date.today()
    if leap_year_basis == LeapYearBasis.CURRENT_YEAR:
        year = today.year
    else:
        year = resolve_century(two_digit_year, today=today)
    return calendar.monthrange(year, month)[1]


def is_valid_date(
    six_digits: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> bool:
    try:
        year, month, day = _split(six_digits)
    except ValueError:
        return False

    if month < 1 or month > 12:
        return False

    last = max_day(month, year, today=today, leap_year_basis=leap_year_basis)
    return 0 < day <= last


def resolve_date_of_birth(
    six_digits: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> DateOfBirthFields:
    """Decode YYMMDD into DateOfBirthFields.

    Raises:
        InvalidDateError: if the digits do not form a valid date.
    """
    if not is_valid_date(six_digits, today=today, leap_year_basis=leap_year_basis):
        raise InvalidDateError()
    year, month, day = _split(six_digits)
    return DateOfBirthFields(
        two_digit_year=year,
        month=month,
        day=day,
        resolved_full_year=resolve_century(year, today=today),
    )
