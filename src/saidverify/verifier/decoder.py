"""Field decoder: age, gender and citizenship from a validated ID number."""

from __future__ import annotations

from datetime import date

from saidverify.models.verification import (
    CitizenshipStatus,
    Gender,
    LeapYearBasis,
    VerificationResult,
)
from saidverify.verifier.dates import resolve_date_of_birth

GENDER_THRESHOLD = 5000

_CITIZENSHIP_CODES: dict[str, CitizenshipStatus] = {
    "0": CitizenshipStatus.SA_CITIZEN,
    "1": CitizenshipStatus.PERMANENT_RESIDENT,
}


def gender_from_code(code: int) -> Gender:
    return Gender.MALE if code >= GENDER_THRESHOLD else Gender.FEMALE


def citizenship_from_digit(digit: str) -> CitizenshipStatus:
    return _CITIZENSHIP_CODES.get(digit, CitizenshipStatus.UNKNOWN)


def decode(
    id_number: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> VerificationResult:
    """Decode a validated 13-digit ID number.

    Age is the plain difference between the current year and the birth year;
    month and day are not considered.
    """
    today = today or date.today()
    dob = resolve_date_of_birth(id_number[0:6], today=today, leap_year_basis=leap_year_basis)
    return VerificationResult(
        id_number=id_number,
        is_valid=True,
        date_of_birth=dob,
        age=today.year - dob.resolved_full_year,
        gender=gender_from_code(int(id_number[6:10])),
        citizenship_status=citizenship_from_digit(id_number[10]),
    )
