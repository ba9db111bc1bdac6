"""Verification models: decoded ID fields, results and user preferences."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class FailureReason(StrEnum):
    INVALID_LENGTH = "InvalidLength"
    INVALID_CHARACTERS = "InvalidCharacters"
    CHECKSUM_MISMATCH = "ChecksumMismatch"
    INVALID_DATE = "InvalidDate"


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


class CitizenshipStatus(StrEnum):
    SA_CITIZEN = "SA Citizen"
    PERMANENT_RESIDENT = "Permanent Resident"
    UNKNOWN = "Unknown"


class ResultFormat(StrEnum):
    SUMMARY = "summary"
    DETAILED = "detailed"


class LeapYearBasis(StrEnum):
    """Which calendar year decides the length of February."""

    BIRTH_YEAR = "birth_year"
    CURRENT_YEAR = "current_year"


class DateOfBirthFields(BaseModel):
    """Date of birth decoded from the first six digits (YYMMDD)."""

    two_digit_year: int = Field(ge=0, le=99)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    resolved_full_year: int

    model_config = {"frozen": True}

    @property
    def date_of_birth(self) -> date | None:
        """Calendar date, or None for 29 February in a non-leap resolved year.

        That combination only passes validation when February is sized by
        the year the check runs in.
        """
        try:
            return date(self.resolved_full_year, self.month, self.day)
        except ValueError:
            return None


class VerificationResult(BaseModel):
    """Outcome of one validation attempt."""

    id_number: str
    is_valid: bool
    failure_reason: Optional[FailureReason] = None
    message: Optional[str] = None

    # --- Decoded fields (valid numbers only) ---
    date_of_birth: Optional[DateOfBirthFields] = None
    age: Optional[int] = None
    gender: Optional[Gender] = None
    citizenship_status: Optional[CitizenshipStatus] = None


class UserPreferences(BaseModel):
    """Session-scoped user preferences."""

    result_format: ResultFormat = ResultFormat.DETAILED
