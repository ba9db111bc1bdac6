"""Validation orchestrator: format, checksum and date checks, then decode."""

from __future__ import annotations

import logging
from datetime import date

from saidverify.core.exceptions import (
    ChecksumMismatchError,
    IdValidationError,
    InvalidCharactersError,
    InvalidDateError,
    InvalidLengthError,
)
from saidverify.models.verification import LeapYearBasis, VerificationResult
from saidverify.verifier import checksum, dates, decoder

logger = logging.getLogger(__name__)

ID_LENGTH = 13


def check_format(raw: str) -> None:
    if len(raw) != ID_LENGTH:
        raise InvalidLengthError()
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidCharactersError()


def check_checksum(raw: str) -> None:
    if not checksum.is_checksum_valid(raw):
        raise ChecksumMismatchError()


def check_date(
    raw: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> None:
    if not dates.is_valid_date(raw[0:6], today=today, leap_year_basis=leap_year_basis):
        raise InvalidDateError()


def validate_id(
    raw: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> None:
    """Run every check in order, stopping at the first failure.

    Raises:
        IdValidationError: the subclass matching the failed check.
    """
    check_format(raw)
    check_checksum(raw)
    check_date(raw, today=today, leap_year_basis=leap_year_basis)


def verify_id(
    raw: str,
    *,
    today: date | None = None,
    leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
) -> VerificationResult:
    """Validate and decode a candidate ID number.

    Never raises for bad input: failures come back as a result with
    ``is_valid=False`` and the matching ``failure_reason``.
    """
    try:
        validate_id(raw, today=today, leap_year_basis=leap_year_basis)
    except IdValidationError as exc:
        logger.debug("ID verification failed: %s", exc.reason)
        return VerificationResult(
            id_number=raw,
            is_valid=False,
            failure_reason=exc.reason,
            message=exc.message,
        )

    result = decoder.decode(raw, today=today, leap_year_basis=leap_year_basis)
    logger.debug("ID verification passed")
    return result
