"""saidverify exception hierarchy."""

from __future__ import annotations

from saidverify.models.verification import FailureReason


class SAIDVerifyError(Exception):
    """Base exception for all saidverify errors."""


class IdValidationError(SAIDVerifyError):
    """An ID number failed one of the validation checks."""

    reason: FailureReason
    default_message = "Invalid ID number."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidLengthError(IdValidationError):
    reason = FailureReason.INVALID_LENGTH
    default_message = "Invalid ID format. ID must be exactly 13 digits long."


class InvalidCharactersError(IdValidationError):
    reason = FailureReason.INVALID_CHARACTERS
    default_message = "Invalid ID format. ID must only contain digits."


class ChecksumMismatchError(IdValidationError):
    reason = FailureReason.CHECKSUM_MISMATCH
    default_message = "Invalid ID number. The checksum does not match."


class InvalidDateError(IdValidationError):
    reason = FailureReason.INVALID_DATE
    default_message = "Invalid date in ID number."


class LogWriteError(SAIDVerifyError):
    """Appending to the result log failed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Result log write failed for {path!r}: {message}")


class PreferencesError(SAIDVerifyError):
    """User preferences could not be loaded or saved."""
