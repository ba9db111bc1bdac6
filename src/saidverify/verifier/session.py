"""Interactive verification session with an explicit retry/exit state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from typing import Optional

from saidverify.core.exceptions import IdValidationError, LogWriteError
from saidverify.core.protocols import IResultLog
from saidverify.models.verification import LeapYearBasis, ResultFormat, VerificationResult
from saidverify.reporting.formatter import render_result
from saidverify.verifier import decoder
from saidverify.verifier.orchestrator import check_checksum, check_date, check_format

logger = logging.getLogger(__name__)

ID_PROMPT = "Enter your ID Number:"
RETRY_PROMPT = "----- Press any key to try again or type 'exit' to return to the main menu ------"
LOG_WRITE_FAILED = "An error occurred while saving the results."
EXIT_WORD = "exit"

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


class SessionState(StrEnum):
    AWAITING_INPUT = "AwaitingInput"
    FORMAT_CHECK = "FormatCheck"
    CHECKSUM_CHECK = "ChecksumCheck"
    DATE_CHECK = "DateCheck"
    DECODE = "Decode"
    DONE = "Done"
    RETRY = "Retry"
    ABANDONED = "Abandoned"


class VerificationSession:
    """Drives one verification attempt-loop from an input source to a result.

    ``read_line`` returns the next line of user input and raises EOFError when
    the source is exhausted; ``write_line`` emits one line of output.
    The session ends in DONE (result reported and logged) or ABANDONED.
    """

    def __init__(
        self,
        *,
        read_line: InputFn,
        write_line: OutputFn,
        result_log: IResultLog,
        result_format: ResultFormat = ResultFormat.DETAILED,
        leap_year_basis: LeapYearBasis = LeapYearBasis.BIRTH_YEAR,
        today: date | None = None,
    ) -> None:
        self._read = read_line
        self._write = write_line
        self._log = result_log
        self._format = result_format
        self._leap_basis = leap_year_basis
        self._today = today

        self.state = SessionState.AWAITING_INPUT
        self.history: list[SessionState] = []
        self._candidate = ""
        self._result: Optional[VerificationResult] = None

    @property
    def result_format(self) -> ResultFormat:
        return self._format

    def run(self) -> VerificationResult | None:
        """Step until a terminal state; return the result or None if abandoned."""
        while self.state not in (SessionState.DONE, SessionState.ABANDONED):
            self.history.append(self.state)
            self.state = self._step()
        self.history.append(self.state)
        return self._result

    # -- transitions -------------------------------------------------------

    def _step(self) -> SessionState:
        handler = {
            SessionState.AWAITING_INPUT: self._await_input,
            SessionState.FORMAT_CHECK: self._format_check,
            SessionState.CHECKSUM_CHECK: self._checksum_check,
            SessionState.DATE_CHECK: self._date_check,
            SessionState.DECODE: self._decode,
            SessionState.RETRY: self._retry,
        }[self.state]
        try:
            return handler()
        except IdValidationError as exc:
            logger.debug("ID verification failed: %s", exc.reason)
            self._write(exc.message)
            return SessionState.RETRY

    def _await_input(self) -> SessionState:
        self._write(ID_PROMPT)
        try:
            self._candidate = self._read()
        except EOFError:
            return SessionState.ABANDONED
        return SessionState.FORMAT_CHECK

    def _format_check(self) -> SessionState:
        check_format(self._candidate)
        return SessionState.CHECKSUM_CHECK

    def _checksum_check(self) -> SessionState:
        check_checksum(self._candidate)
        return SessionState.DATE_CHECK

    def _date_check(self) -> SessionState:
        check_date(self._candidate, today=self._today, leap_year_basis=self._leap_basis)
        return SessionState.DECODE

    def _decode(self) -> SessionState:
        result = decoder.decode(
            self._candidate, today=self._today, leap_year_basis=self._leap_basis
        )
        for line in render_result(result, self._format):
            self._write(line)
        try:
            self._log.append(result.id_number, self._format)
        except LogWriteError as exc:
            logger.warning("%s", exc)
            self._write(LOG_WRITE_FAILED)
        logger.debug("ID verification passed")
        self._result = result
        return SessionState.DONE

    def _retry(self) -> SessionState:
        self._write(RETRY_PROMPT)
        try:
            answer = self._read()
        except EOFError:
            return SessionState.ABANDONED
        if answer.strip().lower() == EXIT_WORD:
            return SessionState.ABANDONED
        return SessionState.AWAITING_INPUT
