"""Append-only text file implementing IResultLog."""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from saidverify.core.exceptions import LogWriteError
from saidverify.models.verification import ResultFormat

RECORD_SEPARATOR = "--------------------------------------"
TIMESTAMP_FORMAT = "%c"  # locale default


def format_record(id_number: str, result_format: ResultFormat, verified_at: datetime) -> str:
    return (
        f"ID Number: {id_number}\n"
        f"Date of Verification: {verified_at.strftime(TIMESTAMP_FORMAT)}\n"
        f"Result Format: {result_format}\n"
        f"{RECORD_SEPARATOR}\n"
    )


class FileResultLog:
    """Production IResultLog appending text blocks to a local file.

    Appends are serialized so concurrent callers never interleave records.
    The file is created on first write.
    """

    def __init__(self, path: str | Path = "verification_results.txt") -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append(
        self,
        id_number: str,
        result_format: ResultFormat,
        verified_at: datetime | None = None,
    ) -> None:
        record = format_record(id_number, result_format, verified_at or datetime.now())
        with self._lock:
            try:
                with self._path.open("a", encoding="utf-8") as out:
                    out.write(record)
            except OSError as exc:
                raise LogWriteError(str(self._path), str(exc)) from exc


class NullResultLog:
    """IResultLog that discards every record (logging disabled)."""

    def append(
        self,
        id_number: str,
        result_format: ResultFormat,
        verified_at: datetime | None = None,
    ) -> None:
        return None
