"""CLI entry point — ``saidverify`` (interactive menu) and ``saidverify verify``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from datetime import date

from saidverify import __version__
from saidverify.core.config import AppSettings
from saidverify.core.exceptions import LogWriteError, PreferencesError
from saidverify.core.logging_config import setup_logging
from saidverify.core.protocols import IPreferencesStore, IResultLog
from saidverify.models.verification import ResultFormat, UserPreferences
from saidverify.persistence import create_persistence
from saidverify.reporting.formatter import render_result
from saidverify.verifier.orchestrator import verify_id
from saidverify.verifier.session import LOG_WRITE_FAILED, VerificationSession

logger = logging.getLogger(__name__)

MENU_LINES = (
    "Welcome to the South African ID Checker App",
    "[1] Verify the authenticity of your ID number",
    "[2] Exit the program",
    "[3] Help",
    "[4] About",
    "[5] Configure result format",
    "Make your choice: ",
)

HELP_LINES = (
    " ",
    "Help - SAIDVerifier Application",
    "1. Enter a valid 13-digit South African ID number.",
    "2. The application will verify the format, checksum, and date.",
    "3. If valid, it will display the date of birth, age, gender, and citizenship status.",
    "4. You can retry entering the ID number or return to the main menu.",
    "5. The application saves the verification results to a file.",
    " ",
)

ABOUT_LINES = (
    " ",
    "About - SAIDVerifier Application",
    f"Version: {__version__}",
    "Author: Aundrich Pieterse",
    "Description: This application verifies South African ID numbers, "
    "checking format, checksum, and extracting personal information.",
    " ",
)

INVALID_CHOICE = "Invalid choice. Please select a valid option."
GOODBYE = "Exiting the program. Goodbye!"
FORMAT_PROMPT = "Choose a result format [summary/detailed]:"


class ConsoleMenu:
    """Interactive menu loop around VerificationSession.

    Preferences are loaded once at start and saved on exit; the current
    result format is held on the menu and handed to every session.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        preferences_store: IPreferencesStore,
        result_log: IResultLog,
        read_line: Callable[[], str] = input,
        write_line: Callable[[str], None] = print,
        today: date | None = None,
    ) -> None:
        self._settings = settings
        self._store = preferences_store
        self._log = result_log
        self._read = read_line
        self._write = write_line
        self._today = today
        self.preferences = UserPreferences(result_format=settings.result_format)

    def run(self) -> None:
        self._load_preferences()
        while True:
            self._write_all(MENU_LINES)
            try:
                choice = self._read().strip()
            except EOFError:
                choice = "2"

            if choice == "1":
                self.verify()
            elif choice == "2":
                self._write(GOODBYE)
                self._save_preferences()
                break
            elif choice == "3":
                self._write_all(HELP_LINES)
            elif choice == "4":
                self._write_all(ABOUT_LINES)
            elif choice == "5":
                self.configure()
            else:
                self._write(INVALID_CHOICE)

    def verify(self) -> None:
        session = VerificationSession(
            read_line=self._read,
            write_line=self._write,
            result_log=self._log,
            result_format=self.preferences.result_format,
            leap_year_basis=self._settings.leap_year_basis,
            today=self._today,
        )
        session.run()

    def configure(self) -> None:
        self._write(FORMAT_PROMPT)
        try:
            answer = self._read().strip().lower()
        except EOFError:
            return
        try:
            chosen = ResultFormat(answer)
        except ValueError:
            self._write(f"Unknown result format {answer!r}; keeping {self.preferences.result_format}.")
            return
        self.preferences = UserPreferences(result_format=chosen)
        self._write(f"Result format set to {chosen}.")

    def _load_preferences(self) -> None:
        try:
            self.preferences = self._store.load()
        except PreferencesError as exc:
            logger.warning("Using default preferences: %s", exc)

    def _save_preferences(self) -> None:
        try:
            self._store.save(self.preferences)
        except PreferencesError as exc:
            logger.warning("%s", exc)

    def _write_all(self, lines: tuple[str, ...]) -> None:
        for line in lines:
            self._write(line)


def run_verify(
    id_number: str,
    *,
    settings: AppSettings,
    result_log: IResultLog,
    result_format: ResultFormat,
    write_line: Callable[[str], None] = print,
    today: date | None = None,
) -> int:
    """Verify a single number non-interactively. Returns the process exit status."""
    result = verify_id(id_number, today=today, leap_year_basis=settings.leap_year_basis)
    if not result.is_valid:
        write_line(result.message or "Invalid ID number.")
        return 1

    for line in render_result(result, result_format):
        write_line(line)
    try:
        result_log.append(result.id_number, result_format)
    except LogWriteError as exc:
        logger.warning("%s", exc)
        write_line(LOG_WRITE_FAILED)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"saidverify {__version__}")
        return 0

    settings = AppSettings()
    setup_logging(settings.log_level)
    preferences_store, result_log = create_persistence(settings)

    if args.command == "verify":
        result_format = args.format or _load_format(preferences_store, settings)
        return run_verify(
            args.id_number,
            settings=settings,
            result_log=result_log,
            result_format=ResultFormat(result_format),
        )

    menu = ConsoleMenu(
        settings=settings,
        preferences_store=preferences_store,
        result_log=result_log,
    )
    menu.run()
    return 0


def _load_format(store: IPreferencesStore, settings: AppSettings) -> ResultFormat:
    try:
        return store.load().result_format
    except PreferencesError as exc:
        logger.warning("Using default preferences: %s", exc)
        return settings.result_format


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="saidverify",
        description="Validate South African ID numbers and decode their fields.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("menu", help="Start the interactive menu (default)")

    verify = sub.add_parser("verify", help="Verify a single ID number")
    verify.add_argument("id_number", type=str, help="13-digit ID number")
    verify.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in ResultFormat],
        default=None,
        help="Result format (default: from preferences)",
    )

    return parser


if __name__ == "__main__":
    sys.exit(main())
