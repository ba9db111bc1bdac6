"""Luhn-style checksum over South African ID numbers."""

from __future__ import annotations


def _collapse(doubled: int) -> int:
    return (doubled % 10) + 1 if doubled > 9 else doubled


def is_checksum_valid(digits: str) -> bool:
    """Return True when the Luhn-style digit sum of ``digits`` is a multiple of 10.

    Digits are walked right to left; every second digit, starting with the
    one left of the check digit, is doubled and collapsed to a single digit.
    """
    total = 0
    alternate = False
    for ch in reversed(digits):
        n = int(ch)
        if alternate:
            n = _collapse(n * 2)
        total += n
        alternate = not alternate
    return total % 10 == 0


def compute_check_digit(stem: str) -> str:
    """Return the digit that makes ``stem + digit`` pass ``is_checksum_valid``."""
    total = 0
    # The check digit occupies the undoubled rightmost slot, so the
    # rightmost stem digit is the first one doubled.
    for i, ch in enumerate(reversed(stem)):
        n = int(ch)
        total += _collapse(n * 2) if i % 2 == 0 else n
    return str((10 - total % 10) % 10)
