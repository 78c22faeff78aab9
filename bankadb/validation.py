"""Checks applied to user input before an account is created."""

from __future__ import annotations

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


def has_only_letters(text: str) -> bool:
    """True if every character is an ASCII letter (vacuously true for '')."""
    return all(char in _ASCII_LETTERS for char in text)


def is_valid_name(name: str | None) -> bool:
    """A name is non-empty and made of ASCII letters only."""
    return bool(name) and has_only_letters(name)


def is_valid_surname(surname: str | None) -> bool:
    """A surname is non-empty and made of ASCII letters only."""
    return bool(surname) and has_only_letters(surname)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_birthday(day: int, month: int, year: int) -> bool:
    """Day 1-31, month 1-12, year 1900-2100, with February limited to 28/29 days."""
    if not (1 <= day <= 31 and 1 <= month <= 12):
        return False
    if not 1900 <= year <= 2100:
        return False
    if month == 2:
        if day > 29:
            return False
        if day == 29 and not _is_leap(year):
            return False
    return True


def is_valid_balance(text: str | None) -> bool:
    """A balance entry is non-empty and holds at most one decimal point."""
    if not text:
        return False
    return text.count(".") <= 1