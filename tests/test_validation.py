import pytest

from bankadb.validation import (
    has_only_letters,
    is_valid_balance,
    is_valid_birthday,
    is_valid_name,
    is_valid_surname,
)


@pytest.mark.parametrize(
    "text, expected",
    [("Ali", True), ("", True), ("Ali1", False), ("Ali Veli", False), ("Şule", False)],
)
def test_has_only_letters(text, expected):
    assert has_only_letters(text) is expected


@pytest.mark.parametrize("check", [is_valid_name, is_valid_surname])
@pytest.mark.parametrize(
    "value, expected",
    [("Mehmet", True), ("", False), (None, False), ("M3hmet", False), ("O'Neil", False)],
)
def test_name_and_surname(check, value, expected):
    assert check(value) is expected


@pytest.mark.parametrize(
    "day, month, year, expected",
    [
        (1, 1, 1900, True),
        (31, 12, 2100, True),
        (0, 5, 2000, False),
        (32, 5, 2000, False),
        (10, 0, 2000, False),
        (10, 13, 2000, False),
        (10, 5, 1899, False),
        (10, 5, 2101, False),
        (29, 2, 2000, True),
        (29, 2, 2024, True),
        (29, 2, 1900, False),
        (29, 2, 2023, False),
        (30, 2, 2024, False),
        (28, 2, 2023, True),
    ],
)
def test_is_valid_birthday(day, month, year, expected):
    assert is_valid_birthday(day, month, year) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("100", True),
        ("100.50", True),
        (".5", True),
        ("", False),
        (None, False),
        ("1.2.3", False),
        ("10..", False),
    ],
)
def test_is_valid_balance(text, expected):
    assert is_valid_balance(text) is expected