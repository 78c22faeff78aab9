"""Account holder records and their comma-separated file representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Gender of an account holder, stored as a single letter."""

    MALE = "M"
    FEMALE = "F"
    OTHER = "O"

    def to_char(self) -> str:
        """Return the one-letter code written to the account file."""
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "Gender":
        """Map ``M``/``m`` and ``F``/``f`` to their genders; anything else is OTHER."""
        code = char.strip()[:1].upper()
        if code == "M":
            return cls.MALE
        if code == "F":
            return cls.FEMALE
        return cls.OTHER


@dataclass
class User:
    """One account: birthday is stored as the integer DDMMYYYY."""

    id: str
    name: str
    surname: str
    birthday: int
    balance: float = 0.0
    gender: Gender = Gender.OTHER

    def to_line(self) -> str:
        """Return the record as ``id,name,surname,birthday,gender,balance`` (no newline)."""
        return (
            f"{self.id},{self.name},{self.surname},{self.birthday},"
            f"{self.gender.to_char()},{self.balance:.2f}"
        )

    @classmethod
    def from_line(cls, line: str) -> "User":
        """Parse a record line; raise ValueError if it is not a well-formed record."""
        fields = line.rstrip("\r\n").split(",", 5)
        if len(fields) != 6:
            raise ValueError(f"expected 6 fields in record: {line!r}")
        user_id, name, surname, birthday, gender, balance = fields
        if not (user_id and name and surname):
            raise ValueError(f"empty field in record: {line!r}")
        if len(gender) != 1:
            raise ValueError(f"gender must be one character: {line!r}")
        try:
            birthday_value = int(birthday)
            balance_value = float(balance)
        except ValueError as exc:
            raise ValueError(f"bad number in record: {line!r}") from exc
        return cls(
            id=user_id,
            name=name,
            surname=surname,
            birthday=birthday_value,
            balance=balance_value,
            gender=Gender.from_char(gender),
        )