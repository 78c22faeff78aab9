"""The account file: one comma-separated record per line."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from .models import User

DEFAULT_ACCOUNT_PATH = "account.txt"
_ID_WIDTH = 11


class BankError(Exception):
    """Base class for account operation failures."""


class UserNotFoundError(BankError, LookupError):
    """No account carries the given ID."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user not found: {user_id}")
        self.user_id = user_id


class InsufficientBalanceError(BankError):
    """The account balance does not cover the requested amount."""

    def __init__(self, user_id: str, balance: float, amount: float) -> None:
        super().__init__(
            f"insufficient balance on {user_id}: {balance:.2f} < {amount:.2f}"
        )
        self.user_id = user_id
        self.balance = balance
        self.amount = amount


class DuplicateUserError(BankError):
    """An account with the same ID already exists."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user already exists: {user_id}")
        self.user_id = user_id


class TransferError(BankError):
    """A transfer request is invalid."""


class AccountStore:
    """Reads and rewrites the account file at *path*."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_ACCOUNT_PATH) -> None:
        self.path = Path(path)

    def _read_lines(self) -> list[str]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                return handle.readlines()
        except FileNotFoundError:
            return []

    def _write_lines(self, lines: list[str]) -> None:
        temp_path = self.path.with_name(self.path.name + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            handle.writelines(lines)
        os.replace(temp_path, self.path)

    @staticmethod
    def _line_id(line: str) -> str:
        return line.rstrip("\r\n").split(",", 1)[0][:_ID_WIDTH]

    def ids(self) -> Iterator[str]:
        """Yield the ID field of every line in the file."""
        for line in self._read_lines():
            user_id = self._line_id(line)
            if user_id:
                yield user_id

    def users(self) -> list[User]:
        """Return every well-formed record; malformed lines are skipped."""
        result = []
        for line in self._read_lines():
            try:
                result.append(User.from_line(line))
            except ValueError:
                continue
        return result

    def exists(self, user_id: str) -> bool:
        """True if some line carries *user_id*."""
        return any(existing == user_id for existing in self.ids())

    def save(self, user: User) -> None:
        """Append *user*; raise DuplicateUserError if its ID is taken."""
        if self.exists(user.id):
            raise DuplicateUserError(user.id)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(user.to_line() + "\n")

    def update(self, user: User) -> None:
        """Replace the record with *user*'s ID; raise UserNotFoundError if absent."""
        lines = self._read_lines()
        updated = False
        new_lines = []
        for line in lines:
            if self._line_id(line) == user.id:
                new_lines.append(user.to_line() + "\n")
                updated = True
            else:
                new_lines.append(line)
        if not updated:
            raise UserNotFoundError(user.id)
        self._write_lines(new_lines)

    def delete(self, user_id: str) -> None:
        """Remove the record with *user_id*; raise UserNotFoundError if absent."""
        lines = self._read_lines()
        kept = [line for line in lines if self._line_id(line) != user_id]
        if len(kept) == len(lines):
            raise UserNotFoundError(user_id)
        self._write_lines(kept)

    def _adjust(self, user_id: str, change: Callable[[float], float]) -> float:
        new_lines = []
        new_balance: float | None = None
        for line in self._read_lines():
            try:
                user = User.from_line(line)
            except ValueError:
                new_lines.append(line)
                continue
            if user.id == user_id:
                user.balance = change(user.balance)
                new_balance = round(user.balance, 2)
            new_lines.append(user.to_line() + "\n")
        if new_balance is None:
            raise UserNotFoundError(user_id)
        self._write_lines(new_lines)
        return new_balance

    def withdraw(self, user_id: str, amount: float) -> float:
        """Take *amount* from the account and return the new balance."""

        def take(balance: float) -> float:
            if balance < amount:
                raise InsufficientBalanceError(user_id, balance, amount)
            return balance - amount

        return self._adjust(user_id, take)

    def deposit(self, user_id: str, amount: float) -> float:
        """Add *amount* to the account and return the new balance."""
        return self._adjust(user_id, lambda balance: balance + amount)

    def transfer(self, sender_id: str, receiver_id: str, amount: float) -> None:
        """Move *amount* between two accounts, refunding the sender if the deposit fails."""
        if sender_id == receiver_id:
            raise TransferError("sender and receiver must be different accounts")
        if amount <= 0:
            raise TransferError("transfer amount must be greater than zero")
        self.withdraw(sender_id, amount)
        try:
            self.deposit(receiver_id, amount)
        except UserNotFoundError:
            self.deposit(sender_id, amount)
            raise