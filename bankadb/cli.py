"""Interactive menu for managing bank accounts stored in the account file."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .logbook import DEFAULT_LOG_PATH, log_message
from .models import Gender, User
from .store import (
    DEFAULT_ACCOUNT_PATH,
    AccountStore,
    BankError,
    DuplicateUserError,
    InsufficientBalanceError,
    TransferError,
    UserNotFoundError,
)
from .validation import (
    is_valid_balance,
    is_valid_birthday,
    is_valid_name,
    is_valid_surname,
)

_ID_LENGTH = 11
_NAME_WIDTH = 49
_BALANCE_WIDTH = 99
_LEADING_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

MENU = (
    "---BANKA YONETIM SISTEMI---\n"
    "1. Kullanici Ekle\n"
    "2. Kullanici Sil\n"
    "3. Kullanici Listele\n"
    "4. Kullanici Guncelle\n"
    "5. Para Cek\n"
    "6. Para Yatir\n"
    "7. Para Transferi\n"
    "0. Cikis"
)


def generate_unique_id(
    existing_ids: Iterable[str] = (), rng: random.Random | None = None
) -> str:
    """Return an 11-digit ID, not starting with 0, that is not in *existing_ids*."""
    rng = rng or random.Random()
    taken = set(existing_ids)
    while True:
        candidate = str(rng.randint(1, 9)) + "".join(
            str(rng.randint(0, 9)) for _ in range(_ID_LENGTH - 1)
        )
        if candidate not in taken:
            return candidate


def format_birthday(birthday: int) -> str:
    """Render a DDMMYYYY integer as ``DD/MM/YYYY``."""
    digits = f"{birthday:08d}"
    return f"{digits[0:2]}/{digits[2:4]}/{digits[4:8]}"


def _leading_float(text: str) -> float:
    """Parse the numeric prefix of *text*, or 0.0 if there is none."""
    match = _LEADING_FLOAT.match(text.strip())
    return float(match.group(0)) if match else 0.0


class BankApp:
    """Menu-driven front end over an AccountStore."""

    def __init__(
        self,
        store: AccountStore | None = None,
        log_path: str | os.PathLike[str] = DEFAULT_LOG_PATH,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.store = store or AccountStore()
        self.log_path = log_path
        self.input_func = input_func
        self.output = output or sys.stdout
        self.rng = random.Random()

    # -- I/O helpers -------------------------------------------------------

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.output.write(text + end)
        self.output.flush()

    def _log(self, message: str) -> None:
        log_message(message, self.log_path)

    def _ask(self, prompt: str) -> str:
        self._say(prompt, end="")
        return self.input_func()

    def _token(self, prompt: str) -> str:
        """Read the first whitespace-separated word, skipping blank lines."""
        while True:
            words = self._ask(prompt).split()
            if words:
                return words[0]

    def _read_float(self, prompt: str) -> float:
        while True:
            text = self._token(prompt)
            try:
                return float(text)
            except ValueError:
                self._say("Geçersiz tutar! Lütfen sayisal bir değer girin.")

    # -- menu --------------------------------------------------------------

    def choice(self) -> int:
        """Show the menu until a valid option (0-7) is entered and return it."""
        while True:
            self._say(MENU)
            text = self._token("Seciminizi girin: ")
            try:
                selected = int(text)
            except ValueError:
                selected = -1
            if 0 <= selected <= 7:
                return selected
            self._say("Geçerli bir seçim yapiniz (0-7).")

    # -- user creation -----------------------------------------------------

    def read_name(self) -> str:
        """Prompt until a letters-only name is given."""
        while True:
            name = self._token("Kullanici adini girin: ")[:_NAME_WIDTH]
            if is_valid_name(name):
                return name
            self._say(
                "Kullanici adi geçersiz! Lütfen harflerden oluşan bir isim girin."
            )
            self._log("Kullanici ekleme basarisiz: Geçersiz kullanıcı adı.")

    def read_surname(self) -> str:
        """Prompt until a letters-only surname is given."""
        while True:
            surname = self._token("Kullanici soyadini girin: ")[:_NAME_WIDTH]
            if is_valid_surname(surname):
                return surname
            self._say(
                "Kullanici soyadi geçersiz! Lütfen geçerli bir soyisim girin."
            )
            self._log("Kullanici ekleme basarisiz: Geçersiz kullanici soyadi.")

    def read_birthday(self) -> int:
        """Prompt for ``DD MM YYYY`` until valid; return it as DDMMYYYY."""
        while True:
            words = self._ask("Doğum Tarihi (DD MM YYYY): ").split()
            try:
                day, month, year = (int(word) for word in words[:3])
            except ValueError:
                day = month = year = 0
            if len(words) >= 3 and is_valid_birthday(day, month, year):
                self._say(f"Doğum tarihi: {day:02d}/{month:02d}/{year:04d}")
                return day * 1000000 + month * 10000 + year
            self._say(
                "Doğum tarihi geçersiz! Lütfen 1-31 gün, 1-12 ay ve "
                "1900-2100 yil araliginda bir tarih girin."
            )
            self._log("Kullanici ekleme basarisiz: Geçersiz doğum tarihi.")

    def read_gender(self) -> Gender:
        """Read M/F/O; anything unrecognised counts as OTHER."""
        return Gender.from_char(self._token("Cinsiyet (M/F/O): "))

    def read_balance(self) -> float:
        """Prompt until an acceptable starting balance is given."""
        while True:
            text = self._token("Başlangiç Bakiyesi: ")[:_BALANCE_WIDTH]
            if is_valid_balance(text):
                return _leading_float(text)
            self._say(
                "Geçersiz bakiye! Lütfen sadece rakamlardan oluşan bir değer girin."
            )
            self._log("Kullanici ekleme başarisiz: Geçersiz bakiye.")

    def read_user(self) -> User:
        """Collect a new user's details under a freshly generated ID."""
        self._say("\n--- Kullanici Ekleme ---")
        user_id = generate_unique_id(self.store.ids(), self.rng)
        self._say(f"Oluşturulan kullanici ID: {user_id}")
        user = User(
            id=user_id,
            name=self.read_name(),
            surname=self.read_surname(),
            birthday=self.read_birthday(),
            gender=self.read_gender(),
            balance=self.read_balance(),
        )
        self._say(user.to_line())
        return user

    def print_user(self, user: User) -> None:
        """Print the details of *user*."""
        self._say("Kullanici Bilgileri:")
        self._say(f"ID: {user.id}")
        self._say(f"Ad: {user.name}")
        self._say(f"Soyad: {user.surname}")
        self._say(f"Dogum Tarihi: {user.birthday}")
        self._say(f"Cinsiyet: {user.gender.to_char()}")
        self._say(f"Bakiye: {user.balance:.2f}")

    def create_user(self) -> User | None:
        """Read a user and save it; return it, or None if it was not saved."""
        user = self.read_user()
        self.print_user(user)
        try:
            self.store.save(user)
        except DuplicateUserError:
            self._say("Bu ID zaten mevcut! Lütfen farkli bir ID girin.")
            self._log("Kullanici eklenemedi: ID zaten mevcut.")
            return None
        except OSError:
            self._say("Kullanici eklenirken hata oluştu.")
            self._log("Kullanici eklenemedi!")
            return None
        self._say("Kullanici başariyla eklendi.")
        self._log("Yeni kullanici eklendi.")
        return user

    # -- other menu actions ------------------------------------------------

    def delete_user(self) -> bool:
        """Delete the account whose ID is entered; return whether it was removed."""
        self._say("\n--- Kullanici Silme ---")
        user_id = self._token("Silmek istediginiz kullanici ID'sini girin: ")
        try:
            self.store.delete(user_id[:_ID_LENGTH])
        except (UserNotFoundError, OSError):
            self._say("Kullanici bulunamadi veya silinemedi.")
            self._log("Kullanici silinemedi.")
            return False
        self._say("Kullanici basariyla silindi.")
        self._log("Kullanici silindi.")
        return True

    def list_users(self) -> None:
        """Print every account as a tab-separated table."""
        if not self.store.path.is_file():
            self._say(f"HATA: {self.store.path} dosyasi acilamadi!")
            return
        self._say("\n--- Kullanici Listesi ---")
        self._say("ID\tAd\tSoyad\tDoğum Tarihi\tCinsiyet\tBakiye")
        self._say("-" * 60)
        for user in self.store.users():
            self._say(
                f"{user.id}\t{user.name}\t{user.surname}\t"
                f"{format_birthday(user.birthday)}\t{user.gender.to_char()}\t"
                f"{user.balance:.2f}"
            )
        self._log("Kullanici listelendi.")

    def update_user(self) -> bool:
        """Replace the personal details of an existing account, keeping its balance."""
        self._say("\n--- Kullanici Guncelleme ---")
        user_id = self._token("Guncellemek istediginiz kullanici ID'sini girin: ")
        current = next(
            (user for user in self.store.users() if user.id == user_id), None
        )
        if current is None:
            self._say("Kullanici bulunamadi.")
            self._log("Kullanici guncellenemedi: ID bulunamadi.")
            return False
        updated = User(
            id=current.id,
            name=self.read_name(),
            surname=self.read_surname(),
            birthday=self.read_birthday(),
            gender=self.read_gender(),
            balance=current.balance,
        )
        self.store.update(updated)
        self._say("Kullanici basariyla guncellendi.")
        self._log("Kullanici guncellendi.")
        return True

    def withdraw(self) -> bool:
        """Withdraw an entered amount from an entered account."""
        self._say("\n--- Para Çekme ---")
        user_id = self._token("ID girin: ")
        amount = self._read_float("Çekmek istediğiniz tutar: ")
        try:
            self.store.withdraw(user_id, amount)
        except InsufficientBalanceError:
            self._say("\nYetersiz bakiye!")
            self._log("Yetersiz bakiye nedeniyle para çekilemedi.")
            return False
        except UserNotFoundError:
            self._say("\nKullanıcı bulunamadı!")
            self._log("Geçersiz kullanıcı ID nedeniyle para çekilemedi.")
            return False
        self._say("\nPara başarıyla çekildi!")
        self._say("\nBakiye başarıyla güncellendi. Ana menüye dönülüyor...")
        self._log("Para çekme işlemi başarılı.")
        return True

    def deposit(self) -> bool:
        """Deposit an entered amount into an entered account."""
        self._say("\n--- Para Yatırma ---")
        user_id = self._token("ID girin: ")
        amount = self._read_float("Yatırmak istediğiniz tutar: ")
        try:
            self.store.deposit(user_id, amount)
        except UserNotFoundError:
            self._say("\nKullanıcı bulunamadı!")
            self._log(
                "Geçersiz kullanıcı ID nedeniyle para yatırma işlemi yapılamaz."
            )
            return False
        self._say("\nPara başarıyla yatırıldı!")
        self._say("\nBakiye başarıyla güncellendi. Ana menüye dönülüyor...")
        self._log("Para yatırma işlemi başarılı.")
        return True

    def transfer(self) -> bool:
        """Move an entered amount between two entered accounts."""
        self._say("\n--- PARA TRANSFERİ ---")
        sender_id = self._token("Gönderen kullanıcı ID: ")
        receiver_id = self._token("Alıcı kullanıcı ID: ")
        amount = self._read_float("Gönderilecek tutar (TL): ")
        try:
            self.store.transfer(sender_id, receiver_id, amount)
        except TransferError as exc:
            if sender_id == receiver_id:
                self._say("Gönderen ve alıcı aynı kullanıcı olamaz.")
            else:
                self._say("Geçersiz tutar! Tutar 0'dan büyük olmalıdır.")
            self._log(f"Para transferi başarısız: {exc}")
        except InsufficientBalanceError:
            self._say("\nYetersiz bakiye!")
            self._say("Para çekme işlemi başarısız.")
            self._log("Para transferi başarısız: Gönderen kullanıcıdan para çekilemedi.")
        except UserNotFoundError as exc:
            if exc.user_id == sender_id:
                self._say("Para çekme işlemi başarısız.")
                self._log(
                    "Para transferi başarısız: Gönderen kullanıcıdan para çekilemedi."
                )
            else:
                self._say(
                    "Para yatırma işlemi başarısız. "
                    "Gönderilen tutar geri iade ediliyor."
                )
                self._log(
                    "Para transferi başarısız: Alıcı kullanıcıya para yatırma "
                    "işlemi başarısız."
                )
        else:
            self._say("Para transferi başarılı!")
            self._log("Para transferi başarılı.")
            return True
        self._say("Transfer işlemi başarısız.")
        return False

    def run(self) -> None:
        """Serve the menu until the user chooses 0 or input runs out."""
        actions: dict[int, Callable[[], object]] = {
            1: self.create_user,
            2: self.delete_user,
            3: self.list_users,
            4: self.update_user,
            5: self.withdraw,
            6: self.deposit,
            7: self.transfer,
        }
        try:
            while True:
                selected = self.choice()
                if selected == 0:
                    self._say("Programdan cikiliyor...")
                    return
                try:
                    actions[selected]()
                except BankError as exc:
                    self._say(f"Hata: {exc}")
        except EOFError:
            self._say()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive bank menu."""
    parser = argparse.ArgumentParser(prog="bankadb", description="Bank account manager")
    parser.add_argument("--accounts", default=DEFAULT_ACCOUNT_PATH, help="account file")
    parser.add_argument("--log", default=DEFAULT_LOG_PATH, help="log file")
    args = parser.parse_args(argv)
    BankApp(store=AccountStore(args.accounts), log_path=args.log).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())