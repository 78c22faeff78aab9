# bankadb

A small interactive bank account manager. Accounts are kept one per line in a
plain text file (`account.txt` in the current directory by default), and each
operation is recorded with a timestamp in a log file (`log.txt` by default).
The menu and its messages are in Turkish.

Each account line has the form:

```
ID,Name,Surname,DDMMYYYY,Gender,Balance
```

for example `10000000001,Ayse,Yilmaz,15061990,F,250.00`. Gender is one of
`M`, `F` or `O`; the balance is written with two decimals. Log lines look like
`[2024-01-31 12:00:00] Yeni kullanici eklendi.`

## Installation

```
pip install .
```

## Usage

Start the menu-driven program:

```
bankadb
```

or choose other files:

```
bankadb --accounts my_accounts.txt --log my_log.txt
```

The menu offers:

1. Add a user (a random 11-digit ID, not starting with 0 and not already in
   the file, is generated)
2. Delete a user by ID
3. List users as a tab-separated table, with birthdays shown as `DD/MM/YYYY`
4. Update a user's name, surname, birthday and gender (the balance is kept)
5. Withdraw money
6. Deposit money
7. Transfer money between two users
0. Exit

The program also stops when its input runs out.

Input rules when adding or updating a user:

- name and surname: ASCII letters only, non-empty (longer entries are cut to
  49 characters);
- birthday: entered as `DD MM YYYY`, day 1-31, month 1-12, year 1900-2100,
  with 29 February accepted only in leap years;
- gender: `M`/`m`, `F`/`f`, anything else counts as `O`;
- starting balance: non-empty, with at most one decimal point; its leading
  numeric part is used as the balance.

Invalid entries are asked for again and the failure is logged.

## Using the library

The modules can be used from Python:

- `bankadb.models` – `Gender` (`to_char`, `from_char`) and the `User`
  dataclass (`to_line`, `from_line`);
- `bankadb.store` – `AccountStore` with `ids`, `users`, `exists`, `save`,
  `update`, `delete`, `withdraw`, `deposit` and `transfer`;
- `bankadb.validation` – `has_only_letters`, `is_valid_name`,
  `is_valid_surname`, `is_valid_birthday`, `is_valid_balance`;
- `bankadb.logbook` – `timestamp` and `log_message`;
- `bankadb.cli` – `BankApp`, `generate_unique_id`, `format_birthday` and
  `main`.

```python
from bankadb.models import Gender, User
from bankadb.store import AccountStore, InsufficientBalanceError

store = AccountStore("account.txt")
store.save(User("10000000001", "Ayse", "Yilmaz", 15061990, 100.0, Gender.FEMALE))
store.deposit("10000000001", 50.0)   # returns the new balance, 150.0

try:
    store.withdraw("10000000001", 1000.0)
except InsufficientBalanceError:
    print("not enough money")

for user in store.users():
    print(user.to_line())
```

Failed operations raise subclasses of `bankadb.store.BankError`:

- `UserNotFoundError` – no account has the given ID (`update`, `delete`,
  `withdraw`, `deposit`, `transfer`);
- `InsufficientBalanceError` – a withdrawal exceeds the balance;
- `DuplicateUserError` – `save` was given an ID already in the file;
- `TransferError` – sender and receiver are the same, or the amount is not
  greater than zero.

If a transfer's receiver does not exist, the amount is returned to the sender
and `UserNotFoundError` is raised. Changes to existing records are written to
a temporary file next to the account file, which then replaces it.
`AccountStore.users` skips malformed lines; balance changes leave them in the
file unchanged.

## What it does not do

There are no passwords or other authentication, no locking against several
programs using the same account file at once, and no transaction history
apart from the free-text log messages.

## Running the tests

```
pip install .[test]
pytest
```