import pytest

from bankadb.models import Gender, User
from bankadb.store import (
    AccountStore,
    BankError,
    DuplicateUserError,
    InsufficientBalanceError,
    TransferError,
    UserNotFoundError,
)


@pytest.fixture
def store(tmp_path):
    return AccountStore(tmp_path / "account.txt")


@pytest.fixture
def alice():
    return User("10000000001", "Alice", "Smith", 1011990, 500.0, Gender.FEMALE)


@pytest.fixture
def bob():
    return User("20000000002", "Bob", "Jones", 2021985, 100.0, Gender.MALE)


@pytest.fixture
def filled(store, alice, bob):
    store.save(alice)
    store.save(bob)
    return store


def balance_of(store, user_id):
    return next(u.balance for u in store.users() if u.id == user_id)


def test_empty_store_has_nothing(store):
    assert list(store.ids()) == []
    assert store.users() == []
    assert store.exists("10000000001") is False


def test_save_and_read_back(filled, alice, bob):
    assert filled.users() == [alice, bob]
    assert list(filled.ids()) == [alice.id, bob.id]
    assert filled.exists(alice.id)


def test_save_writes_record_lines(filled, alice, bob):
    text = filled.path.read_text(encoding="utf-8")
    assert text == alice.to_line() + "\n" + bob.to_line() + "\n"


def test_save_duplicate_rejected(filled, alice):
    with pytest.raises(DuplicateUserError):
        filled.save(alice)
    assert len(filled.users()) == 2


def test_update_replaces_record(filled, alice, bob):
    changed = User(alice.id, "Alicia", "Brown", alice.birthday, 42.0, Gender.OTHER)
    filled.update(changed)
    assert filled.users() == [changed, bob]


def test_update_missing_user(filled, alice):
    ghost = User("99999999999", "Ghost", "User", 1011990, 0.0, Gender.OTHER)
    with pytest.raises(UserNotFoundError):
        filled.update(ghost)


def test_delete_removes_only_that_user(filled, alice, bob):
    filled.delete(alice.id)
    assert filled.users() == [bob]
    assert not filled.exists(alice.id)


def test_delete_missing_user(filled):
    with pytest.raises(UserNotFoundError):
        filled.delete("99999999999")
    assert len(filled.users()) == 2


def test_withdraw_reduces_balance(filled, alice):
    new_balance = filled.withdraw(alice.id, 120.0)
    assert new_balance == pytest.approx(alice.balance - 120.0)
    assert balance_of(filled, alice.id) == pytest.approx(new_balance)


def test_withdraw_whole_balance_allowed(filled, bob):
    assert filled.withdraw(bob.id, bob.balance) == pytest.approx(0.0)


def test_withdraw_insufficient_leaves_balance(filled, bob):
    with pytest.raises(InsufficientBalanceError):
        filled.withdraw(bob.id, bob.balance + 1)
    assert balance_of(filled, bob.id) == pytest.approx(bob.balance)


def test_withdraw_unknown_user(filled):
    with pytest.raises(UserNotFoundError):
        filled.withdraw("99999999999", 1.0)


def test_deposit_increases_balance(filled, bob):
    new_balance = filled.deposit(bob.id, 25.5)
    assert new_balance == pytest.approx(bob.balance + 25.5)
    assert balance_of(filled, bob.id) == pytest.approx(new_balance)


def test_deposit_on_missing_file(store):
    with pytest.raises(UserNotFoundError):
        store.deposit("10000000001", 10.0)


def test_malformed_lines_survive_rewrite(filled, alice):
    with filled.path.open("a", encoding="utf-8") as handle:
        handle.write("garbage line\n")
    filled.deposit(alice.id, 1.0)
    assert filled.path.read_text(encoding="utf-8").splitlines()[-1] == "garbage line"
    assert len(filled.users()) == 2


def test_transfer_moves_money(filled, alice, bob):
    filled.transfer(alice.id, bob.id, 50.0)
    assert balance_of(filled, alice.id) == pytest.approx(alice.balance - 50.0)
    assert balance_of(filled, bob.id) == pytest.approx(bob.balance + 50.0)


def test_transfer_total_is_conserved(filled, alice, bob):
    before = sum(u.balance for u in filled.users())
    filled.transfer(bob.id, alice.id, 33.33)
    assert sum(u.balance for u in filled.users()) == pytest.approx(before)


def test_transfer_same_account_rejected(filled, alice):
    with pytest.raises(TransferError):
        filled.transfer(alice.id, alice.id, 10.0)


@pytest.mark.parametrize("amount", [0.0, -5.0])
def test_transfer_non_positive_amount_rejected(filled, alice, bob, amount):
    with pytest.raises(TransferError):
        filled.transfer(alice.id, bob.id, amount)


def test_transfer_insufficient_funds(filled, alice, bob):
    with pytest.raises(InsufficientBalanceError):
        filled.transfer(bob.id, alice.id, bob.balance + 1)
    assert balance_of(filled, alice.id) == pytest.approx(alice.balance)
    assert balance_of(filled, bob.id) == pytest.approx(bob.balance)


def test_transfer_to_unknown_receiver_refunds_sender(filled, alice):
    with pytest.raises(UserNotFoundError):
        filled.transfer(alice.id, "99999999999", 75.0)
    assert balance_of(filled, alice.id) == pytest.approx(alice.balance)


def test_store_errors_are_caught_as_bank_errors(filled, alice, bob):
    actions = [
        (lambda: filled.delete("99999999999"), UserNotFoundError),
        (lambda: filled.save(alice), DuplicateUserError),
        (lambda: filled.withdraw(bob.id, bob.balance + 1000.0), InsufficientBalanceError),
        (lambda: filled.transfer(alice.id, alice.id, 1.0), TransferError),
    ]
    for action, expected_type in actions:
        with pytest.raises(BankError) as info:
            action()
        assert type(info.value) is expected_type