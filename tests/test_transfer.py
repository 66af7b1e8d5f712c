import random
from datetime import date

import pytest

from bankdesk.models import AccountKind, BankAccount
from bankdesk.registry import Bank
from bankdesk.transfer import (
    CardTransfer,
    ExpiredCardError,
    InvalidCardError,
    InvalidPasswordError,
    PasswordKind,
    TransferError,
    is_expired,
    required_password,
)

TODAY = date(2024, 6, 15)
password = "password"
secret = "secret"


def _account(card, cash, expiration="2030/01", kind=AccountKind.CURRENT):
    return BankAccount(
        kind=kind,
        card_number=card,
        cash=cash,
        expiration_date=expiration,
        fixed_second_password=password,
        dynamic_second_password=secret,
    )


@pytest.fixture
def bank():
    b = Bank()
    b.add_customer("Ann", "Lee", "code-a", "ann", password, 30)
    b.add_customer("Bob", "Ray", "code-b", "bob", password, 40)
    b.open_account("ann", _account("card-a", "5000"))
    b.open_account("ann", _account("card-old", "5000", expiration="2024/05"))
    b.open_account("bob", _account("card-b", "2000", kind=AccountKind.DEPOSIT))
    return b


@pytest.fixture
def transfer(bank):
    return CardTransfer(bank, bank.customer("ann"))


@pytest.mark.parametrize(
    "expiration, expected",
    [("2024/05", True), ("2024/06", False), ("2023/12", True), ("2025/01", False)],
)
def test_is_expired(expiration, expected):
    assert is_expired(expiration, TODAY) is expected


def test_is_expired_rejects_malformed_date():
    with pytest.raises(ValueError):
        is_expired("2024", TODAY)


def test_required_password_threshold():
    assert required_password(100000) is PasswordKind.FIXED
    assert required_password(100001) is PasswordKind.DYNAMIC


def test_prepare_returns_password_kind_and_recipient(transfer, bank):
    assert transfer.prepare("card-a", "card-b", 1000, TODAY) is PasswordKind.FIXED
    assert transfer.recipient is bank.customer("bob")
    assert transfer.destination.card_number == "card-b"


def test_prepare_unknown_destination(transfer):
    with pytest.raises(InvalidCardError):
        transfer.prepare("card-a", "card-missing", 1000, TODAY)


def test_prepare_unknown_origin(transfer):
    with pytest.raises(InvalidCardError):
        transfer.prepare("card-b", "card-a", 1000, TODAY)


def test_prepare_expired_origin(transfer):
    with pytest.raises(ExpiredCardError):
        transfer.prepare("card-old", "card-b", 1000, TODAY)


def test_execute_before_prepare(transfer):
    with pytest.raises(TransferError):
        transfer.execute(password)


def test_execute_with_fixed_password_moves_money(transfer, bank):
    transfer.prepare("card-a", "card-b", 1000, TODAY)
    origin, destination = transfer.execute(password)
    assert origin.cash == "4000"
    assert float(destination.cash) == pytest.approx(2000 + 1000 - 0.0001)
    assert bank.find_account("card-b")[1] is destination


def test_wrong_password_leaves_balances(transfer, bank):
    transfer.prepare("card-a", "card-b", 1000, TODAY)
    with pytest.raises(InvalidPasswordError):
        transfer.execute("wrong")
    assert bank.find_account("card-a")[1].cash == "5000"
    assert bank.find_account("card-b")[1].cash == "2000"


def test_large_amount_needs_dynamic_password(transfer, bank):
    bank.find_account("card-a")[1].cash = "500000"
    assert transfer.prepare("card-a", "card-b", 200000, TODAY) is PasswordKind.DYNAMIC
    with pytest.raises(InvalidPasswordError):
        transfer.execute(password)
    code = transfer.issue_dynamic_password(random.Random(7))
    assert 100000 <= int(code) < 1000000
    assert bank.find_account("card-a")[1].dynamic_second_password == code
    origin, _ = transfer.execute(code)
    assert origin.cash == "300000"


def test_issue_dynamic_password_requires_origin(transfer):
    with pytest.raises(TransferError):
        transfer.issue_dynamic_password(random.Random(1))


def test_issue_dynamic_password_after_bad_destination(transfer, bank):
    with pytest.raises(InvalidCardError):
        transfer.prepare("card-a", "card-missing", 1000, TODAY)
    code = transfer.issue_dynamic_password(random.Random(3))
    assert bank.find_account("card-a")[1].dynamic_second_password == code
    assert len(code) == 6