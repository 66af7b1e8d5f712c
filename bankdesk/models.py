"""Users, customers and the bank accounts they hold."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

PROFIT_RATE = 0.05

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class BankError(Exception):
    """Base class for errors raised by the bank."""


class NotFoundError(BankError, LookupError):
    """Raised when a user, customer or account does not exist."""


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group(1))


@dataclass
class User:
    """A person known to the bank."""

    name: str
    lastname: str
    national_code: str
    username: str
    password: str
    age: int

    def matches(self, username: str, password: str) -> bool:
        """Return whether the credentials belong to this user."""
        return self.username == username and self.password == password

    def full_name(self) -> str:
        """Name and last name separated by a space."""
        return f"{self.name} {self.lastname}"


class Admin(User):
    """A bank administrator."""


class AccountKind(Enum):
    """The three kinds of account a customer may hold."""

    CURRENT = "current"
    LOAN = "loan"
    DEPOSIT = "deposit"


@dataclass
class BankAccount:
    """A bank account with its card; all values are kept as text."""

    kind: AccountKind
    card_number: str
    shaba_number: str = ""
    account_number: str = ""
    cvv2: str = ""
    cash: str = ""
    expiration_date: str = ""
    pin: str = ""
    fixed_second_password: str = ""
    dynamic_second_password: str = ""
    profit_amount: str = ""

    def profit(self) -> str:
        """Compute the account's profit, remember it and return it.

        The whole-number part of the balance is taken and the result is
        truncated to a whole number.
        """
        money = int(_leading_int(self.cash) * PROFIT_RATE)
        self.profit_amount = str(money)
        return self.profit_amount


def _empty_accounts() -> dict[AccountKind, list[BankAccount]]:
    return {kind: [] for kind in AccountKind}


@dataclass
class Customer(User):
    """A customer together with the accounts opened for them."""

    accounts: dict[AccountKind, list[BankAccount]] = field(
        default_factory=_empty_accounts, repr=False
    )

    def add_account(self, account: BankAccount) -> BankAccount:
        """Append an account to the list of its kind."""
        self.accounts[account.kind].append(account)
        return account

    def accounts_of(self, kind: AccountKind) -> list[BankAccount]:
        """Accounts of one kind, in the order they were opened."""
        return list(self.accounts[kind])

    def all_accounts(self) -> Iterator[BankAccount]:
        """Every account: current ones, then loan, then deposit."""
        for kind in AccountKind:
            yield from self.accounts[kind]

    def find_account(self, card_number: str) -> BankAccount:
        """The first account with the given card number."""
        for account in self.all_accounts():
            if account.card_number == card_number:
                return account
        raise NotFoundError(f"no account with card number {card_number!r}")