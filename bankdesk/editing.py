"""Administrative changes: profiles, customers and newly opened accounts."""

from __future__ import annotations

import re
from enum import Enum

from .models import AccountKind, BankAccount, Customer, User
from .registry import Bank

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WHOLE_INT = re.compile(r"\s*([+-]?\d+)\s*")


class ProfileField(Enum):
    """A field of a user's profile that can be changed."""

    NAME = "name"
    LASTNAME = "lastname"
    NATIONAL_CODE = "national_code"
    AGE = "age"
    USERNAME = "username"
    PASSWORD = "password"


def _age_from_field(value: object) -> int:
    """Read an age typed into a form field; text that is not a number gives 0."""
    if isinstance(value, int):
        return value
    match = _WHOLE_INT.fullmatch(str(value))
    return int(match.group(1)) if match else 0


def _age_from_signup(value: object) -> int:
    """Read the age given at sign-up: the integer at the start of the text."""
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise ValueError(f"age {value!r} is not a number")
    return int(match.group(1))


def change_field(user: User, field: ProfileField | str, value: object) -> object:
    """Set one profile field of an administrator or customer; return the stored value."""
    field = ProfileField(field)
    if field is ProfileField.AGE:
        stored: object = _age_from_field(value)
    else:
        stored = str(value)
    setattr(user, field.value, stored)
    return getattr(user, field.value)


def register_customer(
    bank: Bank,
    name: str,
    lastname: str,
    national_code: str,
    age: int | str,
    username: str,
    password: str,
) -> Customer:
    """Add a customer with no accounts to the bank."""
    return bank.add_customer(
        name, lastname, national_code, username, password, _age_from_signup(age)
    )


def add_account(
    bank: Bank, username: str | None, kind: AccountKind | str, **kwargs: str
) -> BankAccount:
    """Open an account of the given kind for the named customer.

    The keyword arguments are the account's fields, such as ``card_number``,
    ``cash`` or ``expiration_date``.
    """
    if username is None:
        raise ValueError("no customer selected")
    kind = AccountKind(kind)
    account = BankAccount(kind=kind, **{key: str(value) for key, value in kwargs.items()})
    return bank.open_account(username, account)


def remove_customer(bank: Bank, username: str | None) -> Customer:
    """Delete the named customer from the bank and return them."""
    if username is None:
        raise ValueError("no customer selected")
    return bank.delete_customer(username)