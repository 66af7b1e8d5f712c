"""Card-to-card transfers between accounts held at the bank."""

from __future__ import annotations

import random
import re
from datetime import date
from enum import Enum

from .models import BankAccount, BankError, Customer, NotFoundError
from .registry import Bank

FIXED_PASSWORD_LIMIT = 100000
TRANSFER_FEE = 0.0001
DYNAMIC_PASSWORD_RANGE = (100000, 1000000)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TransferError(BankError):
    """Raised when a transfer cannot be carried out."""


class InvalidCardError(TransferError):
    """Raised when a card number names no account."""


class ExpiredCardError(TransferError):
    """Raised when the origin card has expired."""


class InvalidPasswordError(TransferError):
    """Raised when the second password does not match."""


class PasswordKind(Enum):
    """Which second password a transfer asks for."""

    FIXED = "fixed"
    DYNAMIC = "dynamic"


def _whole(text: str) -> int:
    """The integer at the start of a balance such as ``"12.500000"``."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise TransferError(f"balance {text!r} is not a number")
    return int(match.group(1))


def is_expired(expiration_date: str, today: date) -> bool:
    """Whether a ``YEAR/MONTH`` expiration date lies before ``today``'s month."""
    parts = expiration_date.split("/")
    if len(parts) < 2:
        raise ValueError(f"expiration date {expiration_date!r} is not YEAR/MONTH")
    year, month = int(parts[0]), int(parts[1])
    return year < today.year or (year == today.year and month < today.month)


def required_password(amount: float) -> PasswordKind:
    """Small amounts need the fixed second password, larger ones the dynamic one."""
    return PasswordKind.FIXED if amount <= FIXED_PASSWORD_LIMIT else PasswordKind.DYNAMIC


class CardTransfer:
    """A transfer from one of a customer's cards to any card at the bank."""

    def __init__(self, bank: Bank, customer: Customer) -> None:
        self.bank = bank
        self.customer = customer
        self.origin: BankAccount | None = None
        self.destination: BankAccount | None = None
        self.recipient: Customer | None = None
        self.amount: float | None = None

    def prepare(
        self,
        origin_card: str,
        destination_card: str,
        amount: float,
        today: date | None = None,
    ) -> PasswordKind:
        """Check both cards and the origin's expiry; return the password needed.

        Returns which second password ``execute`` will expect.
        """
        self.destination = self.recipient = self.amount = None
        try:
            self.origin = self.customer.find_account(origin_card)
        except NotFoundError as exc:
            self.origin = None
            raise InvalidCardError(f"origin card {origin_card!r} is invalid") from exc
        try:
            recipient, destination = self.bank.find_account(destination_card)
        except NotFoundError as exc:
            raise InvalidCardError("The card number is invalid.") from exc
        if is_expired(self.origin.expiration_date, today or date.today()):
            raise ExpiredCardError("The card has expired.")
        self.recipient = recipient
        self.destination = destination
        self.amount = amount
        return required_password(amount)

    def execute(self, password: str) -> tuple[BankAccount, BankAccount]:
        """Move the prepared amount; return the origin and destination accounts."""
        if self.origin is None or self.destination is None or self.amount is None:
            raise TransferError("the transfer has not been prepared")
        amount = float(self.amount)
        if required_password(amount) is PasswordKind.FIXED:
            expected = self.origin.fixed_second_password
        else:
            expected = self.origin.dynamic_second_password
        if password != expected:
            raise InvalidPasswordError("The password is invalid.")

        self.origin.cash = str(int(_whole(self.origin.cash) - amount))
        credited = _whole(self.destination.cash) + (amount - TRANSFER_FEE)
        self.destination.cash = f"{credited:.6f}"
        return self.origin, self.destination

    def issue_dynamic_password(self, rng: random.Random | None = None) -> str:
        """Give the origin card a new six-digit dynamic password and return it."""
        if self.origin is None:
            raise TransferError("no origin card has been chosen")
        generator = rng if rng is not None else random.SystemRandom()
        low, high = DYNAMIC_PASSWORD_RANGE
        self.origin.dynamic_second_password = str(generator.randrange(low, high))
        return self.origin.dynamic_second_password