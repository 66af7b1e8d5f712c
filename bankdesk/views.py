"""Read-only views of customers and their accounts."""

from __future__ import annotations

from .models import AccountKind, BankAccount, Customer, NotFoundError
from .registry import Bank

KIND_LABELS = {
    AccountKind.CURRENT: "currunt account",
    AccountKind.LOAN: "Loan account",
    AccountKind.DEPOSIT: "deposit account",
}

# Order in which the bank-wide search looks through one customer's accounts.
_BANK_SEARCH_ORDER = (AccountKind.CURRENT, AccountKind.DEPOSIT, AccountKind.LOAN)

# A customer's own lookup keeps the last match, so later kinds take priority.
_CUSTOMER_PRIORITY = (AccountKind.DEPOSIT, AccountKind.LOAN, AccountKind.CURRENT)


def customer_usernames(bank: Bank) -> list[str]:
    """Usernames of every customer, in the order they were added."""
    return [customer.username for customer in bank.customers]


def customer_cards(customer: Customer) -> dict[AccountKind, list[str]]:
    """The customer's card numbers, grouped by account kind."""
    return {
        kind: [account.card_number for account in customer.accounts_of(kind)]
        for kind in AccountKind
    }


def cards_by_kind(bank: Bank) -> dict[AccountKind, list[str]]:
    """Every card number at the bank, grouped by account kind."""
    return {
        kind: [
            account.card_number
            for customer in bank.customers
            for account in customer.accounts_of(kind)
        ]
        for kind in AccountKind
    }


def all_card_numbers(bank: Bank) -> list[str]:
    """All current cards, then all loan cards, then all deposit cards."""
    grouped = cards_by_kind(bank)
    return [card for kind in AccountKind for card in grouped[kind]]


def account_details(account: BankAccount) -> dict[str, str]:
    """Every field of an account, with a label naming its kind."""
    return {
        "card_number": account.card_number,
        "account_number": account.account_number,
        "cash": account.cash,
        "cvv2": account.cvv2,
        "dynamic_second_password": account.dynamic_second_password,
        "fixed_second_password": account.fixed_second_password,
        "expiration_date": account.expiration_date,
        "pin": account.pin,
        "shaba_number": account.shaba_number,
        "type": KIND_LABELS[account.kind],
    }


def _require_selection(card_number: str | None) -> str:
    if not card_number:
        raise ValueError("No account selected.")
    return card_number


def customer_account_details(customer: Customer, card_number: str | None) -> dict[str, str]:
    """Details of one of the customer's own accounts."""
    card_number = _require_selection(card_number)
    for kind in _CUSTOMER_PRIORITY:
        for account in customer.accounts_of(kind):
            if account.card_number == card_number:
                return account_details(account)
    raise NotFoundError("account not found.")


def bank_account_details(bank: Bank, card_number: str | None) -> dict[str, str]:
    """Details of the first account at the bank carrying the card number."""
    card_number = _require_selection(card_number)
    for customer in bank.customers:
        for kind in _BANK_SEARCH_ORDER:
            for account in customer.accounts_of(kind):
                if account.card_number == card_number:
                    return account_details(account)
    raise NotFoundError("account not found.")