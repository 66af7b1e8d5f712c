"""Interactive text console for administrators and customers."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .editing import (
    ProfileField,
    add_account,
    change_field,
    register_customer,
    remove_customer,
)
from .models import AccountKind, BankError, Customer, User
from .registry import Bank
from .transfer import CardTransfer, PasswordKind, TransferError
from .views import (
    all_card_numbers,
    bank_account_details,
    cards_by_kind,
    customer_account_details,
    customer_cards,
    customer_usernames,
)

ACCOUNT_FIELDS = (
    ("card_number", "Card number"),
    ("shaba_number", "Shaba number"),
    ("account_number", "Account number"),
    ("cvv2", "CVV2"),
    ("cash", "Cash"),
    ("expiration_date", "Expiration date (YEAR/MONTH)"),
    ("pin", "PIN"),
    ("fixed_second_password", "Fixed second password"),
    ("dynamic_second_password", "Dynamic second password"),
)

NOT_FOUND = "password or username are not found."
EMPTY_FIELD = "a plce is empty."

LOGIN_PROMPT = "Password"
DYNAMIC_PROMPT = "second Dynamic password"
FIXED_PROMPT = "second fixed password"


class _EndOfInput(Exception):
    """The input stream ran out."""


def admin_rows(bank: Bank) -> list[tuple[str, str, str]]:
    """Name, last name and username of every administrator, in sign-up order."""
    return [(admin.name, admin.lastname, admin.username) for admin in bank.admins]


class Console:
    """A menu-driven session over a bank, reading commands line by line."""

    def __init__(
        self,
        bank: Bank,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.bank = bank
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.admin: User | None = None
        self.customer: Customer | None = None

    # -- input and output -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self.stdout.write(f"{prompt}: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.strip()

    def _menu(self, title: str, options: list[tuple[str, str]]) -> str:
        self._say()
        self._say(f"== {title} ==")
        for key, label in options:
            self._say(f"{key}) {label}")
        return self._ask("Choice")

    def _run_menu(
        self,
        title: str,
        actions: dict[str, tuple[str, Callable[[], None]]],
        back_label: str = "Back",
    ) -> None:
        options = [(key, label) for key, (label, _) in actions.items()]
        options.append(("0", back_label))
        while True:
            choice = self._menu(title, options)
            if choice == "0":
                return
            entry = actions.get(choice)
            if entry is None:
                self._say("Unknown choice.")
                continue
            try:
                entry[1]()
            except (BankError, ValueError) as exc:
                self._say(f"Error: {exc}")

    # -- session ----------------------------------------------------------

    def run(self) -> None:
        """Show the first page until the user quits or input ends."""
        try:
            self._run_menu(
                "Bank",
                {
                    "1": ("Administrator", self._admin_login),
                    "2": ("Customer", self._customer_login),
                },
                back_label="Quit",
            )
        except _EndOfInput:
            self._say()

    # -- administrators ---------------------------------------------------

    def _admin_login(self) -> None:
        self._run_menu(
            "Administrator",
            {"1": ("Sign up", self._admin_sign_up), "2": ("Log in", self._admin_log_in)},
        )

    def _admin_sign_up(self) -> None:
        labels = ("Name", "Last name", "National code", LOGIN_PROMPT, "Username", "Age")
        values = [self._ask(label) for label in labels]
        if any(value == "" for value in values):
            self._say(f"information eror: {EMPTY_FIELD}")
            return
        name, lastname, national_code, entered, username, age_text = values
        try:
            age = int(age_text)
        except ValueError:
            self._say(f"information eror: age {age_text!r} is not a number")
            return
        self.bank.sign_up_admin(name, lastname, national_code, entered, username, age)
        self._say("signin was sucssesfully.")

    def _admin_log_in(self) -> None:
        username = self._ask("Username")
        entered = self._ask(LOGIN_PROMPT)
        if not self.bank.login_admin(username, entered):
            self._say(f"information eror: {NOT_FOUND}")
            return
        self.admin = self.bank.find_admin(username, entered)
        try:
            self._admin_page()
        finally:
            self.admin = None

    def _admin_page(self) -> None:
        self._run_menu(
            "Administrator page",
            {
                "1": ("Add customer", self._add_customer),
                "2": ("Remove customer", self._remove_customer),
                "3": ("Change my information", self._change_my_info),
                "4": ("Change customer information", self._change_customer_info),
                "5": ("List administrators", self._list_admins),
                "6": ("Open deposit account", lambda: self._open_account(AccountKind.DEPOSIT)),
                "7": ("Open current account", lambda: self._open_account(AccountKind.CURRENT)),
                "8": ("Open loan account", lambda: self._open_account(AccountKind.LOAN)),
                "9": ("List all accounts", self._list_accounts),
                "10": ("Accounts of a customer", self._accounts_of_customer),
                "11": ("Account details", self._account_details),
            },
        )

    def _choose_customer(self) -> str | None:
        usernames = customer_usernames(self.bank)
        self._say("Customers: " + (", ".join(usernames) if usernames else "(none)"))
        username = self._ask("Customer username")
        return username or None

    def _add_customer(self) -> None:
        labels = ("Name", "Last name", "National code", "Age", "Username", LOGIN_PROMPT)
        name, lastname, national_code, age, username, entered = (
            self._ask(label) for label in labels
        )
        register_customer(self.bank, name, lastname, national_code, age, username, entered)
        self._say("Customer addition was successful.")

    def _remove_customer(self) -> None:
        remove_customer(self.bank, self._choose_customer())
        self._say("Customer deleted was successful.")

    def _edit_profile(self, user: User) -> None:
        fields = ", ".join(field.value for field in ProfileField)
        while True:
            for field in ProfileField:
                self._say(f"{field.value}: {getattr(user, field.value)}")
            choice = self._ask(f"Field to change ({fields}; blank to finish)")
            if not choice:
                return
            try:
                field = ProfileField(choice)
            except ValueError:
                self._say(f"Unknown field {choice!r}.")
                continue
            stored = change_field(user, field, self._ask("New value"))
            self._say(f"{field.value} is now {stored}")

    def _change_my_info(self) -> None:
        if self.admin is None:
            raise BankError("no administrator is logged in")
        self._edit_profile(self.admin)

    def _change_customer_info(self) -> None:
        username = self._choose_customer()
        if username is None:
            raise ValueError("no customer selected")
        self._edit_profile(self.bank.customer(username))

    def _list_admins(self) -> None:
        for name, lastname, username in admin_rows(self.bank):
            self._say(f"{name}\t{lastname}\t{username}")

    def _open_account(self, kind: AccountKind) -> None:
        username = self._choose_customer()
        values = {key: self._ask(label) for key, label in ACCOUNT_FIELDS}
        add_account(self.bank, username, kind, **values)
        self._say("adding account was sucssesfully.")

    def _print_grouped(self, grouped: dict[AccountKind, list[str]]) -> None:
        for kind in AccountKind:
            cards = grouped[kind]
            self._say(f"{kind.value}: " + (", ".join(cards) if cards else "(none)"))

    def _list_accounts(self) -> None:
        self._print_grouped(cards_by_kind(self.bank))

    def _accounts_of_customer(self) -> None:
        username = self._choose_customer()
        if username is None:
            raise ValueError("no customer selected")
        self._print_grouped(customer_cards(self.bank.customer(username)))

    def _print_details(self, details: dict[str, str]) -> None:
        for key, value in details.items():
            self._say(f"{key}: {value}")

    def _account_details(self) -> None:
        cards = all_card_numbers(self.bank)
        self._say("Cards: " + (", ".join(cards) if cards else "(none)"))
        self._print_details(bank_account_details(self.bank, self._ask("Card number") or None))

    # -- customers --------------------------------------------------------

    def _customer_login(self) -> None:
        username = self._ask("Username")
        entered = self._ask(LOGIN_PROMPT)
        if not self.bank.login_customer(username, entered):
            self._say(f"information eror: {NOT_FOUND}")
            return
        self.customer = self.bank.find_customer(username, entered)
        try:
            self._customer_page()
        finally:
            self.customer = None

    def _current_customer(self) -> Customer:
        if self.customer is None:
            raise BankError("no customer is logged in")
        return self.customer

    def _customer_page(self) -> None:
        self._run_menu(
            "Customer page",
            {
                "1": ("Account details", self._own_account_details),
                "2": ("My accounts", self._own_accounts),
                "3": ("Card to card", self._card_to_card),
            },
        )

    def _own_accounts(self) -> None:
        self._print_grouped(customer_cards(self._current_customer()))

    def _own_account_details(self) -> None:
        customer = self._current_customer()
        cards = [account.card_number for account in customer.all_accounts()]
        self._say("Cards: " + (", ".join(cards) if cards else "(none)"))
        self._print_details(customer_account_details(customer, self._ask("Card number") or None))

    def _card_to_card(self) -> None:
        transfer = CardTransfer(self.bank, self._current_customer())
        origin = self._ask("Origin card number")
        destination = self._ask("Destination card number")
        amount_text = self._ask("Amount")
        try:
            amount = float(amount_text)
        except ValueError:
            self._say(f"Amount {amount_text!r} is not a number.")
            return
        try:
            kind = transfer.prepare(origin, destination, amount)
            assert transfer.recipient is not None
            self._say(f"Recipient: {transfer.recipient.full_name()}")
            if kind is PasswordKind.DYNAMIC:
                answer = self._ask("Generate a dynamic password? [y/N]")
                if answer.lower().startswith("y"):
                    self._say(f"dynamic password: {transfer.issue_dynamic_password()}")
                entered = self._ask(DYNAMIC_PROMPT)
            else:
                entered = self._ask(FIXED_PROMPT)
            transfer.execute(entered)
        except TransferError as exc:
            self._say(f"Error: {exc}")
            return
        self._say("Payment was successful.")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session over an empty bank."""
    del argv
    Console(Bank(), sys.stdin, sys.stdout).run()
    return 0