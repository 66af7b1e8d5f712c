"""The bank's registers of users, administrators and customers."""

from __future__ import annotations

from .models import Admin, BankAccount, Customer, NotFoundError, User


class Bank:
    """Holds everyone known to the bank, in the order they were added."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.admins: list[Admin] = []
        self.customers: list[Customer] = []

    def sign_up_admin(
        self,
        name: str,
        lastname: str,
        national_code: str,
        password: str,
        username: str,
        age: int,
    ) -> Admin:
        """Register a new administrator, also recording them as a user."""
        self.users.append(User(name, lastname, national_code, username, password, age))
        admin = Admin(name, lastname, national_code, username, password, age)
        self.admins.append(admin)
        return admin

    def login_admin(self, username: str, password: str) -> bool:
        """Whether an administrator has these credentials."""
        return any(admin.matches(username, password) for admin in self.admins)

    def login_customer(self, username: str, password: str) -> bool:
        """Whether a customer has these credentials."""
        return any(c.matches(username, password) for c in self.customers)

    def find_admin(self, username: str, password: str) -> Admin:
        """The first administrator with these credentials."""
        for admin in self.admins:
            if admin.matches(username, password):
                return admin
        raise NotFoundError(f"no administrator {username!r} with that password")

    def find_customer(self, username: str, password: str) -> Customer:
        """The first customer with these credentials."""
        for customer in self.customers:
            if customer.matches(username, password):
                return customer
        raise NotFoundError(f"no customer {username!r} with that password")

    def add_customer(
        self,
        name: str,
        lastname: str,
        national_code: str,
        username: str,
        password: str,
        age: int,
    ) -> Customer:
        """Register a new customer with no accounts."""
        customer = Customer(name, lastname, national_code, username, password, age)
        self.customers.append(customer)
        return customer

    def delete_customer(self, username: str) -> Customer:
        """Remove the first customer with this username and return them."""
        for position, customer in enumerate(self.customers):
            if customer.username == username:
                del self.customers[position]
                return customer
        raise NotFoundError(f"no customer {username!r}")

    def customer(self, username: str) -> Customer:
        """The first customer with this username."""
        for customer in self.customers:
            if customer.username == username:
                return customer
        raise NotFoundError(f"no customer {username!r}")

    def open_account(self, username: str, account: BankAccount) -> BankAccount:
        """Give the named customer a new account."""
        return self.customer(username).add_account(account)

    def find_account(self, card_number: str) -> tuple[Customer, BankAccount]:
        """The first customer holding the card, with the account itself."""
        for customer in self.customers:
            for account in customer.all_accounts():
                if account.card_number == card_number:
                    return customer, account
        raise NotFoundError(f"no account with card number {card_number!r}")