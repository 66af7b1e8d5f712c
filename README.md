# bankdesk

A small in-memory bank desk. Administrators sign up and log in, register
customers, change profiles, open current, deposit and loan accounts, and look
up account details. Customers log in, list their cards, see the details of
their accounts and send money from one card to another, confirmed by a fixed
or a dynamic second password.

## Install

```
pip install .
```

## Run the console

```
bankdesk
```

The console (`bankdesk.cli.Console`) starts on a first page where you choose
the administrator or the customer side, or quit. On the administrator side you
can sign up and log in; the administrator page then offers adding and removing
customers, changing your own or a customer's information, listing
administrators, opening deposit, current and loan accounts, listing all cards,
listing one customer's cards and showing an account's details. On the customer
side you log in and can show an account's details, list your cards, or make a
card-to-card transfer. The session ends when you quit or input runs out.

## Use it from Python

```python
from datetime import date

from bankdesk.models import AccountKind, BankAccount
from bankdesk.registry import Bank
from bankdesk.transfer import CardTransfer

password = "password"

bank = Bank()
bank.add_customer("Ada", "Lovelace", "000", "ada", password, 36)
bank.add_customer("Alan", "Turing", "001", "alan", password, 41)
bank.open_account("ada", BankAccount(kind=AccountKind.CURRENT, card_number="1111",
                                     cash="500000", expiration_date="2099/12",
                                     fixed_second_password="secret"))
bank.open_account("alan", BankAccount(kind=AccountKind.DEPOSIT, card_number="2222",
                                      cash="0", expiration_date="2099/12"))

transfer = CardTransfer(bank, bank.customer("ada"))
transfer.prepare("1111", "2222", 1000, date(2025, 1, 1))  # PasswordKind.FIXED
origin, destination = transfer.execute("secret")
```

- `bankdesk.models`: `User`, `Admin`, `Customer`, `BankAccount`,
  `AccountKind` and the `BankError` / `NotFoundError` exceptions.
  `BankAccount.profit()` computes 5% of the whole-number balance.
- `bankdesk.registry`: `Bank`, which keeps users, administrators and customers
  in the order they were added, checks logins, and finds customers and cards.
- `bankdesk.transfer`: `CardTransfer`, `is_expired`, `required_password` and
  the transfer errors. Amounts up to 100000 need the fixed second password,
  larger ones the dynamic one, which `issue_dynamic_password` sets to a new
  six-digit number. The origin card must not have expired (`YEAR/MONTH`); the
  destination is credited the amount less a fee of 0.0001.
- `bankdesk.views`: listings of customer usernames and card numbers, and
  account details by card number.
- `bankdesk.editing`: `change_field` with `ProfileField`, `register_customer`,
  `add_account` and `remove_customer`.

## What it does not do

Nothing is stored: every session starts with an empty bank and everything is
lost when it ends. There is no graphical interface, only the text console.

## Tests

```
pip install .[test]
pytest
```