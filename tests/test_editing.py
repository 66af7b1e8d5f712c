import pytest

from bankdesk.editing import (
    ProfileField,
    add_account,
    change_field,
    register_customer,
    remove_customer,
)
from bankdesk.models import AccountKind, Customer, NotFoundError
from bankdesk.registry import Bank


@pytest.fixture
def bank():
    password = "password"
    b = Bank()
    register_customer(b, "Ali", "Rezaei", "code-1", "30", "ali", password)
    register_customer(b, "Sara", "Ahmadi", "code-2", 25, "sara", password)
    return b


def test_register_customer_adds_in_order(bank):
    assert [c.username for c in bank.customers] == ["ali", "sara"]
    first = bank.customers[0]
    assert isinstance(first, Customer)
    assert (first.name, first.lastname, first.national_code) == ("Ali", "Rezaei", "code-1")
    assert first.age == 30
    assert first.password == "password"
    assert list(first.all_accounts()) == []


def test_register_customer_reads_leading_integer_of_age():
    b = Bank()
    password = "password"
    customer = register_customer(b, "A", "B", "c", "42years", "u", password)
    assert customer.age == 42


def test_register_customer_rejects_non_numeric_age():
    b = Bank()
    password = "password"
    with pytest.raises(ValueError):
        register_customer(b, "A", "B", "c", "abc", "u", password)
    assert b.customers == []


def test_registered_customer_can_log_in(bank):
    assert bank.login_customer("sara", "password") is True
    assert bank.login_customer("sara", "secret") is False


@pytest.mark.parametrize(
    "field, value, attribute",
    [
        (ProfileField.NAME, "Reza", "name"),
        (ProfileField.LASTNAME, "Karimi", "lastname"),
        (ProfileField.NATIONAL_CODE, "code-9", "national_code"),
        (ProfileField.USERNAME, "reza", "username"),
        (ProfileField.PASSWORD, "secret", "password"),
    ],
)
def test_change_text_fields(bank, field, value, attribute):
    user = bank.customers[0]
    assert change_field(user, field, value) == value
    assert getattr(user, attribute) == value


def test_change_field_accepts_field_name(bank):
    user = bank.customers[1]
    change_field(user, "lastname", "Moradi")
    assert user.lastname == "Moradi"


def test_change_age_from_text(bank):
    user = bank.customers[0]
    assert change_field(user, ProfileField.AGE, "41") == 41
    assert user.age == 41


def test_change_age_invalid_text_becomes_zero(bank):
    user = bank.customers[0]
    assert change_field(user, ProfileField.AGE, "forty") == 0
    assert user.age == 0


def test_change_unknown_field_raises(bank):
    with pytest.raises(ValueError):
        change_field(bank.customers[0], "balance", "1")


def test_changed_credentials_used_for_login(bank):
    user = bank.customers[0]
    change_field(user, ProfileField.PASSWORD, "secret")
    assert bank.login_customer("ali", "secret") is True
    assert bank.login_customer("ali", "password") is False


def test_change_admin_field():
    b = Bank()
    password = "password"
    admin = b.sign_up_admin("Nima", "Jafari", "code-3", password, "nima", 50)
    change_field(admin, ProfileField.NAME, "Omid")
    assert b.find_admin("nima", "password").name == "Omid"


@pytest.mark.parametrize("kind", list(AccountKind))
def test_add_account_of_each_kind(bank, kind):
    account = add_account(
        bank, "sara", kind, card_number="card-a", cash="500", expiration_date="2099/01"
    )
    customer = bank.customer("sara")
    assert customer.accounts_of(kind) == [account]
    assert account.kind is kind
    assert account.card_number == "card-a"
    assert account.cash == "500"
    assert account.expiration_date == "2099/01"


def test_add_account_with_kind_name(bank):
    account = add_account(bank, "ali", "loan", card_number="card-b")
    assert bank.customer("ali").accounts_of(AccountKind.LOAN) == [account]
    assert bank.find_account("card-b") == (bank.customer("ali"), account)


def test_add_account_keeps_order(bank):
    add_account(bank, "ali", AccountKind.CURRENT, card_number="card-1")
    add_account(bank, "ali", AccountKind.CURRENT, card_number="card-2")
    cards = [a.card_number for a in bank.customer("ali").accounts_of(AccountKind.CURRENT)]
    assert cards == ["card-1", "card-2"]


def test_add_account_unknown_customer(bank):
    with pytest.raises(NotFoundError):
        add_account(bank, "nobody", AccountKind.CURRENT, card_number="card-x")


def test_add_account_without_selection(bank):
    with pytest.raises(ValueError):
        add_account(bank, None, AccountKind.CURRENT, card_number="card-x")


def test_add_account_unknown_field(bank):
    with pytest.raises(TypeError):
        add_account(bank, "ali", AccountKind.CURRENT, card_number="card-x", colour="red")


def test_remove_customer(bank):
    removed = remove_customer(bank, "ali")
    assert removed.username == "ali"
    assert [c.username for c in bank.customers] == ["sara"]
    assert bank.login_customer("ali", "password") is False


def test_remove_unknown_customer(bank):
    with pytest.raises(NotFoundError):
        remove_customer(bank, "nobody")
    assert len(bank.customers) == 2


def test_remove_without_selection(bank):
    with pytest.raises(ValueError):
        remove_customer(bank, None)