"""Unit tests for money, address, customer information and order items."""

from datetime import date

import pytest

from omnikassa.gateway.address import Address
from omnikassa.gateway.categories import ProductCategories
from omnikassa.gateway.customer import CustomerInformation
from omnikassa.gateway.errors import FormatError
from omnikassa.gateway.money import Money
from omnikassa.gateway.order_items import OrderItems, VatCategories


def make_address() -> Address:
    return Address("Jansen", "Hoofdstraat", "1234AB", "Amsterdam", "NL")


def test_money():
    money = Money("eur", 1234)

    assert money.get_json() == {"currency": "EUR", "amount": 1234}
    assert money.signature_fields() == ["EUR", 1234]
    assert money == Money("EUR", 1234)


@pytest.mark.parametrize(("currency", "amount"), [("EURO", 100), ("", 100), ("EUR", 12.34), ("EUR", True)])
def test_money_rejects_invalid(currency, amount):
    with pytest.raises(FormatError):
        Money(currency, amount)


def test_address_json_omits_unset_fields():
    address = make_address()

    assert address.get_json() == {
        "lastName": "Jansen",
        "street": "Hoofdstraat",
        "postalCode": "1234AB",
        "city": "Amsterdam",
        "countryCode": "NL",
    }
    assert address.signature_fields() == [None, None, "Jansen", "Hoofdstraat", None, None, "1234AB", "Amsterdam", "NL"]


def test_address_optional_fields():
    address = make_address()
    address.set_first_name("Piet")
    address.set_middle_name("van")
    address.set_house_number("12")
    address.set_house_number_addition("A")

    assert list(address.get_json()) == [
        "firstName",
        "middleName",
        "lastName",
        "street",
        "houseNumber",
        "houseNumberAddition",
        "postalCode",
        "city",
        "countryCode",
    ]
    assert address.signature_fields()[:2] == ["Piet", "van"]


def test_address_rejects_long_country_code():
    with pytest.raises(FormatError):
        Address("Jansen", "Hoofdstraat", "1234AB", "Amsterdam", "NLD")


def test_address_failed_setter_keeps_value():
    address = make_address()

    with pytest.raises(FormatError):
        address.set_house_number_addition("1234567")
    assert address.house_number_addition is None


def test_customer_information():
    customer = CustomerInformation()
    customer.set_email_address("piet@example.com")
    customer.set_date_of_birth(date(1980, 3, 7))
    customer.set_gender("M")

    assert customer.get_json() == {
        "emailAddress": "piet@example.com",
        "dateOfBirth": "07-03-1980",
        "gender": "M",
    }
    assert customer.signature_fields() == ["piet@example.com", "07-03-1980", "M", None, None]


@pytest.mark.parametrize("gender", ["X", "MF"])
def test_customer_rejects_gender(gender):
    customer = CustomerInformation()

    with pytest.raises(FormatError):
        customer.set_gender(gender)
    assert customer.gender is None


def test_order_items():
    items = OrderItems()
    shirt = items.new_item("Shirt", 2, Money("EUR", 1000), ProductCategories.PHYSICAL)
    shirt.set_id("SKU-1")
    shirt.set_tax(Money("EUR", 210))
    shirt.set_vat_category(VatCategories.HIGH)
    items.new_item("E-book", 1, Money("EUR", 500), ProductCategories.DIGITAL)

    assert len(items) == 2
    assert items.get_json() == [
        {
            "id": "SKU-1",
            "name": "Shirt",
            "quantity": 2,
            "amount": {"currency": "EUR", "amount": 1000},
            "tax": {"currency": "EUR", "amount": 210},
            "category": "PHYSICAL",
            "vatCategory": "1",
        },
        {
            "name": "E-book",
            "quantity": 1,
            "amount": {"currency": "EUR", "amount": 500},
            "category": "DIGITAL",
        },
    ]
    assert items.signature_fields() == [
        "SKU-1", "Shirt", None, 2, "EUR", 1000, "EUR", 210, "PHYSICAL", "1",
        "E-book", None, 1, "EUR", 500, "DIGITAL",
    ]


@pytest.mark.parametrize(
    ("name", "quantity", "category"),
    [("", 1, "PHYSICAL"), ("Shirt", 0, "PHYSICAL"), ("Shirt", 1, "physical")],
)
def test_order_item_rejects_invalid(name, quantity, category):
    items = OrderItems()

    with pytest.raises(FormatError):
        items.new_item(name, quantity, Money("EUR", 100), category)
    assert len(items) == 0
