"""Shipping / billing address details."""

from typing import Any

from omnikassa.gateway.data_helper import validate_an, validate_null_or_an


class Address:
    """Address block of an order announcement.

    Mandatory parts are passed to the constructor; name prefixes and house
    number details are optional and set afterwards.
    """

    def __init__(self, last_name: str, street: str, postal_code: str, city: str, country_code: str) -> None:
        self.first_name: str | None = None
        self.middle_name: str | None = None
        self.house_number: str | None = None
        self.house_number_addition: str | None = None
        self.set_last_name(last_name)
        self.set_street(street)
        self.set_postal_code(postal_code)
        self.set_city(city)
        self.set_country_code(country_code)

    def set_first_name(self, first_name: str | None) -> None:
        validate_null_or_an(first_name, 50, "first_name")
        self.first_name = first_name

    def set_middle_name(self, middle_name: str | None) -> None:
        validate_null_or_an(middle_name, 20, "middle_name")
        self.middle_name = middle_name

    def set_last_name(self, last_name: str) -> None:
        validate_an(last_name, 50, "last_name")
        self.last_name = last_name

    def set_street(self, street: str) -> None:
        validate_an(street, 100, "street")
        self.street = street

    def set_house_number(self, house_number: str | None) -> None:
        validate_null_or_an(house_number, 100, "house_number")
        self.house_number = house_number

    def set_house_number_addition(self, house_number_addition: str | None) -> None:
        validate_null_or_an(house_number_addition, 6, "house_number_addition")
        self.house_number_addition = house_number_addition

    def set_postal_code(self, postal_code: str) -> None:
        validate_an(postal_code, 10, "postal_code")
        self.postal_code = postal_code

    def set_city(self, city: str) -> None:
        validate_an(city, 40, "city")
        self.city = city

    def set_country_code(self, country_code: str) -> None:
        """ISO 3166-1 alpha-2 country code."""

        validate_an(country_code, 2, "country_code")
        self.country_code = country_code

    def get_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.first_name is not None:
            data["firstName"] = self.first_name
        if self.middle_name is not None:
            data["middleName"] = self.middle_name
        data["lastName"] = self.last_name
        data["street"] = self.street
        if self.house_number is not None:
            data["houseNumber"] = self.house_number
        if self.house_number_addition is not None:
            data["houseNumberAddition"] = self.house_number_addition
        data["postalCode"] = self.postal_code
        data["city"] = self.city
        data["countryCode"] = self.country_code
        return data

    def signature_fields(self) -> list[Any]:
        return [
            self.first_name,
            self.middle_name,
            self.last_name,
            self.street,
            self.house_number,
            self.house_number_addition,
            self.postal_code,
            self.city,
            self.country_code,
        ]
