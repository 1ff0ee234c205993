"""Customer information attached to an order."""

from datetime import date
from typing import Any

from omnikassa.gateway.data_helper import validate_null_or_an
from omnikassa.gateway.errors import FormatError

GENDERS = {"M", "F"}


class CustomerInformation:
    """Optional consumer details; required by some brands such as AFTERPAY."""

    def __init__(self) -> None:
        self.email_address: str | None = None
        self.date_of_birth: date | None = None
        self.gender: str | None = None
        self.initials: str | None = None
        self.telephone_number: str | None = None

    def set_email_address(self, email_address: str | None) -> None:
        validate_null_or_an(email_address, 45, "email_address")
        self.email_address = email_address

    def set_date_of_birth(self, date_of_birth: date | None) -> None:
        if date_of_birth is not None and not isinstance(date_of_birth, date):
            raise FormatError(f"date_of_birth must be a date, got {type(date_of_birth).__name__}")
        self.date_of_birth = date_of_birth

    def set_gender(self, gender: str | None) -> None:
        validate_null_or_an(gender, 1, "gender")
        if gender is not None and gender not in GENDERS:
            raise FormatError(f"gender must be one of {sorted(GENDERS)}, got {gender!r}")
        self.gender = gender

    def set_initials(self, initials: str | None) -> None:
        validate_null_or_an(initials, 256, "initials")
        self.initials = initials

    def set_telephone_number(self, telephone_number: str | None) -> None:
        validate_null_or_an(telephone_number, 31, "telephone_number")
        self.telephone_number = telephone_number

    def _formatted_date_of_birth(self) -> str | None:
        if self.date_of_birth is None:
            return None
        return self.date_of_birth.strftime("%d-%m-%Y")

    def get_json(self) -> dict[str, Any]:
        data = {
            "emailAddress": self.email_address,
            "dateOfBirth": self._formatted_date_of_birth(),
            "gender": self.gender,
            "initials": self.initials,
            "telephoneNumber": self.telephone_number,
        }
        return {key: value for key, value in data.items() if value is not None}

    def signature_fields(self) -> list[Any]:
        return [
            self.email_address,
            self._formatted_date_of_birth(),
            self.gender,
            self.initials,
            self.telephone_number,
        ]
