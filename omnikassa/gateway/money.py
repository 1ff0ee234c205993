"""Money value object: ISO 4217 currency plus an amount in minor units."""

from typing import Any

from omnikassa.gateway.errors import FormatError


class Money:
    """An amount as the gateway expects it, e.g. EUR 12.34 is `Money("EUR", 1234)`."""

    def __init__(self, currency: str, amount: int) -> None:
        if not isinstance(currency, str) or len(currency) != 3 or not currency.isalpha():
            raise FormatError(f"invalid currency: {currency!r}")
        # bool is an int subclass but never a valid amount.
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise FormatError(f"amount must be an integer in minor units, got {amount!r}")
        self.currency = currency.upper()
        self.amount = amount

    def get_json(self) -> dict[str, Any]:
        return {"currency": self.currency, "amount": self.amount}

    def signature_fields(self) -> list[Any]:
        return [self.currency, self.amount]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return (self.currency, self.amount) == (other.currency, other.amount)

    def __repr__(self) -> str:
        return f"Money({self.currency!r}, {self.amount!r})"
