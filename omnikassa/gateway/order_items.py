"""Order lines sent along with an order announcement."""

from typing import Any

from omnikassa.gateway.categories import ProductCategories
from omnikassa.gateway.data_helper import validate_an, validate_null_or_an
from omnikassa.gateway.errors import FormatError
from omnikassa.gateway.money import Money


class VatCategories:
    HIGH = "1"
    LOW = "2"
    ZERO = "3"
    NONE = "4"


CATEGORIES = {ProductCategories.PHYSICAL, ProductCategories.DIGITAL}
VAT_CATEGORIES = {VatCategories.HIGH, VatCategories.LOW, VatCategories.ZERO, VatCategories.NONE}


def _require_money(value: Any, field: str) -> Money:
    if not isinstance(value, Money):
        raise FormatError(f"{field} must be Money, got {type(value).__name__}")
    return value


class OrderItem:
    """One product or service line of an order."""

    def __init__(self, name: str, quantity: int, amount: Money, category: str) -> None:
        self.id: str | None = None
        self.description: str | None = None
        self.tax: Money | None = None
        self.vat_category: str | None = None
        self.set_name(name)
        self.set_quantity(quantity)
        self.set_amount(amount)
        self.set_category(category)

    def set_id(self, item_id: str | None) -> None:
        validate_null_or_an(item_id, 25, "id")
        self.id = item_id

    def set_name(self, name: str) -> None:
        validate_an(name, 50, "name")
        self.name = name

    def set_description(self, description: str | None) -> None:
        validate_null_or_an(description, 100, "description")
        self.description = description

    def set_quantity(self, quantity: int) -> None:
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise FormatError(f"quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity

    def set_amount(self, amount: Money) -> None:
        self.amount = _require_money(amount, "amount")

    def set_tax(self, tax: Money | None) -> None:
        self.tax = None if tax is None else _require_money(tax, "tax")

    def set_category(self, category: str) -> None:
        if category not in CATEGORIES:
            raise FormatError(f"category must be one of {sorted(CATEGORIES)}, got {category!r}")
        self.category = category

    def set_vat_category(self, vat_category: str | None) -> None:
        if vat_category is not None and vat_category not in VAT_CATEGORIES:
            raise FormatError(f"vat_category must be one of {sorted(VAT_CATEGORIES)}, got {vat_category!r}")
        self.vat_category = vat_category

    def get_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["name"] = self.name
        if self.description is not None:
            data["description"] = self.description
        data["quantity"] = self.quantity
        data["amount"] = self.amount.get_json()
        if self.tax is not None:
            data["tax"] = self.tax.get_json()
        data["category"] = self.category
        if self.vat_category is not None:
            data["vatCategory"] = self.vat_category
        return data

    def signature_fields(self) -> list[Any]:
        fields: list[Any] = []
        if self.id is not None:
            fields.append(self.id)
        fields.append(self.name)
        fields.append(self.description)
        fields.append(self.quantity)
        fields.extend(self.amount.signature_fields())
        if self.tax is not None:
            fields.extend(self.tax.signature_fields())
        fields.append(self.category)
        if self.vat_category is not None:
            fields.append(self.vat_category)
        return fields


class OrderItems:
    """Ordered collection of order items, owned by a single order."""

    def __init__(self) -> None:
        self.items: list[OrderItem] = []

    def new_item(self, name: str, quantity: int, amount: Money, category: str) -> OrderItem:
        """Create an item, append it and return it for further population."""

        item = OrderItem(name, quantity, amount, category)
        self.items.append(item)
        return item

    def add_item(self, item: OrderItem) -> None:
        if not isinstance(item, OrderItem):
            raise FormatError(f"expected OrderItem, got {type(item).__name__}")
        self.items.append(item)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get_json(self) -> list[dict[str, Any]]:
        return [item.get_json() for item in self.items]

    def signature_fields(self) -> list[Any]:
        fields: list[Any] = []
        for item in self.items:
            fields.extend(item.signature_fields())
        return fields
