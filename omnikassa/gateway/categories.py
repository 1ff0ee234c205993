"""Mapping of payment line types onto OmniKassa product categories."""


class PaymentLineType:
    """Line item types used by the payment framework."""

    DIGITAL = "digital"
    DISCOUNT = "discount"
    FEE = "fee"
    GIFT_CARD = "gift_card"
    PHYSICAL = "physical"
    SHIPPING = "shipping"
    STORE_CREDIT = "store_credit"
    SURCHARGE = "surcharge"


class ProductCategories:
    """OmniKassa only knows physical and digital products."""

    PHYSICAL = "PHYSICAL"
    DIGITAL = "DIGITAL"

    LINE_TYPE_CATEGORIES: dict[str, str] = {
        PaymentLineType.PHYSICAL: PHYSICAL,
        PaymentLineType.DIGITAL: DIGITAL,
        PaymentLineType.DISCOUNT: DIGITAL,
        PaymentLineType.SHIPPING: DIGITAL,
    }

    @classmethod
    def transform(cls, line_type: str | None) -> str:
        """Return the product category for `line_type`, DIGITAL when unknown."""

        if not isinstance(line_type, str):
            return cls.DIGITAL
        return cls.LINE_TYPE_CATEGORIES.get(line_type, cls.DIGITAL)
