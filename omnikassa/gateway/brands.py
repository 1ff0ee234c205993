"""Payment brands the consumer can be steered to."""


class PaymentMethods:
    """Payment method identifiers used by the payment framework."""

    AFTERPAY = "afterpay"
    BANCONTACT = "bancontact"
    CREDIT_CARD = "credit_card"
    IDEAL = "ideal"
    MAESTRO = "maestro"
    MASTERCARD = "mastercard"
    PAYPAL = "paypal"
    V_PAY = "v_pay"
    VISA = "visa"


class PaymentBrands:
    """Values accepted in the `paymentBrand` field.

    CARDS lets the consumer choose between MASTERCARD, VISA, BANCONTACT,
    MAESTRO and V_PAY.
    """

    IDEAL = "IDEAL"
    AFTERPAY = "AFTERPAY"
    PAYPAL = "PAYPAL"
    MASTERCARD = "MASTERCARD"
    VISA = "VISA"
    BANCONTACT = "BANCONTACT"
    MAESTRO = "MAESTRO"
    V_PAY = "V_PAY"
    CARDS = "CARDS"

    METHOD_BRANDS: dict[str, str] = {
        PaymentMethods.AFTERPAY: AFTERPAY,
        PaymentMethods.BANCONTACT: BANCONTACT,
        PaymentMethods.CREDIT_CARD: CARDS,
        PaymentMethods.IDEAL: IDEAL,
        PaymentMethods.MAESTRO: MAESTRO,
        PaymentMethods.MASTERCARD: MASTERCARD,
        PaymentMethods.PAYPAL: PAYPAL,
        PaymentMethods.V_PAY: V_PAY,
        PaymentMethods.VISA: VISA,
    }

    @classmethod
    def transform(cls, payment_method: str | None) -> str | None:
        """Return the brand for a framework payment method, or None."""

        if not isinstance(payment_method, str):
            return None
        return cls.METHOD_BRANDS.get(payment_method)


class PaymentBrandForce:
    """Only meaningful together with a payment brand.

    FORCE_ONCE enforces the brand on the first transaction only; after a
    failure the consumer may pick another method. FORCE_ALWAYS never allows
    another method.
    """

    FORCE_ONCE = "FORCE_ONCE"
    FORCE_ALWAYS = "FORCE_ALWAYS"
