"""Order announcement message.

An `Order` is built once per payment attempt: construct it with the mandatory
fields, set optional fields (each one validated on assignment), then
serialize it with `to_request_object()` as the body of the order announce
request. A failing setter raises `FormatError` and leaves the order as it
was.
"""

import json
from datetime import datetime
from typing import Any

from omnikassa.common.config import settings
from omnikassa.common.logging import logger, order_context
from omnikassa.gateway.address import Address
from omnikassa.gateway.customer import CustomerInformation
from omnikassa.gateway.data_helper import validate_an, validate_null_or_an
from omnikassa.gateway.errors import FormatError
from omnikassa.gateway.message import Message
from omnikassa.gateway.money import Money
from omnikassa.gateway.order_items import OrderItems


def _require_type(value: Any, expected: type, field: str, nullable: bool = False) -> None:
    if value is None and nullable:
        return
    if not isinstance(value, expected):
        raise FormatError(f"{field} must be {expected.__name__}, got {type(value).__name__}")


class Order(Message):
    """Order announcement sent to OmniKassa."""

    def __init__(self, merchant_order_id: str, amount: Money, merchant_return_url: str) -> None:
        super().__init__()
        self.description: str | None = None
        self.order_items: OrderItems | None = None
        self.shipping_detail: Address | None = None
        self.billing_detail: Address | None = None
        self.customer_information: CustomerInformation | None = None
        self.language: str | None = None
        self.payment_brand: str | None = None
        self.payment_brand_force: str | None = None

        # Replay protection: the gateway rejects stale timestamps.
        self.set_timestamp(datetime.now().astimezone())
        self.set_merchant_order_id(merchant_order_id)
        self.set_amount(amount)
        self.set_merchant_return_url(merchant_return_url)

    def set_timestamp(self, timestamp: datetime) -> None:
        """Set the announce time; naive values are taken as local time."""

        _require_type(timestamp, datetime, "timestamp")
        if timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()
        self.timestamp = timestamp

    def set_merchant_order_id(self, merchant_order_id: str) -> None:
        """Must be unique when AFTERPAY is used. Format `AN..max 10`."""

        validate_an(merchant_order_id, 10, "merchant_order_id")
        self.merchant_order_id = merchant_order_id

    def set_amount(self, amount: Money) -> None:
        _require_type(amount, Money, "amount")
        self.amount = amount

    def set_merchant_return_url(self, url: str) -> None:
        """URL the consumer's browser returns to after the payment. `AN..max 1024`."""

        validate_an(url, 1024, "merchant_return_url")
        self.merchant_return_url = url

    def set_description(self, description: str | None) -> None:
        validate_null_or_an(description, 35, "description")
        self.description = description

    def set_language(self, language: str | None) -> None:
        """ISO 639-1 code, not case sensitive. `AN..2`."""

        validate_null_or_an(language, 2, "language")
        self.language = language

    def set_payment_brand(self, payment_brand: str | None) -> None:
        """Skip the method selection page and go straight to one brand.

        See `PaymentBrands` for the accepted values.
        """

        validate_null_or_an(payment_brand, 50, "payment_brand")
        self.payment_brand = payment_brand

    def set_payment_brand_force(self, payment_brand_force: str | None) -> None:
        """FORCE_ONCE or FORCE_ALWAYS; only sent along with a payment brand."""

        validate_null_or_an(payment_brand_force, 50, "payment_brand_force")
        self.payment_brand_force = payment_brand_force

    def new_items(self) -> OrderItems:
        """Attach a fresh, empty item collection and return it."""

        self.order_items = OrderItems()
        return self.order_items

    def set_order_items(self, order_items: OrderItems | None) -> None:
        _require_type(order_items, OrderItems, "order_items", nullable=True)
        self.order_items = order_items

    def set_shipping_detail(self, shipping_detail: Address | None) -> None:
        _require_type(shipping_detail, Address, "shipping_detail", nullable=True)
        self.shipping_detail = shipping_detail

    def set_billing_detail(self, billing_detail: Address | None) -> None:
        _require_type(billing_detail, Address, "billing_detail", nullable=True)
        self.billing_detail = billing_detail

    def set_customer_information(self, customer_information: CustomerInformation | None) -> None:
        _require_type(customer_information, CustomerInformation, "customer_information", nullable=True)
        self.customer_information = customer_information

    def formatted_timestamp(self) -> str:
        # e.g. 2018-06-12T10:20:30+02:00
        return self.timestamp.isoformat(timespec="seconds")

    def signature_fields(self) -> list[Any]:
        """Values hashed into the signature, in the order the gateway expects."""

        fields: list[Any] = [self.formatted_timestamp(), self.merchant_order_id]
        fields.extend(self.amount.signature_fields())
        fields.append(self.language)
        fields.append(self.description)
        fields.append(self.merchant_return_url)

        if self.order_items is not None:
            fields.extend(self.order_items.signature_fields())

        if self.shipping_detail is not None:
            fields.extend(self.shipping_detail.signature_fields())

        if self.payment_brand is not None:
            fields.append(self.payment_brand)

        if self.payment_brand_force is not None:
            fields.append(self.payment_brand_force)

        if self.customer_information is not None:
            fields.extend(self.customer_information.signature_fields())

        if self.billing_detail is not None:
            fields.extend(self.billing_detail.signature_fields())

        return fields

    def to_request_object(self, signing_key: str | None = None) -> dict[str, Any]:
        """Build the announce request body.

        Optional fields are left out when unset. When a key is passed or
        configured the order is (re)signed first; otherwise the signature from
        the last `sign()` call is emitted as is, None if never signed.
        """

        with order_context(self.merchant_order_id, self.amount.currency, self.amount.amount):
            if signing_key is not None or settings.signing_key is not None:
                self.sign(signing_key)
            else:
                logger.debug("no signing key, emitting stored signature")

            data: dict[str, Any] = {
                "timestamp": self.formatted_timestamp(),
                "merchantOrderId": self.merchant_order_id,
            }
            if self.description is not None:
                data["description"] = self.description
            if self.order_items is not None:
                data["orderItems"] = self.order_items.get_json()
            data["amount"] = self.amount.get_json()
            if self.shipping_detail is not None:
                data["shippingDetail"] = self.shipping_detail.get_json()
            if self.billing_detail is not None:
                data["billingDetail"] = self.billing_detail.get_json()
            if self.customer_information is not None:
                data["customerInformation"] = self.customer_information.get_json()
            if self.language is not None:
                data["language"] = self.language
            data["merchantReturnURL"] = self.merchant_return_url
            if self.payment_brand is not None:
                data["paymentBrand"] = self.payment_brand
            if self.payment_brand_force is not None:
                data["paymentBrandForce"] = self.payment_brand_force
            data["signature"] = self.signature

            logger.info("order request built items=%s", len(self.order_items) if self.order_items else 0)
            return data

    def to_json(self, signing_key: str | None = None) -> str:
        return json.dumps(self.to_request_object(signing_key))
