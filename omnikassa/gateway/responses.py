"""Messages received from OmniKassa: announce responses and return parameters."""

from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnikassa.common.config import settings
from omnikassa.common.logging import logger
from omnikassa.gateway.errors import FormatError
from omnikassa.gateway.security import get_signature, validate_signature


class OrderStatus:
    """Statuses reported on the merchant return URL."""

    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    IN_PROGRESS = "IN_PROGRESS"


class SignedResponse(BaseModel):
    """Abstract incoming message carrying a signature over `signature_fields()`."""

    signature: str = Field(min_length=1)

    @abstractmethod
    def signature_fields(self) -> list[Any]:
        """Ordered values hashed into the signature."""

    def is_valid(self, signing_key: str | None = None) -> bool:
        key = signing_key if signing_key is not None else settings.signing_key
        valid = validate_signature(self.signature, get_signature(self.signature_fields(), key))
        if not valid:
            logger.warning("response signature mismatch type=%s", type(self).__name__)
        return valid


class OrderAnnounceResponse(SignedResponse):
    """Answer to an order announcement; the consumer is sent to `redirect_url`."""

    model_config = ConfigDict(populate_by_name=True)

    redirect_url: str = Field(alias="redirectUrl", min_length=1)
    omnikassa_order_id: str = Field(alias="omnikassaOrderId", min_length=1)

    @classmethod
    def from_json(cls, data: dict[str, Any] | str) -> "OrderAnnounceResponse":
        try:
            if isinstance(data, str):
                return cls.model_validate_json(data)
            return cls.model_validate(data)
        except ValidationError as exc:
            raise FormatError(f"invalid order announce response: {exc}") from exc

    def signature_fields(self) -> list[Any]:
        return [self.redirect_url, self.omnikassa_order_id]


class ReturnParameters(SignedResponse):
    """Query parameters appended to the merchant return URL."""

    order_id: str = Field(min_length=1)
    status: str = Field(min_length=1)

    @classmethod
    def from_query(cls, params: dict[str, Any]) -> "ReturnParameters":
        """Parse e.g. `request.args`; extra parameters are ignored."""

        try:
            return cls.model_validate(
                {
                    "order_id": params.get("order_id"),
                    "status": params.get("status"),
                    "signature": params.get("signature"),
                }
            )
        except ValidationError as exc:
            raise FormatError(f"invalid return parameters: {exc}") from exc

    def signature_fields(self) -> list[Any]:
        return [self.order_id, self.status]

    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED
