"""Abstract base for signed OmniKassa request messages."""

from abc import ABC, abstractmethod
from typing import Any

from omnikassa.common.config import settings
from omnikassa.common.logging import logger
from omnikassa.gateway.security import get_signature, validate_signature


class Message(ABC):
    """A message whose integrity is protected by a signature over its fields.

    Subclasses define `signature_fields()`, the canonical ordered list of
    values the gateway hashes. The order is part of the protocol.
    """

    def __init__(self) -> None:
        self.signature: str | None = None

    @abstractmethod
    def signature_fields(self) -> list[Any]:
        """Ordered values hashed into the signature."""

    def sign(self, signing_key: str | None = None) -> str:
        """Compute, store and return the signature.

        Falls back to the configured signing key when none is passed.
        """

        key = signing_key if signing_key is not None else settings.signing_key
        self.signature = get_signature(self.signature_fields(), key)
        logger.debug("message signed type=%s", type(self).__name__)
        return self.signature

    def is_valid(self, signing_key: str | None = None) -> bool:
        """Check the stored signature against the current fields."""

        key = signing_key if signing_key is not None else settings.signing_key
        expected = get_signature(self.signature_fields(), key)
        valid = validate_signature(self.signature, expected)
        if not valid:
            logger.warning("signature mismatch type=%s", type(self).__name__)
        return valid
