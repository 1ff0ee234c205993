"""Signature computation for OmniKassa messages.

The gateway signs the comma separated signature fields of a message with
HMAC-SHA512, keyed with the base64 decoded signing key, and expects the hex
digest.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Any

from omnikassa.gateway.errors import SignatureError


def _field_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def signature_input(fields: list[Any]) -> str:
    """Join signature fields the way the gateway does before hashing."""

    return ",".join(_field_value(value) for value in fields)


def decode_signing_key(signing_key: str | None) -> bytes:
    if not signing_key:
        raise SignatureError("signing key is not configured")
    try:
        return base64.b64decode(signing_key, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureError("signing key is not valid base64") from exc


def get_signature(fields: list[Any], signing_key: str | None) -> str:
    """Return the hex HMAC-SHA512 signature of `fields`."""

    key = decode_signing_key(signing_key)
    return hmac.new(key, signature_input(fields).encode("utf-8"), hashlib.sha512).hexdigest()


def validate_signature(signature_a: str | None, signature_b: str | None) -> bool:
    """Constant-time comparison of two hex signatures."""

    if not signature_a or not signature_b:
        return False
    return hmac.compare_digest(signature_a.lower(), signature_b.lower())
