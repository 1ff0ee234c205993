"""Errors raised while building, signing and parsing OmniKassa messages."""


class FormatError(ValueError):
    """A field value does not match its OmniKassa format, e.g. `AN..max 10`."""


class SignatureError(ValueError):
    """Signing key is missing or cannot be decoded."""
