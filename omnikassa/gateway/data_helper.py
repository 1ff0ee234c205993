"""Field format checks for OmniKassa message values.

The OmniKassa API describes string fields as `AN..max N`: alphanumeric,
length 1 up to N. In practice the gateway accepts the full character set, so
only type and length are enforced here. Lengths are counted in characters,
not UTF-8 bytes.
"""

from omnikassa.gateway.errors import FormatError


def validate_an(value: str, max_length: int, field: str = "value") -> bool:
    """Raise `FormatError` unless `value` is a string of 1..max_length characters."""

    if not isinstance(value, str):
        raise FormatError(f"{field} must be a string, got {type(value).__name__}")
    if len(value) == 0:
        raise FormatError(f"{field} must not be empty (AN..max {max_length})")
    if len(value) > max_length:
        raise FormatError(f"{field} exceeds {max_length} characters (AN..max {max_length}): {len(value)}")
    return True


def validate_null_or_an(value: str | None, max_length: int, field: str = "value") -> bool:
    """Same as `validate_an`, but `None` always passes."""

    if value is None:
        return True
    return validate_an(value, max_length, field)


def shorten(string: str, max_length: int) -> str:
    """Cut `string` to at most `max_length` characters."""

    max_length = max(max_length, 0)
    if len(string) > max_length:
        return string[:max_length]
    return string
