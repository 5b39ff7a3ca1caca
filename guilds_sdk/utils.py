"""
Utility functions for the Guilds SDK wire format.
"""
import re
from typing import Any, Sized

from .exceptions import ErrorKind, GuildsSdkError

_HEX_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]+$")
MIN_ADDRESS_LENGTH = 4


def is_hex_address(value: Any) -> bool:
    """
    Check whether a value is a 0x-prefixed hex address.

    Args:
        value: Value to check

    Returns:
        True if the value is a string of at least 4 characters matching ``0x[0-9a-fA-F]+``
    """
    if not isinstance(value, str):
        return False
    return bool(_HEX_ADDRESS_RE.match(value)) and len(value) >= MIN_ADDRESS_LENGTH


def assert_address(value: Any, field_name: str) -> str:
    """
    Validate an address at a call boundary.

    Args:
        value: Raw address
        field_name: Name reported in the error message

    Returns:
        The address, unchanged

    Raises:
        GuildsSdkError: INVALID_INPUT if the value is not a hex address
    """
    if not is_hex_address(value):
        raise GuildsSdkError(ErrorKind.INVALID_INPUT, f"Invalid address for {field_name}: {value}")
    return value


def validate_address(raw: Any) -> str:
    """Validate ``raw`` as an address without a field label."""
    return assert_address(raw, "address")


def encode_integer(value: Any, field_name: str = "value") -> str:
    """
    Encode a non-negative integer as a hex word.

    Args:
        value: Integer to encode
        field_name: Name reported in the error message

    Returns:
        ``0x`` followed by lowercase hex digits, ``0x0`` for zero

    Raises:
        GuildsSdkError: INVALID_INPUT for negative or non-integer values
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise GuildsSdkError(
            ErrorKind.INVALID_INPUT,
            f"{field_name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise GuildsSdkError(ErrorKind.INVALID_INPUT, f"{field_name} must be >= 0, got {value}")
    return f"0x{value:x}"


def encode_length(items: Sized) -> str:
    """Encode the element count of an array as its length-prefix word."""
    return f"0x{len(items):x}"
