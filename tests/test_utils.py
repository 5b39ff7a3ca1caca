"""
Tests for the address and integer wire-format helpers.
"""
import pytest

from guilds_sdk.exceptions import ErrorKind, GuildsSdkError
from guilds_sdk.utils import assert_address, encode_integer, encode_length, is_hex_address, validate_address


@pytest.mark.parametrize("value", ["0x1234", "0xabcdef", "0xABCDEF", "0x00", "0xaB"])
def test_is_hex_address_accepts(value):
    assert is_hex_address(value) is True


@pytest.mark.parametrize("value", [
    "not-an-address",
    "0x",
    "0x1",      # below the 4 character minimum
    "1234",
    "0x12g4",
    "0X1234",
    " 0x1234",
    "",
    None,
    1234,
])
def test_is_hex_address_rejects(value):
    assert is_hex_address(value) is False


def test_assert_address_returns_value():
    assert assert_address("0xabc", "factory") == "0xabc"


def test_assert_address_invalid():
    """Invalid addresses raise INVALID_INPUT naming the field"""
    with pytest.raises(GuildsSdkError, match="Invalid address for factory: bad") as exc_info:
        assert_address("bad", "factory")
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_validate_address():
    assert validate_address("0xfff") == "0xfff"
    with pytest.raises(GuildsSdkError) as exc_info:
        validate_address("0xzz")
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("value, expected", [
    (0, "0x0"),
    (1, "0x1"),
    (255, "0xff"),
    (256, "0x100"),
    (2**128, "0x1" + "0" * 32),
])
def test_encode_integer(value, expected):
    assert encode_integer(value) == expected


def test_encode_integer_negative():
    with pytest.raises(GuildsSdkError, match="deposit_amount must be >= 0") as exc_info:
        encode_integer(-1, "deposit_amount")
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("value", [True, 1.5, "10", None])
def test_encode_integer_non_integer(value):
    with pytest.raises(GuildsSdkError) as exc_info:
        encode_integer(value)
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_encode_length():
    assert encode_length([]) == "0x0"
    assert encode_length(["0x1"] * 17) == "0x11"
