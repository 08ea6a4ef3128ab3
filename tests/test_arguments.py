import pytest
from web3 import Web3

from ssctool.core.arguments import coerce_argument, parse_arguments
from ssctool.core.errors import ArgumentError
from ssctool.core.types import Address

HOLDER = "0x3EF98543F9772DC959255545B717a61D408e7b61"


@pytest.mark.parametrize(
    "token",
    [
        HOLDER,
        HOLDER.lower(),
        HOLDER.upper().replace("0X", "0x"),
        HOLDER[2:],
        "0X" + HOLDER[2:].lower(),
    ],
)
def test_hex_addresses_become_checksummed_addresses(token):
    value = coerce_argument(token)
    assert isinstance(value, Address)
    assert value == Web3.to_checksum_address(HOLDER)


def test_short_hex_literal_is_an_integer():
    assert coerce_argument("0xff") == 255
    assert coerce_argument("0x0") == 0


def test_hex_literal_longer_than_an_address_is_an_integer():
    value = coerce_argument("0x" + "1" * 41)
    assert value == int("1" * 41, 16)
    assert not isinstance(value, Address)


@pytest.mark.parametrize("token", ["0x", "0xzz", "0x12g4"])
def test_invalid_hex_literal_is_fatal(token):
    with pytest.raises(ArgumentError, match="Failed to parse hex argument"):
        coerce_argument(token)


def test_uppercase_hex_prefix_is_not_treated_as_hex():
    assert coerce_argument("0XFF") == "0XFF"


def test_decimal_literals_become_integers():
    assert coerce_argument("42") == 42
    assert coerce_argument("-7") == -7
    assert coerce_argument("115792089237316195423570985008687907853269984665640564039457584007913129639935") == 2**256 - 1


@pytest.mark.parametrize("token", ["hello", "1.5", "1_000", "12abc", "vitalik.eth"])
def test_everything_else_is_a_string(token):
    value = coerce_argument(token)
    assert value == token
    assert type(value) is str


def test_parse_arguments_keeps_order_and_trims():
    args = parse_arguments("0x3EF98543F9772DC959255545B717a61D408e7b61,42")
    assert args == [Web3.to_checksum_address(HOLDER), 42]
    assert isinstance(args[0], Address)

    assert parse_arguments("  foo , 0x10 ,7 ") == ["foo", 16, 7]


def test_parse_arguments_empty_input():
    assert parse_arguments("") == []
    assert parse_arguments(" , ") == []


def test_parse_arguments_propagates_hex_errors():
    with pytest.raises(ArgumentError):
        parse_arguments("1,0xnope")
