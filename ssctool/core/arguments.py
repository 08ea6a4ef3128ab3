"""Coercion of comma-separated argument literals into call arguments."""

from __future__ import annotations

import re
from typing import List, Union

from eth_utils import is_hex_address

from ssctool.core.errors import ArgumentError
from ssctool.core.types import Address

Argument = Union[Address, int, str]

_HEX_INT = re.compile(r"[+-]?[0-9a-fA-F]+")
_DEC_INT = re.compile(r"[+-]?[0-9]+")


def coerce_argument(token: str) -> Argument:
    """Sniff the type of a single argument literal.

    Addresses win over hex integers, hex integers over decimal integers, and
    anything left over is passed through as a string. A ``0x`` literal that is
    neither an address nor valid hex is an error rather than a string.
    """
    if is_hex_address(token):
        return Address(token)
    if token.startswith("0x"):
        digits = token[2:]
        if not _HEX_INT.fullmatch(digits):
            raise ArgumentError(f"Failed to parse hex argument: {token}")
        return int(digits, 16)
    if _DEC_INT.fullmatch(token):
        return int(token, 10)
    return token


def parse_arguments(raw: str) -> List[Argument]:
    """Split ``raw`` on commas and coerce every non-empty token in order."""
    if not raw:
        return []
    arguments: List[Argument] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        arguments.append(coerce_argument(token))
    return arguments


__all__ = ["Argument", "coerce_argument", "parse_arguments"]
