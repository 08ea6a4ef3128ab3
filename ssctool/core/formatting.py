"""Rendering of decoded call results."""

from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, TextIO

from ssctool.core.types import Address, FixedInt

TOKEN_DECIMALS = 18
RESULT_INDENT = " " * len("Result[0]: ")


def format_decimal(value: int, decimals: int = TOKEN_DECIMALS) -> str:
    """Render ``value / 10**decimals`` exactly, without trailing zeros."""
    scale = 10**decimals
    int_part, frac_part = divmod(value, scale)
    frac_str = str(frac_part).zfill(decimals).rstrip("0")
    if frac_str:
        return f"{int_part}.{frac_str}"
    return str(int_part)


def format_value(value: Any, convert: bool = False) -> List[str]:
    """Return the display lines for one decoded value."""
    # bool and FixedInt before int, Address before str: all are subclasses.
    if isinstance(value, bool):
        return [f"{'true' if value else 'false'} (bool)"]
    if isinstance(value, FixedInt):
        return [f"{int(value)} (type: {value.abi_type})"]
    if isinstance(value, int):
        lines = [f"{value} (big.Int)"]
        if convert and value > 0:
            lines.append(f"= {format_decimal(value)} (decimal)")
        return lines
    if isinstance(value, Address):
        return [f"{value} (address)"]
    if isinstance(value, str):
        return [f"{value} (string)"]
    if isinstance(value, (bytes, bytearray)):
        return [f"0x{bytes(value).hex()} (bytes)"]
    return [f"{value} (type: {type(value).__name__})"]


def format_results(results: Sequence[Any], convert: bool = False) -> List[str]:
    """Render every result with its positional ``Result[i]`` prefix."""
    lines: List[str] = []
    for index, value in enumerate(results):
        first, *rest = format_value(value, convert=convert)
        lines.append(f"Result[{index}]: {first}")
        lines.extend(f"{RESULT_INDENT}{line}" for line in rest)
    return lines


def print_results(results: Sequence[Any], convert: bool = False, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    for line in format_results(results, convert=convert):
        print(line, file=stream)


__all__ = ["TOKEN_DECIMALS", "format_decimal", "format_results", "format_value", "print_results"]
