"""Core domain logic for ssc-tool."""

from .abi import parse_abi, read_abi_file, resolve_abi_text, select_abi
from .arguments import coerce_argument, parse_arguments
from .caller import GenericContract, decode_output
from .errors import AbiError, ArgumentError, ContractCallError, ToolError
from .formatting import format_decimal, format_results, format_value, print_results
from .types import Address, FixedInt

__all__ = [
    "AbiError",
    "Address",
    "ArgumentError",
    "ContractCallError",
    "FixedInt",
    "GenericContract",
    "ToolError",
    "coerce_argument",
    "decode_output",
    "format_decimal",
    "format_results",
    "format_value",
    "parse_abi",
    "parse_arguments",
    "print_results",
    "read_abi_file",
    "resolve_abi_text",
    "select_abi",
]
