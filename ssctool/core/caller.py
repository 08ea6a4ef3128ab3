"""Generic read-only contract binding."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Sequence

from eth_abi import decode as abi_decode
from web3 import Web3
from web3.contract import Contract

from ssctool.core.abi import find_function, parse_abi
from ssctool.core.errors import AbiError, ContractCallError
from ssctool.core.types import Address, FixedInt
from ssctool.core.utils import get_logger, hex_to_bytes

LOGGER = get_logger("ssctool.caller")

_FIXED_WIDTH_INT = re.compile(r"u?int(8|16|32|64)")


def _collapse_type(param: Dict[str, Any]) -> str:
    abi_type = param["type"]
    if abi_type.startswith("tuple"):
        inner = ",".join(_collapse_type(component) for component in param.get("components", []))
        return f"({inner}){abi_type[len('tuple'):]}"
    return abi_type


def _tag_outputs(outputs: Sequence[Dict[str, Any]], values: Sequence[Any]) -> List[Any]:
    tagged: List[Any] = []
    for param, value in zip(outputs, values):
        abi_type = param.get("type", "")
        if abi_type == "address" and isinstance(value, str):
            value = Address(value)
        elif _FIXED_WIDTH_INT.fullmatch(abi_type) and isinstance(value, int) and not isinstance(value, bool):
            value = FixedInt(value, abi_type)
        tagged.append(value)
    return tagged


def normalize_results(outputs: Sequence[Dict[str, Any]], raw: Any) -> List[Any]:
    """Turn a web3 call result into one list entry per declared output.

    web3 unwraps single-output functions, so the declared outputs decide
    whether ``raw`` is one value or a sequence of values.
    """
    if len(outputs) == 1:
        values = [raw]
    elif raw is None:
        values = []
    else:
        values = list(raw)
    return _tag_outputs(outputs, values)


class GenericContract:
    """A contract bound to an arbitrary ABI, exposing its view functions."""

    def __init__(self, address: str, abi_text: str, web3: Web3) -> None:
        self.abi = parse_abi(abi_text)
        self.address = Address(address)
        self.web3 = web3
        try:
            self.contract: Contract = web3.eth.contract(address=self.address, abi=self.abi)
        except Exception as exc:  # web3 validates the ABI shape when binding
            raise AbiError(f"Failed to parse ABI: {exc}") from exc

    def call_view_function(self, function_name: str, *args: Any) -> List[Any]:
        """Run a single ``eth_call`` and return the decoded outputs."""
        if find_function(self.abi, function_name) is None:
            raise ContractCallError(f"Failed to call function '{function_name}': method not found in ABI")

        LOGGER.debug("Calling %s.%s with %r", self.address, function_name, args)
        try:
            # web3 picks the overload from the argument types.
            function = self.contract.functions[function_name](*args)
            raw = function.call()
        except Exception as exc:
            raise ContractCallError(f"Failed to call function '{function_name}': {exc}") from exc
        return normalize_results(function.abi.get("outputs", []), raw)


def decode_output(abi_text: str, function_name: str, data: str) -> List[Any]:
    """Decode raw ``eth_call`` return data for ``function_name`` offline."""
    entry = find_function(parse_abi(abi_text), function_name)
    if entry is None:
        raise AbiError(f"Function '{function_name}' not found in ABI")
    outputs = entry.get("outputs", [])
    types = [_collapse_type(param) for param in outputs]
    try:
        values = abi_decode(types, hex_to_bytes(data))
    except Exception as exc:
        raise ContractCallError(f"Failed to decode output of '{function_name}': {exc}") from exc
    return _tag_outputs(outputs, values)


__all__ = ["GenericContract", "decode_output", "normalize_results"]
