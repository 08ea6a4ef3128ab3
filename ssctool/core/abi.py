"""ABI fragment selection and parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ssctool.contracts import load_contract_abi_text
from ssctool.core.errors import AbiError
from ssctool.core.utils import get_logger

LOGGER = get_logger("ssctool.abi")

FUNCTION_PLACEHOLDER = "FUNCTION_PLACEHOLDER"

CONTRACT_TYPES: Dict[str, str] = {
    "erc20": "erc20.json",
    "storage": "storage.json",
}
GENERIC_ABI_FILE = "generic.json"


def select_abi(contract_type: str, function_name: str) -> str:
    """Return the bundled ABI fragment for ``contract_type``.

    Unknown types (``generic`` and the empty string included) get a single
    view function named ``function_name`` that takes no arguments and returns
    one ``uint256``. The return type is never inferred; functions returning
    anything else will fail to decode.
    """
    filename = CONTRACT_TYPES.get(contract_type)
    if filename is not None:
        return load_contract_abi_text(filename)
    LOGGER.debug("Contract type %r not bundled, using generic fragment for %s", contract_type, function_name)
    return load_contract_abi_text(GENERIC_ABI_FILE).replace(FUNCTION_PLACEHOLDER, function_name, 1)


def read_abi_file(path: Union[str, Path]) -> str:
    """Return the contents of an ABI file verbatim."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise AbiError(f"Failed to read ABI file {path}: {exc}") from exc


def resolve_abi_text(contract_type: str, function_name: str, abi_path: Optional[Union[str, Path]] = None) -> str:
    """Pick the ABI text for a call; an ABI file overrides the contract type."""
    if abi_path:
        LOGGER.info("Loading ABI from %s", abi_path)
        return read_abi_file(abi_path)
    return select_abi(contract_type, function_name)


def parse_abi(text: str) -> List[Dict[str, Any]]:
    """Decode ABI JSON into a list of entries.

    Compiler artifacts (``{"abi": [...], ...}``) are unwrapped.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AbiError(f"Failed to parse ABI: {exc}") from exc

    if isinstance(data, dict) and isinstance(data.get("abi"), list):
        data = data["abi"]
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise AbiError("Failed to parse ABI: expected a JSON array of ABI entries")
    return data


def find_function(abi: List[Dict[str, Any]], function_name: str, arg_count: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """Return the ABI entry for ``function_name``, preferring a matching arity."""
    candidates = [
        entry for entry in abi if entry.get("type", "function") == "function" and entry.get("name") == function_name
    ]
    if arg_count is not None:
        for entry in candidates:
            if len(entry.get("inputs", [])) == arg_count:
                return entry
    return candidates[0] if candidates else None


__all__ = [
    "CONTRACT_TYPES",
    "FUNCTION_PLACEHOLDER",
    "find_function",
    "parse_abi",
    "read_abi_file",
    "resolve_abi_text",
    "select_abi",
]
