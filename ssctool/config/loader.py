"""Config loader for ssc-tool."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional

from web3 import Web3

DEFAULT_CONFIG_NAME = "ssctool.json"
DEFAULT_RPC_URL = "https://mainnet.infura.io/v3/YOUR_INFURA_PROJECT_ID"


class ConfigError(ValueError):
    """Raised when configuration data is invalid or missing."""


def _require_mapping(data: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{context} must be a JSON object")
    return data


def _to_checksum(value: str, *, field_name: str) -> str:
    try:
        return Web3.to_checksum_address(value)
    except Exception as exc:  # web3 raises ValueError for malformed inputs
        raise ConfigError(f"Invalid address for {field_name}: {value}") from exc


@dataclass(frozen=True)
class ContractAlias:
    """A named contract deployment."""

    label: str
    address: str


@dataclass(frozen=True)
class ToolConfig:
    """Typed wrapper around the ssc-tool configuration."""

    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = None
    contracts: Dict[str, ContractAlias] = field(default_factory=dict)
    common_functions: Dict[str, str] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def resolve_contract(self, value: str) -> str:
        """Return the address behind a contract label, or ``value`` unchanged."""
        alias = self.contracts.get(value)
        return alias.address if alias else value

    def resolve_function(self, value: str) -> str:
        """Return the function name behind a common-function label, or ``value`` unchanged."""
        return self.common_functions.get(value, value)

    def to_dict(self) -> Dict[str, Any]:
        """Return the original configuration mapping."""
        return dict(self.raw)


def _normalize_contracts(contracts: Any) -> Dict[str, ContractAlias]:
    result: Dict[str, ContractAlias] = {}
    for label, address in _require_mapping(contracts, "contracts").items():
        result[label] = ContractAlias(label=label, address=_to_checksum(address, field_name=f"contract {label}"))
    return result


def _normalize_functions(functions: Any) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for label, name in _require_mapping(functions, "common_functions").items():
        if not isinstance(name, str) or not name:
            raise ConfigError(f"common function {label} must map to a non-empty function name")
        result[label] = name
    return result


def _load_json(path: Path) -> MutableMapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file contains invalid JSON: {path}") from exc


def _load_bundled_defaults() -> MutableMapping[str, Any]:
    with resources.files(__package__).joinpath("defaults.json").open("r", encoding="utf-8") as fh:
        return json.load(fh)


def parse_config(data: Mapping[str, Any]) -> ToolConfig:
    """Validate a configuration mapping."""
    data = _require_mapping(data, "config")

    chain_id = data.get("chain_id")
    if chain_id is not None:
        try:
            chain_id = int(chain_id)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"chain_id must be an integer, got {chain_id!r}") from exc

    rpc_url = data.get("rpc_url") or DEFAULT_RPC_URL
    if not isinstance(rpc_url, str):
        raise ConfigError("rpc_url must be a string")

    return ToolConfig(
        rpc_url=rpc_url,
        chain_id=chain_id,
        contracts=_normalize_contracts(data.get("contracts", {})),
        common_functions=_normalize_functions(data.get("common_functions", {})),
        raw=data,
    )


def load_config(config_path: Optional[Path] = None) -> ToolConfig:
    """Load and validate ssc-tool configuration data.

    An explicit ``config_path`` must exist. Without one, ``ssctool.json`` in
    the working directory is used if present, and the bundled defaults
    otherwise.
    """
    if config_path is not None:
        return parse_config(_load_json(Path(config_path)))

    local = Path(DEFAULT_CONFIG_NAME)
    if local.is_file():
        return parse_config(_load_json(local))
    return parse_config(_load_bundled_defaults())


__all__ = [
    "ConfigError",
    "ContractAlias",
    "DEFAULT_RPC_URL",
    "ToolConfig",
    "load_config",
    "parse_config",
]
