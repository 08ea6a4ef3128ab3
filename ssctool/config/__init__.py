"""Configuration utilities for ssc-tool."""

from .loader import (
    DEFAULT_RPC_URL,
    ConfigError,
    ContractAlias,
    ToolConfig,
    load_config,
    parse_config,
)

__all__ = [
    "ConfigError",
    "ContractAlias",
    "DEFAULT_RPC_URL",
    "ToolConfig",
    "load_config",
    "parse_config",
]
