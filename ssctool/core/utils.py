"""Utility helpers shared across ssc-tool core modules."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from web3 import Web3


def get_logger(name: str = "ssctool") -> logging.Logger:
    """Return a configured logger that prints to stderr."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def set_log_level(level: int) -> None:
    """Apply ``level`` to every ``ssctool`` logger created so far."""
    manager = logging.Logger.manager
    for name, logger in list(manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and (name == "ssctool" or name.startswith("ssctool.")):
            logger.setLevel(level)


LOGGER = get_logger("ssctool.utils")


def make_web3(rpc_url: str) -> Web3:
    """Build a ``Web3`` instance for an HTTP(S) endpoint or a local IPC socket."""
    parsed = urlparse(rpc_url)
    if parsed.scheme in ("http", "https"):
        LOGGER.debug("Using HTTP provider for %s", rpc_url)
        return Web3(Web3.HTTPProvider(rpc_url))
    if not parsed.scheme:
        LOGGER.debug("Using IPC provider for %s", rpc_url)
        return Web3(Web3.IPCProvider(rpc_url))
    raise ConnectionError(f"Unsupported RPC endpoint: {rpc_url}")


def ensure_web3_connected(web3: Web3, *, expected_chain_id: Optional[int] = None) -> None:
    """Validate that ``web3`` is connected and optionally matches the expected chain id."""
    if not web3.is_connected():
        raise ConnectionError("Failed to connect to the configured RPC endpoint")
    if expected_chain_id is None:
        return
    try:
        chain_id = web3.eth.chain_id
    except Exception as exc:  # transport errors differ per provider
        raise ConnectionError(f"Failed to read chain ID: {exc}") from exc
    if chain_id != expected_chain_id:
        raise ValueError(f"RPC chain ID mismatch: expected {expected_chain_id}, got {chain_id}")


def hex_to_bytes(data: str) -> bytes:
    """Convert a hex string (with or without ``0x``) to bytes."""
    data = data[2:] if data.startswith(("0x", "0X")) else data
    return bytes.fromhex(data)


__all__ = [
    "ensure_web3_connected",
    "get_logger",
    "hex_to_bytes",
    "make_web3",
    "set_log_level",
]
