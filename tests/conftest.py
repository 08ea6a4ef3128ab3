from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from eth_abi import encode as eth_abi_encode
from web3 import Web3
from web3.providers.base import BaseProvider

TOKEN = "0x1514000000000000000000000000000000000000"
HOLDER = "0x3EF98543F9772DC959255545B717a61D408e7b61"


class FakeRPCProvider(BaseProvider):
    """In-process JSON-RPC provider answering ``eth_call`` from a queue."""

    def __init__(self, connected: bool = True) -> None:
        super().__init__()
        self.connected = connected
        self.chain_id_error: Optional[Exception] = None
        self.responses: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def queue_result(self, types: List[str], values: List[Any]) -> None:
        self.responses.append({"result": "0x" + eth_abi_encode(types, values).hex()})

    def queue_raw(self, data: str) -> None:
        self.responses.append({"result": data})

    def queue_error(self, message: str, code: int = -32000) -> None:
        self.responses.append({"error": {"code": code, "message": message}})

    def make_request(self, method, params):
        if method == "eth_chainId":
            if self.chain_id_error is not None:
                raise self.chain_id_error
            return {"jsonrpc": "2.0", "id": 1, "result": "0x1"}
        if method == "eth_getCode":
            return {"jsonrpc": "2.0", "id": 1, "result": "0x"}
        if method != "eth_call":
            return {"jsonrpc": "2.0", "id": 1, "result": None}
        self.calls.append({"method": method, "params": params})
        response = self.responses.pop(0)
        return {"jsonrpc": "2.0", "id": 1, **response}

    def is_connected(self, show_traceback: bool = False) -> bool:
        return self.connected


@pytest.fixture
def provider() -> FakeRPCProvider:
    return FakeRPCProvider()


@pytest.fixture
def w3(provider: FakeRPCProvider) -> Web3:
    return Web3(provider)


@pytest.fixture
def web3_factory(w3: Web3):
    urls: List[str] = []

    def factory(url: str) -> Web3:
        urls.append(url)
        return w3

    factory.urls = urls
    return factory


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    monkeypatch.delenv("RPC_URL", raising=False)
    monkeypatch.chdir(tmp_path)
