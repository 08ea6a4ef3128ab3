import logging

import pytest
from web3 import Web3

from ssctool.core.utils import ensure_web3_connected, get_logger, hex_to_bytes, make_web3, set_log_level


def test_make_web3_http():
    web3 = make_web3("https://mainnet.storyrpc.io")
    assert isinstance(web3.provider, Web3.HTTPProvider)


@pytest.mark.parametrize("name", ["geth.ipc", "geth_socket"])
def test_make_web3_ipc(tmp_path, name):
    web3 = make_web3(str(tmp_path / name))
    assert isinstance(web3.provider, Web3.IPCProvider)


@pytest.mark.parametrize("url", ["ftp://node", "ws://node", "wss://node", "localhost:8545"])
def test_make_web3_rejects_other_endpoints(url):
    with pytest.raises(ConnectionError, match="Unsupported RPC endpoint"):
        make_web3(url)


def test_ensure_web3_connected(provider, w3):
    ensure_web3_connected(w3, expected_chain_id=1)
    with pytest.raises(ValueError, match="chain ID mismatch"):
        ensure_web3_connected(w3, expected_chain_id=1514)
    provider.connected = False
    with pytest.raises(ConnectionError):
        ensure_web3_connected(w3)


def test_hex_to_bytes():
    assert hex_to_bytes("0xcafe") == b"\xca\xfe"
    assert hex_to_bytes("cafe") == b"\xca\xfe"


def test_set_log_level():
    logger = get_logger("ssctool.test")
    assert logger.level == logging.WARNING
    set_log_level(logging.DEBUG)
    try:
        assert logger.level == logging.DEBUG
    finally:
        set_log_level(logging.WARNING)


def test_chain_id_transport_errors_become_connection_errors(provider, w3):
    provider.chain_id_error = OSError("broken pipe")
    with pytest.raises(ConnectionError, match="Failed to read chain ID: broken pipe"):
        ensure_web3_connected(w3, expected_chain_id=1)
    ensure_web3_connected(w3)
