"""CLI entrypoint for calling a read-only contract function."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional

from dotenv import load_dotenv
from eth_utils import is_hex_address
from web3 import Web3

from ssctool.config import ConfigError, ToolConfig, load_config
from ssctool.core.abi import resolve_abi_text
from ssctool.core.arguments import parse_arguments
from ssctool.core.caller import GenericContract
from ssctool.core.errors import ToolError
from ssctool.core.formatting import print_results
from ssctool.core.types import Address
from ssctool.core.utils import ensure_web3_connected, get_logger, make_web3, set_log_level

LOGGER = get_logger("ssctool.cli")

load_dotenv()

PROG = "ssc-tool"

EXAMPLES = f"""
Examples:
  Call a function without arguments:
    {PROG} -contract=0x123... -function=totalSupply -type=erc20

  Call a function with an address argument:
    {PROG} -contract=0x123... -function=balanceOf -type=erc20 -args=0x456...
  Call a function and convert result to decimal:
    {PROG} -contract=0x123... -function=balanceOf -type=erc20 -args=0x456... -convert
"""


@dataclass(frozen=True)
class InvocationRequest:
    """Everything needed for one view call."""

    contract_address: str
    function_name: str
    contract_type: str
    abi_path: Optional[str]
    raw_args: str
    rpc_url: str
    convert: bool
    expected_chain_id: Optional[int] = None


class ContractCallRunner:
    """Drives the connect, bind, call and print cycle for one request."""

    def __init__(
        self,
        request: InvocationRequest,
        *,
        web3_factory: Callable[[str], Web3] = make_web3,
    ) -> None:
        self.request = request
        self.web3_factory = web3_factory

    def connect(self) -> Web3:
        web3 = self.web3_factory(self.request.rpc_url)
        try:
            ensure_web3_connected(web3, expected_chain_id=self.request.expected_chain_id)
        except ConnectionError as exc:
            raise ConnectionError(f"Failed to connect to the Ethereum client at {self.request.rpc_url}: {exc}") from exc
        print(f"Connected to Ethereum node at {self.request.rpc_url}")
        return web3

    def run(self) -> List[Any]:
        """Execute the request and print the results."""
        request = self.request
        web3 = self.connect()

        contract_address = Address(request.contract_address)
        print(f"Using contract address: {contract_address}")

        abi_text = resolve_abi_text(request.contract_type, request.function_name, request.abi_path)
        contract = GenericContract(contract_address, abi_text, web3)

        function_args = parse_arguments(request.raw_args)
        LOGGER.debug("Coerced arguments: %r", function_args)

        print(f"Calling function '{request.function_name}' with {len(function_args)} arguments")
        results = contract.call_view_function(request.function_name, *function_args)

        print("Function returned successfully!")
        print_results(results, convert=request.convert)
        return results


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=(
            f"{PROG} -contract=0xContractAddress -function=functionName [-rpc=https://your-ethereum-node] "
            "[-type=erc20|storage|generic] [-abi=path/to/abi.json] [-args=arg1,arg2,...] [-convert]"
        ),
        description="Call a read-only smart contract function and print the decoded result.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-contract", "--contract", default="", help="Smart contract address or configured label (required)")
    parser.add_argument("-function", "--function", default="", help="Smart contract function name to call (required)")
    parser.add_argument("-rpc", "--rpc", default="", help="Ethereum RPC URL (defaults to $RPC_URL, then the config)")
    parser.add_argument("-type", "--type", dest="contract_type", default="generic", help="Contract type (erc20, storage, generic)")
    parser.add_argument("-abi", "--abi", default="", help="Path to ABI JSON file (optional)")
    parser.add_argument("-args", "--args", dest="call_args", default="", help="Function arguments (comma separated)")
    parser.add_argument(
        "-convert",
        "--convert",
        action="store_true",
        help="Convert integer results to decimal using a 10^18 denominator (for tokens)",
    )
    parser.add_argument("-config", "--config", default=None, help="Path to a JSON config file")
    parser.add_argument("-list-contracts", "--list-contracts", action="store_true", help="List configured contract labels")
    parser.add_argument("-list-functions", "--list-functions", action="store_true", help="List configured common functions")
    parser.add_argument("-verbose", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-help", "--help", "-h", dest="show_help", action="store_true", help="Display help information")
    return parser


def _parse_args(parser: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> argparse.Namespace:
    return parser.parse_args(argv)


def _fail(message: str, parser: Optional[argparse.ArgumentParser] = None) -> None:
    print(f"Error: {message}", file=sys.stderr)
    if parser is not None:
        parser.print_help(sys.stderr)
    sys.exit(1)


def _print_aliases(title: str, entries: dict) -> None:
    print(f"{title}:")
    width = max((len(label) for label in entries), default=0)
    for label in sorted(entries):
        print(f"  {label.ljust(width)}  {entries[label]}")


def _resolve_rpc_url(cli_value: str, config: ToolConfig) -> str:
    rpc_url_env = os.getenv("RPC_URL") or ""
    return cli_value.strip() or rpc_url_env.strip() or config.rpc_url


def main(
    argv: Optional[List[str]] = None,
    *,
    web3_factory: Callable[[str], Web3] = make_web3,
) -> None:
    parser = _build_parser()
    args = _parse_args(parser, argv)

    if args.show_help:
        parser.print_help(sys.stderr)
        sys.exit(0)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        _fail(str(exc))

    if args.list_contracts or args.list_functions:
        if args.list_contracts:
            _print_aliases("Available contracts", {label: alias.address for label, alias in config.contracts.items()})
        if args.list_functions:
            _print_aliases("Common functions", config.common_functions)
        sys.exit(0)

    if not args.contract:
        _fail("Contract address is required", parser)
    if not args.function:
        _fail("Function name is required", parser)

    contract_address = config.resolve_contract(args.contract)
    if not is_hex_address(contract_address):
        _fail(f"Invalid contract address format: {args.contract}")

    request = InvocationRequest(
        contract_address=contract_address,
        function_name=config.resolve_function(args.function),
        contract_type=args.contract_type,
        abi_path=args.abi or None,
        raw_args=args.call_args,
        rpc_url=_resolve_rpc_url(args.rpc, config),
        convert=args.convert,
        expected_chain_id=config.chain_id,
    )

    try:
        ContractCallRunner(request, web3_factory=web3_factory).run()
    except (ToolError, ConnectionError, ValueError) as exc:
        LOGGER.debug("Call failed", exc_info=True)
        _fail(str(exc))


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
