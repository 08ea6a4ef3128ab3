#!/usr/bin/env python3
"""Decode raw eth_call return data with an ABI file and print it like the CLI does."""

import argparse
from pathlib import Path
import sys

SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ssctool.core.abi import resolve_abi_text
from ssctool.core.caller import decode_output
from ssctool.core.errors import ToolError
from ssctool.core.formatting import print_results


def main() -> None:
    parser = argparse.ArgumentParser(description="Decode eth_call return data for a contract function")
    parser.add_argument("function", help="Function name whose outputs describe the data")
    parser.add_argument("data", help="Hex-encoded return data")
    parser.add_argument("--abi", default="", help="Path to ABI JSON file")
    parser.add_argument("--type", dest="contract_type", default="generic", help="Bundled ABI to use without --abi")
    parser.add_argument("--convert", action="store_true", help="Also print integers divided by 10^18")
    args = parser.parse_args()

    try:
        abi_text = resolve_abi_text(args.contract_type, args.function, args.abi or None)
        results = decode_output(abi_text, args.function, args.data)
    except ToolError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Function: {args.function}")
    print_results(results, convert=args.convert)


if __name__ == "__main__":
    main()
