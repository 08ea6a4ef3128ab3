"""Contract ABIs shipped with ssc-tool."""

from importlib import resources


def load_contract_abi_text(filename: str) -> str:
    """Return the raw text of an ABI JSON file from the contracts package."""
    return resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")


__all__ = ["load_contract_abi_text"]
