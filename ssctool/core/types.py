"""Value types passed between the coercer, the caller and the formatter."""

from __future__ import annotations

from web3 import Web3


class Address(str):
    """A 20-byte account address, always held in checksummed form.

    Being a ``str`` it is accepted by web3 wherever an address is expected,
    while still letting the formatter tell addresses and plain strings apart.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> "Address":
        return super().__new__(cls, Web3.to_checksum_address(value))

    def __repr__(self) -> str:
        return f"Address({str.__repr__(self)})"


class FixedInt(int):
    """An integer decoded from a machine-width ABI type (``uint8`` .. ``int64``)."""

    abi_type: str

    def __new__(cls, value: int, abi_type: str) -> "FixedInt":
        obj = super().__new__(cls, value)
        obj.abi_type = abi_type
        return obj

    def __repr__(self) -> str:
        return f"FixedInt({int(self)}, {self.abi_type!r})"


__all__ = ["Address", "FixedInt"]
