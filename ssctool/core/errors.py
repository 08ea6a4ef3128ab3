"""Exceptions raised by the core modules."""


class ToolError(Exception):
    """Base class for failures that end an ssc-tool run."""


class AbiError(ToolError):
    """Raised when an ABI cannot be read or parsed."""


class ArgumentError(ToolError, ValueError):
    """Raised when a function argument literal cannot be coerced."""


class ContractCallError(ToolError):
    """Raised when the remote view call fails."""


__all__ = ["AbiError", "ArgumentError", "ContractCallError", "ToolError"]
