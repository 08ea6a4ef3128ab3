"""Top-level package for the smart-contract view-call CLI."""

from importlib import metadata


def __getattr__(name: str) -> str:
    """Expose the package version via ``ssctool.__version__``."""
    if name == "__version__":
        try:
            return metadata.version("ssc-tool")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = ["__version__"]
