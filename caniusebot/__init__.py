"""Top-level package for caniusebot."""

from ._version import __version__

__all__ = ["__version__"]
