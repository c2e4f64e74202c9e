"""Loan payoff projection utilities.

This module also exposes the package version for runtime display."""
from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("loan-payoff")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.1.0"
