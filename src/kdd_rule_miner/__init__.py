"""Genetic-algorithm rule miner for labelled network-connection records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kdd-rule-miner")
except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.0.0"

__all__ = ["__version__"]
