"""Configuration helpers."""

from .loader import load_config
from .types import Config

__all__ = ["Config", "load_config"]
