"""Shared utilities for Vertigo."""

from vertigo.core.utils.json import read_json
from vertigo.core.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "read_json",
]
