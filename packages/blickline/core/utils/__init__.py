"""Shared utilities for blickline."""

from blickline.core.utils.logging import configure_logging, get_logger
from blickline.core.utils.math import lerp

__all__ = [
    "configure_logging",
    "get_logger",
    "lerp",
]
