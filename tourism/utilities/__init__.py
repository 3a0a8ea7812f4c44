"""Utilities - document cache, logging."""

from tourism.utilities.cache import HypermediaCache
from tourism.utilities.logging import setup_logging

__all__ = [
    "HypermediaCache",
    "setup_logging",
]
