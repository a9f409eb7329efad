"""Utility modules."""

from subconv.utils.config import Settings, get_settings
from subconv.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
