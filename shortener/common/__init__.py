"""Common utilities for URL shortener."""

from .validators import validate_url, is_valid_url
from .logging_config import setup_logging, shutdown_logging, get_logger

__all__ = [
    "validate_url",
    "is_valid_url",
    "setup_logging",
    "shutdown_logging",
    "get_logger",
]
