"""Logging and console utilities."""

from .logger import configure_logging, get_logger, set_log_level
from .rich_logger import RichLogger, get_rich_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "set_log_level",
    "RichLogger",
    "get_rich_logger",
]
