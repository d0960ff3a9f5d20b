"""
Utility helpers shared across inputguard packages.
"""

from .logging import configure_logging, get_logger, time_call
from .naming import camel_to_snake, option_key, validator_logger_name

__all__ = [
    "camel_to_snake",
    "configure_logging",
    "get_logger",
    "option_key",
    "time_call",
    "validator_logger_name",
]
