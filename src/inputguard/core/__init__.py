"""
Validator contract, settings and message rendering.
"""

from .base import AbstractValidator
from .config import ValidatorSettings, get_default_settings, set_default_settings
from .messages import MessageStore, format_value, render_message

__all__ = [
    "AbstractValidator",
    "MessageStore",
    "ValidatorSettings",
    "format_value",
    "get_default_settings",
    "render_message",
    "set_default_settings",
]
