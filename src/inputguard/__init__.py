"""
inputguard public package initialization.

Independent validators for a web input pipeline: bitwise flags, MIME-type
checks for uploaded files and cross-field comparison.
"""

from .core import AbstractValidator, ValidatorSettings  # noqa: F401
from .errors import (  # noqa: F401
    InputGuardError,
    InvalidArgumentError,
    ValidationError,
    ValidatorConfigurationError,
)
from .file import ExcludeMimeType, FileDescriptor, MimeType, check_file_information  # noqa: F401
from .validators import Bitwise, Identical  # noqa: F401

__all__ = [
    "AbstractValidator",
    "Bitwise",
    "ExcludeMimeType",
    "FileDescriptor",
    "Identical",
    "InputGuardError",
    "InvalidArgumentError",
    "MimeType",
    "ValidationError",
    "ValidatorConfigurationError",
    "ValidatorSettings",
    "check_file_information",
]
