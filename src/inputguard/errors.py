"""
Error hierarchy for inputguard.
"""

from __future__ import annotations

from typing import Dict, Mapping


class InputGuardError(Exception):
    """Base error for inputguard failures that are not validation results."""


class InvalidArgumentError(InputGuardError, ValueError):
    """Raised when a caller passes a value whose shape a validator cannot accept."""


class ValidatorConfigurationError(InputGuardError):
    """Raised when settings or options hold unusable values."""


class ValidationError(InputGuardError):
    """
    Aggregated validation failure storing error-code-to-message mapping.

    Only raised through ``AbstractValidator.check``; ``is_valid`` reports
    failures by returning ``False``.
    """

    def __init__(self, messages: Mapping[str, str]) -> None:
        self.messages: Dict[str, str] = dict(messages)
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return "; ".join(f"{code}: {message}" for code, message in self.messages.items())
