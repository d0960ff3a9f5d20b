"""
Settings shared by every validator instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..errors import ValidatorConfigurationError


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValidatorConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ValidatorConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Normalized validator settings.

    ``message_length`` of ``-1`` leaves messages untouched; any other value
    truncates rendered messages to that many characters.
    """

    message_length: int = -1
    value_obscured: bool = False
    header_check: bool = False
    magic_disabled: bool = False

    def __post_init__(self) -> None:
        if self.message_length < -1:
            raise ValidatorConfigurationError(
                f"message_length must be -1 or a non-negative integer, got {self.message_length}"
            )

    @classmethod
    def from_env(cls, prefix: str = "INPUTGUARD_", environ: Mapping[str, str] | None = None) -> "ValidatorSettings":
        """
        Build settings from ``<prefix>MESSAGE_LENGTH``, ``<prefix>VALUE_OBSCURED``,
        ``<prefix>HEADER_CHECK`` and ``<prefix>MAGIC_DISABLED``.
        """

        source = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        length = source.get(f"{prefix}MESSAGE_LENGTH")
        if length:
            values["message_length"] = _parse_int(length, key=f"{prefix}MESSAGE_LENGTH")
        for name in ("value_obscured", "header_check", "magic_disabled"):
            key = f"{prefix}{name.upper()}"
            raw = source.get(key)
            if raw:
                values[name] = _parse_bool(raw, key=key)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "ValidatorSettings":
        return replace(self, **overrides)


_default_settings = ValidatorSettings()


def get_default_settings() -> ValidatorSettings:
    return _default_settings


def set_default_settings(settings: ValidatorSettings) -> ValidatorSettings:
    """
    Replace the process-wide defaults picked up by validators built afterwards.

    Returns the previous defaults so callers can restore them.
    """

    global _default_settings
    previous = _default_settings
    _default_settings = settings
    return previous
