"""
Naming utilities for inputguard.
"""

import re
from typing import Mapping, Optional


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """
    Convert ``camelCase`` option keys (``enableHeaderCheck``) to ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", step1).lower()
    return snake


def option_key(name: str, aliases: Optional[Mapping[str, str]] = None) -> str:
    """
    Canonical option name: snake_case, then resolved through ``aliases``.

    ``option_key("enableHeaderCheck", {"enable_header_check": "header_check"})``
    gives ``"header_check"``.
    """
    key = camel_to_snake(str(name))
    if aliases:
        return aliases.get(key, key)
    return key


def validator_logger_name(cls: type) -> str:
    return f"validators.{camel_to_snake(cls.__name__)}"
