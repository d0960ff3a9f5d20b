"""
Cross-field identical-value validator.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple

from ..core.base import AbstractValidator
from ..core.messages import format_value
from ..errors import InvalidArgumentError

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def _is_indexable(context: Any) -> bool:
    if isinstance(context, (str, bytes, bytearray)):
        return False
    if isinstance(context, (Mapping, Sequence)):
        return True
    return hasattr(context, "__getitem__") and not isinstance(context, type)


def _token_path(token: Any) -> Optional[Tuple[Any, ...]]:
    """
    Describe how ``token`` walks into a context, or ``None`` for no lookup.

    Lists and tuples are key paths, single-key dicts nest (``{"user": "email"}``
    is the path ``("user", "email")``) and strings or ints are single keys.
    """
    if isinstance(token, (list, tuple)):
        return tuple(token) or None
    if isinstance(token, dict):
        path = []
        current: Any = token
        while isinstance(current, dict):
            if len(current) != 1:
                return None
            key = next(iter(current))
            path.append(key)
            current = current[key]
        if isinstance(current, (list, tuple)):
            return None
        path.append(current)
        return tuple(path)
    if isinstance(token, str) or (isinstance(token, int) and not isinstance(token, bool)):
        return (token,)
    return None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_RE.match(value):
        return float(value)
    return None


def strict_equals(left: Any, right: Any) -> bool:
    """
    Equal value and equal type, recursively for containers.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        if left.keys() != right.keys():
            return False
        return all(strict_equals(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(strict_equals(a, b) for a, b in zip(left, right))
    return left == right


def loose_equals(left: Any, right: Any) -> bool:
    """
    Type-coercing equality: ``"123"`` equals ``123``, ``None`` equals falsy values.
    """
    if left is None or right is None:
        other = right if left is None else left
        return not other
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)

    left_number, right_number = _as_number(left), _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left) != set(right):
            return False
        return all(loose_equals(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(loose_equals(a, b) for a, b in zip(left, right))

    scalars = (str, int, float)
    if isinstance(left, scalars) and isinstance(right, scalars):
        return format_value(left) == format_value(right)
    return left == right


class Identical(AbstractValidator):
    """
    Check that a value matches a token, optionally resolved from the context.
    """

    NOT_SAME = "notSame"
    MISSING_TOKEN = "missingToken"

    message_templates = {
        NOT_SAME: "The two given tokens do not match",
        MISSING_TOKEN: "No token was provided to match against",
    }
    message_variables = {"token": "token_string"}
    option_names = ("token", "strict", "literal")

    def __init__(
        self,
        token: Any = None,
        strict: bool = True,
        literal: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.token = token
        self.strict = bool(strict)
        self.literal = bool(literal)

    @property
    def token_string(self) -> str:
        return format_value(self.token)

    def get_token(self) -> Any:
        return self.token

    def set_token(self, token: Any) -> None:
        self.token = token

    def get_strict(self) -> bool:
        return self.strict

    def set_strict(self, strict: bool) -> None:
        self.strict = bool(strict)

    def get_literal(self) -> bool:
        return self.literal

    def set_literal(self, literal: bool) -> None:
        self.literal = bool(literal)

    def _validate(self, value: Any, context: Any) -> bool:
        token = self.token
        if not self.literal and context is not None:
            if not _is_indexable(context):
                raise InvalidArgumentError(
                    f"Context passed to {type(self).__name__} must be a mapping, "
                    f"an indexable object or None; received {type(context).__name__}"
                )
            token = self._resolve(token, context)

        if token is None:
            self._error(self.MISSING_TOKEN)
            return False

        same = strict_equals(value, token) if self.strict else loose_equals(value, token)
        if not same:
            self._error(self.NOT_SAME)
            return False
        return True

    @staticmethod
    def _resolve(token: Any, context: Any) -> Any:
        path = _token_path(token)
        if path is None:
            return token
        current = context
        for key in path:
            if not _is_indexable(current):
                return token
            try:
                current = current[key]
            except (KeyError, IndexError, TypeError):
                return token
            if current is None:
                return token
        return current
