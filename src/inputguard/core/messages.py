"""
Message templates and rendering.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from ..errors import InvalidArgumentError

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")

TRUNCATION_SUFFIX = "..."


def format_value(value: Any) -> str:
    """
    Render an arbitrary value for interpolation into a message.
    """
    if value is None:
        return ""
    if isinstance(value, (str, int, float, bool)):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return repr(value)
    return str(value)


def render_message(
    template: str,
    variables: Mapping[str, Any],
    *,
    max_length: int = -1,
    obscure_value: bool = False,
) -> str:
    """
    Substitute ``{name}`` placeholders in ``template`` with ``variables``.

    Unknown placeholders are left as written. ``value`` is replaced by
    asterisks when ``obscure_value`` is set; the whole message is truncated
    with a trailing ``...`` once it exceeds ``max_length`` (``-1`` disables).
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        rendered = format_value(variables[name])
        if name == "value" and obscure_value:
            return "*" * len(rendered)
        return rendered

    message = _PLACEHOLDER_RE.sub(substitute, template)
    if max_length > -1 and len(message) > max_length:
        if max_length < len(TRUNCATION_SUFFIX):
            return TRUNCATION_SUFFIX[:max_length]
        message = message[: max_length - len(TRUNCATION_SUFFIX)] + TRUNCATION_SUFFIX
    return message


class MessageStore:
    """
    Per-instance holder for templates and the messages of the latest call.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        self.templates: Dict[str, str] = dict(templates)
        self._messages: Dict[str, str] = {}

    def set_template(self, key: str, template: str) -> None:
        if key not in self.templates:
            raise InvalidArgumentError(f"No message template exists for key '{key}'")
        self.templates[key] = template

    def set_all_templates(self, template: str) -> None:
        for key in self.templates:
            self.templates[key] = template

    def record(self, key: str, message: str) -> None:
        self._messages[key] = message

    def clear(self) -> None:
        self._messages.clear()

    def as_dict(self) -> Dict[str, str]:
        return dict(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
