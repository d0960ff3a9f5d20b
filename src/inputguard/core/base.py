"""
Validator contract shared by all inputguard validators.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

from ..errors import InvalidArgumentError, ValidationError
from ..utils import get_logger, option_key, validator_logger_name
from .config import ValidatorSettings, get_default_settings
from .messages import MessageStore, render_message

V = TypeVar("V", bound="AbstractValidator")

_SETTINGS_FIELDS = frozenset(item.name for item in fields(ValidatorSettings))


class AbstractValidator:
    """
    Base class for validators returning ``bool`` and recording messages.

    Subclasses declare ``message_templates`` (error code to template),
    ``message_variables`` (placeholder to attribute name) and
    ``option_names`` (constructor keywords accepted by ``from_options``),
    then implement ``_validate``. ``option_aliases`` maps alternative option
    names onto ``option_names``.
    """

    message_templates: ClassVar[Dict[str, str]] = {}
    message_variables: ClassVar[Dict[str, str]] = {}
    option_names: ClassVar[Tuple[str, ...]] = ()
    option_aliases: ClassVar[Dict[str, str]] = {}

    def __init__(
        self,
        *,
        settings: Optional[ValidatorSettings] = None,
        messages: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.settings = settings or get_default_settings()
        self.value: Any = None
        self._store = MessageStore(self.message_templates)
        self.logger = get_logger(validator_logger_name(type(self)))
        if messages:
            self.set_messages(messages)

    # Construction --------------------------------------------------------
    @classmethod
    def from_options(cls: type[V], options: Mapping[str, Any]) -> V:
        """
        Build a validator from a mapping of named options.

        Keys may be snake_case or camelCase. Keys naming a settings field
        (``message_length``, ``value_obscured``...) that the validator does
        not accept directly are folded into its ``settings``.
        """

        kwargs: Dict[str, Any] = {}
        overrides: Dict[str, Any] = {}
        for key, value in options.items():
            name = option_key(key, cls.option_aliases)
            if name in cls.option_names or name in ("settings", "messages"):
                kwargs[name] = value
            elif name in _SETTINGS_FIELDS:
                overrides[name] = value
            else:
                raise InvalidArgumentError(f"Unknown option '{key}' for {cls.__name__}")
        if overrides:
            base = kwargs.get("settings") or get_default_settings()
            kwargs["settings"] = base.with_overrides(**overrides)
        return cls(**kwargs)

    @classmethod
    def from_pairs(cls: type[V], pairs: Iterable[Tuple[str, Any]]) -> V:
        """
        Build a validator from an iterable of ``(name, value)`` pairs.
        """
        return cls.from_options(dict(pairs))

    # Validation ----------------------------------------------------------
    def is_valid(self, value: Any, context: Any = None) -> bool:
        self._store.clear()
        self.value = value
        return self._validate(value, context)

    def _validate(self, value: Any, context: Any) -> bool:
        raise NotImplementedError

    def __call__(self, value: Any, context: Any = None) -> bool:
        return self.is_valid(value, context)

    def check(self, value: Any, context: Any = None) -> None:
        """
        Raise ``ValidationError`` carrying the messages when ``value`` is invalid.
        """
        if not self.is_valid(value, context):
            raise ValidationError(self.get_messages())

    def _error(self, key: str) -> None:
        template = self._store.templates[key]
        variables = {
            placeholder: getattr(self, attribute, None)
            for placeholder, attribute in self.message_variables.items()
        }
        variables["value"] = self.value
        message = render_message(
            template,
            variables,
            max_length=self.settings.message_length,
            obscure_value=self.settings.value_obscured,
        )
        self._store.record(key, message)
        name = type(self).__name__
        self.logger.debug("%s failed with %s", name, key, extra={"code": key, "validator": name})

    # Messages ------------------------------------------------------------
    def get_messages(self) -> Dict[str, str]:
        return self._store.as_dict()

    def get_message_templates(self) -> Dict[str, str]:
        return dict(self._store.templates)

    def get_message_variables(self) -> List[str]:
        return list(self.message_variables)

    def set_message(self, template: str, key: Optional[str] = None) -> None:
        if key is None:
            self._store.set_all_templates(template)
            return
        self._store.set_template(key, template)

    def set_messages(self, messages: Mapping[str, str]) -> None:
        for key, template in messages.items():
            self.set_message(template, key)

    def get_value(self) -> Any:
        return self.value

    # Options -------------------------------------------------------------
    def get_option(self, name: str) -> Any:
        key = option_key(name, self.option_aliases)
        if key == "message_templates":
            return self.get_message_templates()
        if key == "message_variables":
            return dict(self.message_variables)
        if key in _SETTINGS_FIELDS and key not in self.option_names:
            return getattr(self.settings, key)
        if key not in self.option_names:
            raise InvalidArgumentError(f"Unknown option '{name}' for {type(self).__name__}")
        return getattr(self, f"get_{key}")()

    def get_options(self) -> Dict[str, Any]:
        options = {name: self.get_option(name) for name in self.option_names}
        options["message_templates"] = self.get_message_templates()
        options["message_variables"] = dict(self.message_variables)
        options["message_length"] = self.settings.message_length
        options["value_obscured"] = self.settings.value_obscured
        return options

    def set_options(self, options: Mapping[str, Any]) -> None:
        for key, value in options.items():
            name = option_key(key, self.option_aliases)
            if name == "messages":
                self.set_messages(value)
            elif name in self.option_names:
                getattr(self, f"set_{name}")(value)
            elif name in _SETTINGS_FIELDS:
                self.settings = self.settings.with_overrides(**{name: value})
            else:
                raise InvalidArgumentError(f"Unknown option '{key}' for {type(self).__name__}")

    def __repr__(self) -> str:
        options = ", ".join(f"{name}={self.get_option(name)!r}" for name in self.option_names)
        return f"{type(self).__name__}({options})"
