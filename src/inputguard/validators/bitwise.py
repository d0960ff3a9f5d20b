"""
Bitwise flag validator.
"""

from __future__ import annotations

from typing import Any, Optional

from ..core.base import AbstractValidator


def _is_bits(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Bitwise(AbstractValidator):
    """
    Compare an integer against a control bit pattern.

    ``OP_AND`` accepts values sharing at least one bit with the control; in
    strict mode every bit of the value must also be set in the control.
    ``OP_XOR`` accepts values sharing no bit with the control. Any other
    operator rejects every value without recording a message.
    """

    OP_AND = "and"
    OP_XOR = "xor"

    NOT_AND = "notAnd"
    NOT_AND_STRICT = "notAndStrict"
    NOT_XOR = "notXor"

    message_templates = {
        NOT_AND: "The input has no common bit set with '{control}'",
        NOT_AND_STRICT: "The input doesn't have the same bits set as '{control}'",
        NOT_XOR: "The input has common bit set with '{control}'",
    }
    message_variables = {"control": "control"}
    option_names = ("control", "operator", "strict")

    def __init__(
        self,
        control: Optional[int] = None,
        operator: Optional[str] = None,
        strict: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.control = control
        self.operator = operator
        self.strict = bool(strict)

    def get_control(self) -> Optional[int]:
        return self.control

    def set_control(self, control: Optional[int]) -> None:
        self.control = control

    def get_operator(self) -> Optional[str]:
        return self.operator

    def set_operator(self, operator: Optional[str]) -> None:
        self.operator = operator

    def get_strict(self) -> bool:
        return self.strict

    def set_strict(self, strict: bool) -> None:
        self.strict = bool(strict)

    def _validate(self, value: Any, context: Any) -> bool:
        control = self.control or 0

        if self.operator == self.OP_AND:
            if self.strict:
                if _is_bits(value) and value != 0 and (value & control) == value:
                    return True
                self._error(self.NOT_AND_STRICT)
                return False
            if _is_bits(value) and (value & control) != 0:
                return True
            self._error(self.NOT_AND)
            return False

        if self.operator == self.OP_XOR:
            if _is_bits(value) and (value & control) == 0:
                return True
            self._error(self.NOT_XOR)
            return False

        return False
