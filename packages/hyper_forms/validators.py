"""Validator rules checked against submitted values.

Elements only store validators; ``Form.is_valid`` is what runs them. A
validator turns a failing value into a :class:`Message` for the field:

    PresenceOf(message="{field} is required").validate("", "email")
    # Message(message='email is required', field='email', type='PresenceOf')
"""

import re
from abc import ABC, abstractmethod
from typing import Any

from hyper_forms.messages import Message

__all__ = ["Validator", "PresenceOf", "StringLength", "Regex", "Identical"]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


class Validator(ABC):
    """Base class for validation rules.

    Args:
        message: Template for the failure message. ``{field}`` and any key
            returned by :meth:`template_vars` are substituted.
        allow_empty: Skip the check when the value is empty.
        cancel_on_fail: Stop running the element's remaining validators after
            this one fails.
    """

    default_message = "Field {field} is not valid"

    def __init__(
        self,
        message: str | None = None,
        allow_empty: bool = False,
        cancel_on_fail: bool = False,
    ):
        self.message = message or self.default_message
        self.allow_empty = allow_empty
        self.cancel_on_fail = cancel_on_fail

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        ...

    def template_vars(self) -> dict[str, Any]:
        return {}

    def get_message(self, value: Any) -> str:
        return self.message

    def validate(self, value: Any, field: str) -> Message | None:
        """Return a failure message for ``field``, or ``None`` when ``value`` passes."""
        if self.allow_empty and _is_empty(value):
            return None
        if self.is_valid(value):
            return None
        return Message(
            message=self.get_message(value).format(field=field, **self.template_vars()),
            field=field,
            type=type(self).__name__,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class PresenceOf(Validator):
    default_message = "Field {field} is required"

    def is_valid(self, value: Any) -> bool:
        return not _is_empty(value)


class StringLength(Validator):
    """Bound the length of the value's string form."""

    message_minimum = "Field {field} must be at least {min} characters long"
    message_maximum = "Field {field} must not exceed {max} characters"

    def __init__(self, min: int | None = None, max: int | None = None, **kwargs):
        self._custom_message = kwargs.get("message") is not None
        super().__init__(**kwargs)
        self.min = min
        self.max = max

    def template_vars(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    def get_message(self, value: Any) -> str:
        if self._custom_message:
            return self.message
        if self.min is not None and self._length(value) < self.min:
            return self.message_minimum
        return self.message_maximum

    @staticmethod
    def _length(value: Any) -> int:
        return len("" if value is None else str(value))

    def is_valid(self, value: Any) -> bool:
        length = self._length(value)
        if self.min is not None and length < self.min:
            return False
        if self.max is not None and length > self.max:
            return False
        return True


class Regex(Validator):
    default_message = "Field {field} does not match the required format"

    def __init__(self, pattern: str | re.Pattern, **kwargs):
        super().__init__(**kwargs)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def template_vars(self) -> dict[str, Any]:
        return {"pattern": self.pattern.pattern}

    def is_valid(self, value: Any) -> bool:
        return self.pattern.fullmatch("" if value is None else str(value)) is not None


class Identical(Validator):
    """Accept exactly one value (e.g. a terms-of-service checkbox)."""

    default_message = "Field {field} does not have the expected value"

    def __init__(self, accepted: Any, **kwargs):
        super().__init__(**kwargs)
        self.accepted = accepted

    def template_vars(self) -> dict[str, Any]:
        return {"accepted": self.accepted}

    def is_valid(self, value: Any) -> bool:
        return value == self.accepted
