"""Base class for form elements.

An element describes one form field: its name, default value, HTML
attributes, validators, filters and the messages produced when it was last
validated. Concrete elements (see :mod:`hyper_forms.elements`) only add a
``render()`` method.

Values are resolved in this order:

1. the owning form, when the element is attached to one
2. the tag helper's default-value store
3. the element's own default

    email = Text("email", {"class": "input"})
    email.set_label("E-mail").add_filter("trim").add_validator(PresenceOf())
    email.label()   # <label for="email">E-mail</label>
    str(email)      # <input type="text" name="email" id="email" class="input">
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable

from markupsafe import Markup

from hyper_forms.errors import ArgumentError, ElementError
from hyper_forms.html import escape_html
from hyper_forms.messages import Message, MessageBag
from hyper_forms.tag import Tag, get_tag

if TYPE_CHECKING:
    from hyper_forms.form import Form
    from hyper_forms.validators import Validator

__all__ = ["Element"]

logger = logging.getLogger(__name__)


def _clean_name(name: Any) -> str:
    cleaned = str(name).strip() if name is not None else ""
    if not cleaned:
        raise ArgumentError("Form element name is required")
    return cleaned


class Element(ABC):
    """A named, attribute-bearing, validatable form field.

    Args:
        name: Field name; surrounding whitespace is removed.
        attributes: Default HTML attributes (``class``, ``id``...).
        tag: Tag helper to use when no form is attached. Defaults to the
            process-wide helper, looked up on every call.

    Raises:
        ArgumentError: If ``name`` is empty once trimmed.
    """

    def __init__(self, name: str, attributes: dict | None = None, *, tag: Tag | None = None):
        self._name = _clean_name(name)
        self._attributes: dict = dict(attributes) if attributes else {}
        self._value: Any = None
        self._label: str | None = None
        self._filters: str | list[str] | None = None
        self._validators: list["Validator"] = []
        self._options: dict[str, Any] = {}
        self._messages = MessageBag()
        self._form: "Form | None" = None
        self._tag = tag

    @abstractmethod
    def render(self, attributes: dict | None = None) -> Markup:
        """Render the widget markup."""

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    # Name

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> "Element":
        self._name = _clean_name(name)
        return self

    # Attributes

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.get_attributes().get(key, default)

    def get_attributes(self) -> dict:
        if not isinstance(self._attributes, dict):
            self._attributes = {}
        return self._attributes

    def set_attribute(self, key: str, value: Any) -> "Element":
        self.get_attributes()[key] = value
        return self

    def set_attributes(self, attributes: dict | None) -> "Element":
        self._attributes = attributes if isinstance(attributes, dict) else {}
        return self

    # Filters

    def get_filters(self) -> str | list[str] | None:
        return self._filters

    def set_filters(self, filters: str | list[str] | tuple[str, ...]) -> "Element":
        """Replace the filters with one name or a sequence of names.

        Raises:
            ElementError: If ``filters`` is neither a string nor a sequence.
        """
        if isinstance(filters, str):
            self._filters = filters
        elif isinstance(filters, (list, tuple)):
            self._filters = list(filters)
        else:
            raise ElementError(
                "The filter needs to be a string or a list of strings",
                element=self._name,
                value=filters,
            )
        return self

    def add_filter(self, name: str) -> "Element":
        if isinstance(self._filters, list):
            self._filters.append(name)
        elif isinstance(self._filters, str):
            self._filters = [self._filters, name]
        else:
            self._filters = [name]
        return self

    # Validators

    def get_validators(self) -> list["Validator"]:
        return self._validators

    def add_validator(self, validator: "Validator") -> "Element":
        self._validators.append(validator)
        return self

    def add_validators(self, validators: Iterable["Validator"], merge: bool = True) -> "Element":
        """Append ``validators`` after the current ones, or replace them when ``merge`` is false."""
        if merge:
            current = self._validators if isinstance(self._validators, list) else []
            self._validators = current + list(validators)
        else:
            self._validators = list(validators)
        return self

    # Messages

    def get_messages(self) -> MessageBag:
        return self._messages

    @property
    def messages(self) -> MessageBag:
        return self._messages

    def set_messages(self, messages: MessageBag) -> "Element":
        self._messages = messages
        return self

    def append_message(self, message: Message) -> "Element":
        self._messages.append_message(message)
        return self

    def has_messages(self) -> bool:
        return self._messages.count() > 0

    # Label

    def get_label(self) -> str | None:
        return self._label

    def set_label(self, label: str | None) -> "Element":
        self._label = label
        return self

    def label(self, attributes: dict | None = None) -> Markup:
        """Render a ``<label>`` pointing at this element.

        ``for`` is the element's ``id`` attribute, falling back to its name,
        unless the caller supplies one. The text is the label, or the ``for``
        target when no label is set.
        """
        attrs = dict(attributes) if isinstance(attributes, dict) else {}
        target = self.get_attributes().get("id") or self._name
        attrs.setdefault("for", target)

        label = self._label
        text = label if label is not None and label != "" else target

        html = self._get_tag().render_attributes("<label", attrs)
        return Markup(f"{html}>{escape_html(text)}</label>")

    # Value

    def get_default(self) -> Any:
        return self._value

    def set_default(self, value: Any) -> "Element":
        self._value = value
        return self

    def get_value(self) -> Any:
        """Resolve the current value: form, then tag store, then default."""
        if self._form is not None:
            logger.debug("Element %r value resolved from form", self._name)
            return self._form.get_value(self._name)

        tag = self._get_tag()
        if tag.has_value(self._name):
            value = tag.get_value(self._name)
            if value is not None:
                logger.debug("Element %r value resolved from tag store", self._name)
                return value
        logger.debug("Element %r value resolved from default", self._name)
        return self._value

    def clear(self) -> "Element":
        """Reset the element to its default value."""
        if self._form is not None:
            self._form.clear(self._name)
        else:
            self._get_tag().set_default(self._name, self._value)
        return self

    # Form

    @property
    def form(self) -> "Form | None":
        return self._form

    def get_form(self) -> "Form | None":
        return self._form

    def set_form(self, form: "Form | None") -> "Element":
        if form is None:
            logger.debug("Element %r detached from form", self._name)
        else:
            logger.debug("Element %r attached to form %r", self._name, form)
        self._form = form
        return self

    # User options

    def get_user_option(self, option: str, default: Any = None) -> Any:
        return self._options.get(option, default)

    def set_user_option(self, option: str, value: Any) -> "Element":
        self._options[option] = value
        return self

    def get_user_options(self) -> dict[str, Any]:
        return self._options

    def set_user_options(self, options: dict[str, Any]) -> "Element":
        self._options = options
        return self

    # Rendering support

    def prepare_attributes(self, attributes: dict | None = None, use_checked: bool = False) -> dict:
        """Build the attribute mapping handed to the tag helper.

        Position ``0`` holds the element name. The element's own attributes
        are the base and ``attributes`` override them. With ``use_checked``
        (checkboxes and radios) a matching value adds ``checked``.
        """
        widget_attributes = dict(attributes) if isinstance(attributes, dict) else {}
        widget_attributes[0] = self._name

        merged = {**self.get_attributes(), **widget_attributes}

        value = self.get_value()
        if value is not None:
            if use_checked:
                if "value" in merged:
                    if str(merged["value"]) == str(value):
                        merged["checked"] = "checked"
                else:
                    if value:
                        merged["checked"] = "checked"
                    merged["value"] = value
            else:
                merged["value"] = value

        return merged

    def _get_tag(self) -> Tag:
        return self._tag if self._tag is not None else get_tag()
