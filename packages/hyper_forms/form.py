"""A minimal owner for form elements.

The form is the authoritative source of values for its elements: submitted
data bound with :meth:`Form.bind` wins, then the attributes of the entity the
form edits.

    form = Form(entity=user)
    form.add(Text("email").add_filter("trim").add_validator(PresenceOf()))

    if not form.is_valid(request_data):
        for message in form.get_messages():
            print(message)
"""

import logging
from typing import Any, Iterator, Mapping

from markupsafe import Markup

from hyper_forms.element import Element
from hyper_forms.errors import FormError
from hyper_forms.filters import sanitize
from hyper_forms.messages import MessageBag

__all__ = ["Form"]

logger = logging.getLogger(__name__)


class Form:
    """An ordered collection of elements sharing one set of values.

    Args:
        entity: Optional object whose attributes provide values for fields
            without bound data.
    """

    def __init__(self, entity: Any = None):
        self.entity = entity
        self._elements: dict[str, Element] = {}
        self._data: dict[str, Any] = {}
        self._messages = MessageBag()

    # Elements

    def add(self, element: Element) -> "Form":
        name = element.get_name()
        owner = element.get_form()
        if owner is not None and owner is not self and owner.has(name) and owner.get(name) is element:
            owner.remove(name)
        previous = self._elements.get(name)
        if previous is not None and previous is not element:
            previous.set_form(None)
        element.set_form(self)
        self._elements[name] = element
        return self

    def get(self, name: str) -> Element:
        try:
            return self._elements[name]
        except KeyError:
            raise FormError("Element is not part of the form", element=name) from None

    def has(self, name: str) -> bool:
        return name in self._elements

    def remove(self, name: str) -> bool:
        element = self._elements.pop(name, None)
        if element is None:
            return False
        element.set_form(None)
        self._data.pop(name, None)
        return True

    def get_elements(self) -> list[Element]:
        return list(self._elements.values())

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, name: str) -> bool:
        return name in self._elements

    # Values

    def bind(self, data: Mapping[str, Any]) -> "Form":
        """Replace the bound data with ``data`` for known elements, sanitized by their filters.

        Fields missing from ``data`` are unbound, so an unchecked checkbox
        does not keep the value of an earlier submission.
        """
        self._data = {}
        for name, value in data.items():
            element = self._elements.get(name)
            if element is None:
                continue
            self._data[name] = sanitize(value, element.get_filters())
        return self

    def get_value(self, name: str) -> Any:
        if name in self._data:
            return self._data[name]
        if self.entity is not None:
            if isinstance(self.entity, Mapping):
                return self.entity.get(name)
            return getattr(self.entity, name, None)
        return None

    def clear(self, name: str | None = None) -> "Form":
        """Forget bound data for ``name``, or for every element when ``name`` is None."""
        names = [name] if name is not None else list(self._elements)
        for field in names:
            self._data.pop(field, None)
        return self

    # Validation

    def is_valid(self, data: Mapping[str, Any] | None = None) -> bool:
        """Run every element's validators against its current value.

        Failures are appended to the element's messages and to the form's
        aggregated bag, both of which are reset first.
        """
        if data is not None:
            self.bind(data)

        self._messages = MessageBag()
        valid = True
        for element in self._elements.values():
            element.set_messages(MessageBag())
            value = self.get_value(element.get_name())
            for validator in element.get_validators():
                message = validator.validate(value, element.get_name())
                if message is None:
                    continue
                valid = False
                element.append_message(message)
                self._messages.append_message(message)
                logger.debug("Element %r failed %r", element.get_name(), validator)
                if getattr(validator, "cancel_on_fail", False):
                    break
        return valid

    def get_messages(self) -> MessageBag:
        return self._messages

    # Rendering

    def render(self, name: str, attributes: dict | None = None) -> Markup:
        return self.get(name).render(attributes)

    def label(self, name: str, attributes: dict | None = None) -> Markup:
        return self.get(name).label(attributes)
