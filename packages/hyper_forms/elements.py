"""Concrete form elements.

Each element only decides how it renders; naming, values, validators and
messages all come from :class:`~hyper_forms.element.Element`.
"""

from typing import Any, Iterable, Mapping

from markupsafe import Markup

from hyper_forms.element import Element
from hyper_forms.tag import Tag

__all__ = [
    "Input",
    "Text",
    "Password",
    "Hidden",
    "Email",
    "Numeric",
    "Date",
    "File",
    "Submit",
    "TextArea",
    "Check",
    "Radio",
    "Select",
]


class Input(Element):
    """An ``<input>`` element; subclasses set ``input_type``."""

    input_type = "text"
    # Checkboxes and radios compare their value instead of echoing it
    use_checked = False
    # Secrets and uploads are never written back into the markup
    echo_value = True

    def render(self, attributes: dict | None = None) -> Markup:
        attrs = self.prepare_attributes(attributes, self.use_checked)
        if not self.echo_value:
            attrs.pop("value", None)
        return self._get_tag().input(self.input_type, attrs)


class Text(Input):
    input_type = "text"


class Password(Input):
    input_type = "password"
    echo_value = False


class Hidden(Input):
    input_type = "hidden"


class Email(Input):
    input_type = "email"


class Numeric(Input):
    input_type = "number"


class Date(Input):
    input_type = "date"


class File(Input):
    input_type = "file"
    echo_value = False


class Submit(Input):
    input_type = "submit"


class Check(Input):
    input_type = "checkbox"
    use_checked = True


class Radio(Input):
    input_type = "radio"
    use_checked = True


class TextArea(Element):
    def render(self, attributes: dict | None = None) -> Markup:
        return self._get_tag().text_area(self.prepare_attributes(attributes))


class Select(Element):
    """A ``<select>`` with its choices.

    ``options`` is a mapping of value to label or an iterable of
    ``(value, label)`` pairs.

        Select("country", {"us": "United States", "fr": "France"})
    """

    def __init__(
        self,
        name: str,
        options: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
        attributes: dict | None = None,
        *,
        tag: Tag | None = None,
    ):
        super().__init__(name, attributes, tag=tag)
        self._choices: list[tuple[Any, Any]] = []
        if options is not None:
            self.set_options(options)

    def get_options(self) -> list[tuple[Any, Any]]:
        return self._choices

    def set_options(self, options: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> "Select":
        if isinstance(options, Mapping):
            self._choices = list(options.items())
        else:
            self._choices = [tuple(option) for option in options]
        return self

    def add_option(self, value: Any, label: Any = None) -> "Select":
        self._choices.append((value, value if label is None else label))
        return self

    def render(self, attributes: dict | None = None) -> Markup:
        return self._get_tag().select(self.prepare_attributes(attributes), self._choices)
