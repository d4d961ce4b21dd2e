"""Tag helper: the process-wide default-value store and markup builders.

Elements that are not attached to a form read and write their values here.
The helper is a plain object so tests and applications can hold their own
instance, while ``get_tag()`` returns the one shared by the process:

    from hyper_forms.tag import get_tag, use_tag, Tag

    get_tag().set_default("email", "me@example.com")

    with use_tag(Tag()) as tag:
        ...  # elements without an injected tag now use ``tag``
"""

import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from markupsafe import Markup

from hyper_forms.errors import TagError
from hyper_forms.html import render_tag, spread_attrs

__all__ = ["Tag", "get_tag", "set_tag", "use_tag"]

logger = logging.getLogger(__name__)


class Tag:
    """Default-value store plus the markup builders elements render with."""

    def __init__(self, defaults: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(defaults or {})

    # Default-value store

    def has_value(self, name: str) -> bool:
        return name in self._values

    def get_value(self, name: str) -> Any:
        return self._values.get(name)

    def set_default(self, name: str, value: Any) -> None:
        self._values[name] = value

    def set_defaults(self, values: Mapping[str, Any], merge: bool = False) -> None:
        """Assign several defaults at once, replacing the store unless ``merge``."""
        if merge:
            self._values.update(values)
        else:
            self._values = dict(values)

    def reset(self) -> None:
        self._values.clear()

    # Markup

    def render_attributes(self, open_tag: str, attributes: Mapping) -> Markup:
        """Render ``open_tag`` followed by its attributes, without the closing ``>``.

        Example:
            >>> Tag().render_attributes("<label", {"for": "email"})
            Markup('<label for="email"')
        """
        if not isinstance(attributes, Mapping):
            raise TagError(
                f"Attributes must be a mapping, got {type(attributes).__name__}"
            )
        return Markup(open_tag) + spread_attrs(dict(attributes))

    def element(self, tag: str, attributes: Mapping | None = None, content=None) -> Markup:
        return render_tag(tag, dict(attributes or {}), content)

    def input(self, type: str, attributes: Mapping) -> Markup:
        """Render an ``<input>`` of the given type.

        Position ``0`` of ``attributes`` carries the field name; ``name`` and
        ``id`` default to it.
        """
        attrs = self._with_name(attributes)
        attrs["type"] = type
        return render_tag("input", attrs, self_closing=True)

    def text_area(self, attributes: Mapping) -> Markup:
        attrs = self._with_name(attributes)
        content = attrs.pop("value", None)
        return render_tag("textarea", attrs, content)

    def select(self, attributes: Mapping, options: Iterable[tuple[Any, Any]]) -> Markup:
        """Render a ``<select>`` with one ``<option>`` per ``(value, label)`` pair.

        The options matching ``attributes["value"]`` (a scalar or a list) are
        marked ``selected``.
        """
        attrs = self._with_name(attributes)
        current = attrs.pop("value", None)
        if isinstance(current, (list, tuple, set)):
            selected = {str(v) for v in current}
        elif current is None:
            selected = set()
        else:
            selected = {str(current)}

        children = []
        for value, label in options:
            option_attrs = {"value": value, "selected": str(value) in selected}
            children.append(render_tag("option", option_attrs, label))

        return Markup(f'<select{spread_attrs(attrs)}>{Markup("").join(children)}</select>')

    @staticmethod
    def _with_name(attributes: Mapping) -> dict:
        if not isinstance(attributes, Mapping):
            raise TagError(
                f"Attributes must be a mapping, got {type(attributes).__name__}"
            )
        attrs = dict(attributes)
        name = attrs.pop(0, None)
        if name is not None:
            attrs.setdefault("name", name)
            attrs.setdefault("id", name)
        return attrs

    def __repr__(self) -> str:
        return f"Tag(defaults={self._values!r})"


_tag = Tag()


def get_tag() -> Tag:
    """Return the process-wide tag helper."""
    return _tag


def set_tag(tag: Tag) -> Tag:
    """Replace the process-wide tag helper and return the previous one."""
    global _tag
    previous, _tag = _tag, tag
    logger.debug("Process-wide tag helper replaced: %r", tag)
    return previous


@contextmanager
def use_tag(tag: Tag | None = None) -> Iterator[Tag]:
    """Swap in ``tag`` (a fresh one by default) for the duration of the block."""
    tag = tag if tag is not None else Tag()
    previous = set_tag(tag)
    try:
        yield tag
    finally:
        set_tag(previous)

