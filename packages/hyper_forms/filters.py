"""Named sanitization filters applied to submitted values."""

import re
from typing import Any, Callable

from markupsafe import Markup

from hyper_forms.errors import FilterError

__all__ = ["register_filter", "available_filters", "sanitize"]


def _to_int(value: Any) -> int:
    digits = re.sub(r"[^0-9+-]", "", str(value))
    try:
        return int(digits)
    except ValueError:
        return 0


def _to_float(value: Any) -> float:
    cleaned = re.sub(r"[^0-9.eE+-]", "", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


_FILTERS: dict[str, Callable[[Any], Any]] = {
    "trim": lambda v: str(v).strip(),
    "lower": lambda v: str(v).lower(),
    "upper": lambda v: str(v).upper(),
    "string": lambda v: str(v),
    "striptags": lambda v: Markup(str(v)).striptags(),
    "int": _to_int,
    "absint": lambda v: abs(_to_int(v)),
    "float": _to_float,
}


def register_filter(name: str, fn: Callable[[Any], Any]) -> None:
    """Add or replace a named filter."""
    _FILTERS[name] = fn


def available_filters() -> list[str]:
    return sorted(_FILTERS)


def sanitize(value: Any, filters: str | list[str] | None) -> Any:
    """Apply ``filters`` in order.

    Lists and tuples of submitted values are filtered item by item. ``None``
    is returned unchanged.

    Example:
        >>> sanitize("  Ada ", ["trim", "lower"])
        'ada'
    """
    if value is None or not filters:
        return value
    if isinstance(value, (list, tuple)):
        return [sanitize(item, filters) for item in value]

    names = [filters] if isinstance(filters, str) else list(filters)
    for name in names:
        try:
            fn = _FILTERS[name]
        except KeyError:
            raise FilterError(
                f"Unknown filter {name!r}",
                filter_name=name,
                available=list(_FILTERS),
            ) from None
        value = fn(value)
    return value
