"""HTML escaping and attribute rendering helpers for form elements.

These functions are used by the tag helper to turn attribute mappings into
markup. Output is wrapped in ``markupsafe.Markup`` so it is never escaped a
second time by a template engine.
"""

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'escape_html',
    'render_attr',
    'render_class',
    'render_style',
    'spread_attrs',
    'render_tag',
]

# Attributes rendered first, in this order, when present
PRIORITY_ATTRS = ('type', 'name', 'id', 'value')


def escape_html(value) -> Markup:
    """Escape a value for safe HTML output.

    Objects with an ``__html__`` method (``Markup`` included) pass through
    untouched.

    Example:
        >>> escape_html("<b>")
        Markup('&lt;b&gt;')
        >>> escape_html(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_class(*values) -> str:
    """Render a class attribute value from various inputs.

    Accepts:
    - str: passed through as-is
    - list/tuple: items joined with spaces (nested structures supported)
    - dict: keys included if values are truthy

    Example:
        >>> render_class("input", {"is-invalid": True, "is-valid": False})
        'input is-invalid'
    """
    classes = []
    queue = list(values)

    while queue:
        value = queue.pop(0)
        if not value:
            continue
        if isinstance(value, str):
            classes.append(value)
        elif isinstance(value, dict):
            classes.extend(k for k, v in value.items() if v)
        elif isinstance(value, (list, tuple)):
            queue[0:0] = list(value)
        else:
            classes.append(str(value))

    return ' '.join(classes)


def render_style(value) -> str:
    """Render a style attribute value from a string or a dict."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return ';'.join(f'{k}:{v}' for k, v in value.items() if v is not None)
    return str(value) if value else ''


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute.

    - True: renders just the attribute name (e.g., "disabled")
    - False/None: renders nothing
    - class/style: lists and dicts are flattened first
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("required", True)
        ' required'
        >>> render_attr("for", "email")
        ' for="email"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    if name == 'class' and not isinstance(value, str):
        value = render_class(value)
    elif name == 'style' and not isinstance(value, str):
        value = render_style(value)
    return f' {name}="{escape_html(value)}"'


def spread_attrs(attrs: dict) -> Markup:
    """Spread a mapping as HTML attributes.

    Non-string keys are positional slots used by the element layer and are
    skipped. ``type``, ``name``, ``id`` and ``value`` come first, the rest
    keep their mapping order.

    Example:
        >>> spread_attrs({"class": "btn", 0: "email", "id": "email"})
        Markup(' id="email" class="btn"')
    """
    if not attrs:
        return Markup('')

    keys = [k for k in PRIORITY_ATTRS if k in attrs]
    keys.extend(k for k in attrs if isinstance(k, str) and k not in PRIORITY_ATTRS)
    return Markup(''.join(render_attr(k, attrs[k]) for k in keys))


def render_tag(tag: str, attrs: dict | None = None, content=None, self_closing: bool = False) -> Markup:
    """Render a complete element.

    ``content`` is escaped unless it is already markup. Self-closing tags
    ignore ``content``.

    Example:
        >>> render_tag("textarea", {"name": "bio"}, "<hi>")
        Markup('<textarea name="bio">&lt;hi&gt;</textarea>')
    """
    opening = f'<{tag}{spread_attrs(attrs or {})}'
    if self_closing:
        return Markup(f'{opening}>')
    return Markup(f'{opening}>{escape_html(content)}</{tag}>')
