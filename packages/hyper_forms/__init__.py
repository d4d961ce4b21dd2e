"""Hyper Forms - form elements with labels, validators, filters and messages.

Public API exports:
- Element base class and concrete elements
- Form owner
- Tag helper and its process-wide default-value store
- Messages, validators and filters
"""

from hyper_forms.element import Element
from hyper_forms.elements import (
    Check,
    Date,
    Email,
    File,
    Hidden,
    Input,
    Numeric,
    Password,
    Radio,
    Select,
    Submit,
    Text,
    TextArea,
)
from hyper_forms.errors import (
    ArgumentError,
    ElementError,
    FilterError,
    FormError,
    TagError,
)
from hyper_forms.filters import available_filters, register_filter, sanitize
from hyper_forms.form import Form
from hyper_forms.messages import Message, MessageBag
from hyper_forms.tag import Tag, get_tag, set_tag, use_tag
from hyper_forms.validators import Identical, PresenceOf, Regex, StringLength, Validator

__all__ = [
    # Elements
    "Element",
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
    # Form
    "Form",
    # Tag helper
    "Tag",
    "get_tag",
    "set_tag",
    "use_tag",
    # Messages
    "Message",
    "MessageBag",
    # Validators
    "Validator",
    "PresenceOf",
    "StringLength",
    "Regex",
    "Identical",
    # Filters
    "sanitize",
    "register_filter",
    "available_filters",
    # Errors
    "FormError",
    "ArgumentError",
    "ElementError",
    "TagError",
    "FilterError",
]
