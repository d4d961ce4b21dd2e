"""Form exceptions with contextual error messages."""


class FormError(Exception):
    """Base exception for all form errors."""

    def __init__(self, message: str, element: str | None = None):
        self.element = element
        super().__init__(f"{message}\n\n  Element: {element}" if element else message)


class ArgumentError(FormError, ValueError):
    """Raised when an element is built or renamed with an unusable name."""


class ElementError(FormError):
    """Raised when an element is given a value it cannot hold."""

    def __init__(
        self,
        message: str,
        element: str | None = None,
        value: object = None,
    ):
        self.value = value

        full_message = message
        if element:
            full_message += f"\n\n  Element: {element}"
        if value is not None:
            full_message += f"\n\n  Got: {type(value).__name__}: {value!r}"

        Exception.__init__(self, full_message)
        self.element = element


class TagError(FormError):
    pass


class FilterError(FormError):
    """Unknown sanitization filter."""

    def __init__(
        self,
        message: str,
        element: str | None = None,
        filter_name: str | None = None,
        available: list[str] | None = None,
    ):
        self.filter_name = filter_name
        self.available = available or []

        full_message = message
        if element:
            full_message += f"\n\n  Element: {element}"

        if filter_name and available:
            full_message += f"\n\n  Filter {filter_name!r} is not one of:"
            for name in sorted(available):
                full_message += f"\n    - {name}"

        Exception.__init__(self, full_message)
        self.element = element
