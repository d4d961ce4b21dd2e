import pytest

from hyper_forms import Tag, use_tag
from hyper_forms.element import Element


class Widget(Element):
    """Smallest concrete element: renders its prepared attributes."""

    def render(self, attributes=None):
        return self._get_tag().input("text", self.prepare_attributes(attributes))


class FakeForm:
    """Records calls and answers values from a dict."""

    def __init__(self, values=None):
        self.values = values or {}
        self.cleared = []

    def get_value(self, name):
        return self.values.get(name)

    def clear(self, name):
        self.cleared.append(name)


@pytest.fixture(autouse=True)
def tag():
    """Fresh process-wide tag store for every test."""
    with use_tag(Tag()) as fresh:
        yield fresh


@pytest.fixture
def widget_cls():
    return Widget


@pytest.fixture
def fake_form():
    return FakeForm()
