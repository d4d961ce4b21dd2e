"""Validation messages and the ordered bag that collects them."""

from typing import Any, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from hyper_forms.errors import FormError

__all__ = ["Message", "MessageBag"]


class Message(BaseModel):
    """One piece of validation feedback, optionally tied to a field."""

    model_config = ConfigDict(frozen=True)

    message: str
    field: str | None = None
    type: str = "Message"
    code: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class MessageBag:
    """Ordered collection of :class:`Message` objects."""

    def __init__(self, messages: Iterable[Message] | None = None):
        self._messages: list[Message] = []
        if messages is not None:
            self.append_messages(messages)

    def append_message(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise FormError(
                f"Only Message instances can be appended, got {type(message).__name__}"
            )
        self._messages.append(message)

    def append_messages(self, messages: "Iterable[Message] | MessageBag") -> None:
        for message in messages:
            self.append_message(message)

    def count(self) -> int:
        return len(self._messages)

    def filter(self, field: str) -> list[Message]:
        """Messages attached to ``field``, in insertion order."""
        return [m for m in self._messages if m.field == field]

    def clear(self) -> None:
        self._messages.clear()

    def to_list(self) -> list[dict[str, Any]]:
        return [m.model_dump() for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    def __repr__(self) -> str:
        return f"MessageBag({self._messages!r})"
