"""Append-only conversation transcript."""

import logging
from collections.abc import Callable, Iterator, Sequence

from src.models.schemas import Message, Role

logger = logging.getLogger(__name__)


class TranscriptStore:
    """Ordered log of user and assistant messages.

    Messages are immutable and can only be appended; there is no edit,
    reorder or delete.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[Callable[[Message], None]] = []

    def append(
        self, role: Role, content: str, sources: Sequence[str] | None = None
    ) -> Message:
        message = Message(role=role, content=content, sources=tuple(sources or ()))
        self._messages.append(message)
        for listener in self._listeners:
            listener(message)
        return message

    def subscribe(self, listener: Callable[[Message], None]) -> None:
        """Call `listener` with every message appended from now on."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[Message], None]) -> None:
        """Stop notifying `listener`. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
