"""In-memory conversation management."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Literal, Optional

from ..config import HistoryConfig, config

_LOGGER = logging.getLogger(__name__)

Role = Literal["user", "assistant"]


@dataclass(frozen=True, slots=True)
class Message:
    """Represents a single message in the conversation."""

    role: Role
    text: str


class ConversationHistory:
    """Fixed-capacity circular log of the exchanged messages.

    Once full, every append overwrites the oldest slot, so the log always
    holds the newest ``capacity`` messages.
    """

    def __init__(self, history_config: HistoryConfig | None = None) -> None:
        settings = history_config or config.history
        if settings.capacity <= 0:
            raise ValueError("History capacity must be positive")
        self.capacity = settings.capacity
        self.max_message_length = settings.max_message_length
        self._slots: List[Optional[Message]] = [None] * self.capacity
        self.head = 0
        self.count = 0
        self.is_full = False

    def append(self, role: Role, text: str) -> Message:
        message = Message(role=role, text=text[: self.max_message_length])
        if self.is_full:
            _LOGGER.debug("History full, overwriting slot %d", self.head)
            self._slots[self.head] = message
            self.head = (self.head + 1) % self.capacity
            return message
        self._slots[(self.head + self.count) % self.capacity] = message
        self.count += 1
        if self.count == self.capacity:
            self.is_full = True
        return message

    def __iter__(self) -> Iterator[Message]:
        for offset in range(self.count):
            message = self._slots[(self.head + offset) % self.capacity]
            if message is not None:
                yield message

    def __len__(self) -> int:
        return self.count

    def messages(self) -> List[Message]:
        return list(self)

    def last_user_message(self) -> Optional[str]:
        """Return the text of the newest user message, if any."""

        for offset in range(self.count - 1, -1, -1):
            message = self._slots[(self.head + offset) % self.capacity]
            if message is not None and message.role == "user":
                return message.text
        return None

    def clear(self) -> None:
        self._slots = [None] * self.capacity
        self.head = 0
        self.count = 0
        self.is_full = False
