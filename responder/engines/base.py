"""Base interface for response generation strategies."""
from __future__ import annotations

import abc
from typing import Optional

from ..host import Clock, system_clock
from ..random_source import RandomSource


class ResponseEngine(abc.ABC):
    """Abstract base class for a response engine."""

    welcome_message: str = "Hello! How can I help you today?"

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        clock: Clock = system_clock,
    ) -> None:
        self.seed = seed
        self.clock = clock
        self.rng = rng or RandomSource(seed, clock=clock)

    @abc.abstractmethod
    def initialize(self) -> None:
        """Build the engine's state from scratch."""

    @abc.abstractmethod
    def generate(self, user_message: Optional[str] = None) -> str:
        """Produce a reply to the most recent user message."""

    def observe_user_message(self, text: str) -> None:
        """Optionally learn from a message the user just sent.

        Subclasses can override to adapt to the user's own wording. The
        default implementation ignores the message.
        """

    def dispose(self) -> None:
        """Release engine state at process teardown."""
