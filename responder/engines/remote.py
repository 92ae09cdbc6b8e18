"""Placeholder for a network-backed response engine."""
from __future__ import annotations

from typing import Optional

from .base import ResponseEngine


class RemoteEngine(ResponseEngine):
    """Reserved slot for a hosted model; every call is unsupported offline."""

    welcome_message = "The remote model is not available in offline mode."

    def initialize(self) -> None:
        raise NotImplementedError("Remote model support is not available")

    def generate(self, user_message: Optional[str] = None) -> str:
        raise NotImplementedError("Remote model support is not available")
