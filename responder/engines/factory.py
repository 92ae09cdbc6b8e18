"""Factory for instantiating response engines based on configuration."""
from __future__ import annotations

from typing import Literal, Optional

from ..config import AppConfig, config as default_config
from ..host import Clock, HostInfo, system_clock
from .base import ResponseEngine
from .markov import MarkovEngine
from .remote import RemoteEngine
from .template import TemplateEngine

EngineKind = Literal["markov", "template", "remote"]


def create_engine(
    kind: EngineKind,
    app_config: Optional[AppConfig] = None,
    *,
    clock: Clock = system_clock,
    host_info: Optional[HostInfo] = None,
) -> ResponseEngine:
    """Create a :class:`ResponseEngine` for *kind* using the given configuration."""

    settings = app_config or default_config
    seed = settings.model.random_seed
    max_input_length = settings.history.max_message_length
    if kind == "markov":
        return MarkovEngine(
            settings.markov,
            max_input_length=max_input_length,
            seed=seed,
            clock=clock,
        )
    if kind == "template":
        return TemplateEngine(
            settings.template,
            host_info=host_info,
            max_input_length=max_input_length,
            seed=seed,
            clock=clock,
        )
    if kind == "remote":
        return RemoteEngine(seed=seed, clock=clock)
    raise ValueError(f"Unsupported model kind: {kind}")
