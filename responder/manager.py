"""Dispatcher that routes conversation turns to the active response engine."""
from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Mapping, Optional, Set

from .config import AppConfig, config as default_config
from .engines.base import ResponseEngine
from .engines.factory import create_engine
from .memory.conversation import ConversationHistory

_LOGGER = logging.getLogger(__name__)

REMOTE_UNAVAILABLE_RESPONSE = "The remote model is not available in offline mode."


class ModelKind(str, enum.Enum):
    MARKOV = "markov"
    TEMPLATE = "template"
    REMOTE = "remote"


EngineFactory = Callable[[ModelKind], ResponseEngine]


class ModelManager:
    """Holds the active generation strategy and the shared conversation log.

    Engines are created and initialized the first time they are selected and
    are kept alive across later switches.
    """

    def __init__(
        self,
        app_config: AppConfig | None = None,
        *,
        engines: Mapping[ModelKind, ResponseEngine] | None = None,
        engine_factory: EngineFactory | None = None,
        history: ConversationHistory | None = None,
    ) -> None:
        self.config = app_config or default_config
        self.history = history if history is not None else ConversationHistory(self.config.history)
        self._engines: Dict[ModelKind, ResponseEngine] = dict(engines or {})
        self._engine_factory = engine_factory or (
            lambda kind: create_engine(kind.value, self.config)
        )
        self._initialized: Set[ModelKind] = set()
        self.active_model = self._coerce(self.config.model.default_model) or ModelKind.MARKOV
        self._ensure_initialized(self.active_model)

    @staticmethod
    def _coerce(model: ModelKind | str) -> Optional[ModelKind]:
        try:
            return ModelKind(model)
        except ValueError:
            _LOGGER.warning("Ignoring unknown model %r", model)
            return None

    def engine(self, model: ModelKind) -> ResponseEngine:
        if model not in self._engines:
            self._engines[model] = self._engine_factory(model)
        return self._engines[model]

    def is_initialized(self, model: ModelKind) -> bool:
        return model in self._initialized

    def _ensure_initialized(self, model: ModelKind) -> None:
        if model in self._initialized:
            return
        self._initialize(model)

    def _initialize(self, model: ModelKind) -> None:
        engine = self.engine(model)
        self._initialized.add(model)
        self.history.clear()
        try:
            engine.initialize()
        except NotImplementedError:
            if model is not ModelKind.REMOTE:
                raise
            _LOGGER.warning("Model %s is not implemented; it will answer with a fixed message", model.value)
        self.history.append("assistant", engine.welcome_message)
        _LOGGER.info("Initialized %s model", model.value)

    def set_active_model(self, model: ModelKind | str) -> None:
        kind = self._coerce(model)
        if kind is None or kind == self.active_model:
            return
        _LOGGER.info("Switching model from %s to %s", self.active_model.value, kind.value)
        self.active_model = kind
        self._ensure_initialized(kind)

    def reset(self) -> None:
        """Re-initialize the active model and start a fresh conversation."""

        self._initialize(self.active_model)

    def add_user_prompt(self, text: str) -> None:
        message = self.history.append("user", text)
        if self.active_model in self._initialized:
            self.engine(self.active_model).observe_user_message(message.text)

    def add_assistant_response(self, text: str) -> None:
        self.history.append("assistant", text)

    def generate_response(self, history: ConversationHistory | None = None) -> str:
        conversation = history if history is not None else self.history
        user_message = conversation.last_user_message()
        self._ensure_initialized(self.active_model)
        engine = self.engine(self.active_model)
        try:
            return engine.generate(user_message)
        except NotImplementedError:
            if self.active_model is not ModelKind.REMOTE:
                raise
            _LOGGER.warning("Model %s cannot generate responses", self.active_model.value)
            return REMOTE_UNAVAILABLE_RESPONSE

    def shutdown(self) -> None:
        """Dispose every engine that was created during this process."""

        for engine in self._engines.values():
            engine.dispose()
        self._engines.clear()
        self._initialized.clear()


def create_manager(app_config: AppConfig | None = None) -> ModelManager:
    return ModelManager(app_config)
