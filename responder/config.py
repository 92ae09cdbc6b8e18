"""Application configuration management."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(slots=True)
class HistoryConfig:
    """Bounds for the in-memory conversation log."""

    capacity: int = int(os.getenv("RESPONDER_HISTORY_CAPACITY", "50"))
    max_message_length: int = int(os.getenv("RESPONDER_MAX_MESSAGE_LENGTH", "256"))


@dataclass(slots=True)
class MarkovConfig:
    """Limits and tuning for the bigram Markov generator."""

    max_states: int = int(os.getenv("MARKOV_MAX_STATES", "384"))
    max_followers: int = int(os.getenv("MARKOV_MAX_FOLLOWERS", "8"))
    max_frequency: int = 255
    start_attempts: int = int(os.getenv("MARKOV_START_ATTEMPTS", "10"))
    max_words_per_sentence: int = int(os.getenv("MARKOV_MAX_WORDS_PER_SENTENCE", "20"))
    max_response_length: int = int(os.getenv("MARKOV_MAX_RESPONSE_LENGTH", "500"))
    min_context_length: int = 4
    min_relevance_word_length: int = 4


@dataclass(slots=True)
class TemplateConfig:
    """Limits and scoring constants for the template engine."""

    max_templates: int = int(os.getenv("TEMPLATE_MAX_TEMPLATES", "150"))
    max_patterns: int = 5
    max_pattern_length: int = 64
    max_template_length: int = 256
    max_keywords: int = int(os.getenv("TEMPLATE_MAX_KEYWORDS", "40"))
    min_keyword_length: int = 3
    domain_bonus: int = 50
    max_importance: int = 255
    match_threshold: int = int(os.getenv("TEMPLATE_MATCH_THRESHOLD", "50"))
    max_response_length: int = int(os.getenv("TEMPLATE_MAX_RESPONSE_LENGTH", "512"))


@dataclass(slots=True)
class ModelConfig:
    """Model selection options."""

    default_model: str = os.getenv("RESPONDER_DEFAULT_MODEL", "markov").lower()
    random_seed: Optional[int] = _optional_int(os.getenv("RESPONDER_RANDOM_SEED"))


@dataclass(slots=True)
class AppConfig:
    """Top-level application configuration."""

    history: HistoryConfig = field(default_factory=HistoryConfig)
    markov: MarkovConfig = field(default_factory=MarkovConfig)
    template: TemplateConfig = field(default_factory=TemplateConfig)
    model: ModelConfig = field(default_factory=ModelConfig)


config = AppConfig()
