"""Pattern and keyword matching template engine."""
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import TemplateConfig, config
from ..data.templates import STATIC_TEMPLATES
from ..data.vocabulary import DOMAIN_TERMS, KEYWORD_STOP_WORDS
from ..host import Clock, HostInfo, format_date, format_time, read_host_info, system_clock
from ..random_source import RandomSource
from .base import ResponseEngine

_LOGGER = logging.getLogger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"[\s,.!?;:]+")
# An unterminated marker swallows the rest of the template.
_SLOT_RE = re.compile(r"\{\{([^}]*)\}?\}?")

GREETING_RESPONSE = "Hello! I'm your desktop assistant. How can I help you today?"
NO_TEMPLATE_RESPONSE = "I'm thinking about how to respond..."
PLACEHOLDER_WORD = "that"


class Category(str, enum.Enum):
    GENERAL = "general"
    TECH = "tech"
    PLATFORM = "platform"
    HELP = "help"
    GREETING = "greeting"
    UNSURE = "unsure"


FALLBACK_CATEGORIES = (Category.GENERAL, Category.UNSURE)


@dataclass(frozen=True, slots=True)
class Template:
    """A response skeleton and the phrases that trigger it."""

    patterns: Tuple[str, ...]
    response: str
    category: Category


@dataclass(frozen=True, slots=True)
class ExtractedKeyword:
    word: str
    importance: int


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _format_memory(size_bytes: int) -> str:
    megabytes = size_bytes / (1024 * 1024)
    if megabytes >= 1024:
        return f"{megabytes / 1024:.1f} GB"
    return f"{megabytes:.1f} MB"


def _format_uptime(seconds: float) -> str:
    minutes_total = int(seconds) // 60
    hours, minutes = divmod(minutes_total, 60)
    if hours > 0:
        return f"Your computer has been running for {hours} hours and {minutes} minutes."
    return f"Your computer has been running for {minutes} minutes."


def host_templates(info: HostInfo) -> List[Tuple[Category, Tuple[str, ...], str]]:
    """Build templates whose text embeds facts about the running host."""

    entries: List[Tuple[Category, Tuple[str, ...], str]] = [
        (
            Category.PLATFORM,
            ("current date", "today date", "what day", "what date"),
            "Today is {{date}}.",
        ),
        (
            Category.PLATFORM,
            ("current time", "what time", "time now"),
            "The current time is {{time}}.",
        ),
    ]
    memory_patterns = (
        "ram installed",
        "memory installed",
        "total memory",
        "how much memory",
        "how much ram",
    )
    if info.memory_bytes:
        memory_text = f"Your computer has about {_format_memory(info.memory_bytes)} of RAM installed."
    else:
        memory_text = "I couldn't find out how much RAM your computer has installed."
    entries.append((Category.PLATFORM, memory_patterns, memory_text))
    if info.free_memory_bytes:
        entries.append(
            (
                Category.PLATFORM,
                ("free memory", "available memory", "free ram"),
                f"You have around {_format_memory(info.free_memory_bytes)} of free memory "
                "available right now.",
            )
        )
    entries.append(
        (
            Category.PLATFORM,
            ("system version", "os version", "which system"),
            f"You're running {info.platform_version} on your computer.",
        )
    )
    if info.processor:
        entries.append(
            (
                Category.PLATFORM,
                ("processor", "cpu", "chip"),
                f"Your computer has a {info.processor} processor.",
            )
        )
    if info.uptime_seconds is not None:
        entries.append(
            (
                Category.PLATFORM,
                ("uptime", "how long running", "running time"),
                _format_uptime(info.uptime_seconds),
            )
        )
    return entries


class TemplateEngine(ResponseEngine):
    """Answer with the catalog template that best matches the user's words."""

    welcome_message = GREETING_RESPONSE

    def __init__(
        self,
        template_config: TemplateConfig | None = None,
        *,
        static_templates: Iterable[Tuple[str, Sequence[str], str]] = STATIC_TEMPLATES,
        host_info: Optional[HostInfo] = None,
        max_input_length: int | None = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        clock: Clock = system_clock,
    ) -> None:
        super().__init__(seed=seed, rng=rng, clock=clock)
        self.settings = template_config or config.template
        self.static_templates = tuple(static_templates)
        self.host_info = host_info
        self.max_input_length = max_input_length or config.history.max_message_length
        self.templates: List[Template] = []

    def initialize(self) -> None:
        self.rng.reseed(self.seed)
        self.templates = []
        for category, patterns, response in self.static_templates:
            self.add_template(response, Category(category), patterns)
        info = self.host_info or read_host_info()
        for category, patterns, response in host_templates(info):
            self.add_template(response, category, patterns)
        _LOGGER.info("Template catalog loaded with %d templates", len(self.templates))

    def dispose(self) -> None:
        self.templates = []

    def add_template(self, response: str, category: Category, patterns: Sequence[str]) -> bool:
        if len(self.templates) >= self.settings.max_templates:
            _LOGGER.debug("Template catalog full, dropping %r", response[:40])
            return False
        limit = self.settings.max_pattern_length
        self.templates.append(
            Template(
                patterns=tuple(pattern[:limit] for pattern in patterns[: self.settings.max_patterns]),
                response=response[: self.settings.max_template_length],
                category=category,
            )
        )
        return True

    def extract_keywords(self, text: str) -> List[ExtractedKeyword]:
        """Pull the meaningful words out of *text*, scored by importance."""

        keywords: List[ExtractedKeyword] = []
        for token in _TOKEN_SPLIT_RE.split(text[: self.max_input_length]):
            if len(keywords) >= self.settings.max_keywords:
                break
            word = token.lower()[: self.settings.max_pattern_length]
            if len(word) < self.settings.min_keyword_length or word in KEYWORD_STOP_WORDS:
                continue
            importance = 50 + 5 * len(word)
            if word in DOMAIN_TERMS:
                importance += self.settings.domain_bonus
            keywords.append(ExtractedKeyword(word, min(importance, self.settings.max_importance)))
        return keywords

    def score(self, template: Template, user_input: str, keywords: Sequence[ExtractedKeyword]) -> int:
        lowered = user_input.lower()
        total = 0
        for pattern in template.patterns:
            if pattern.lower() in lowered:
                total += 100 + len(pattern)
        for keyword in keywords:
            for pattern in template.patterns:
                if keyword.word in pattern:
                    total += keyword.importance
        return total

    def select_best(self, user_input: str, keywords: Sequence[ExtractedKeyword]) -> Optional[Template]:
        """Return the highest scoring template, or a random general one."""

        if not self.templates:
            return None
        best: Optional[Template] = None
        best_score = 0
        for template in self.templates:
            current = self.score(template, user_input, keywords)
            if current > best_score:
                best, best_score = template, current
        if best is not None and best_score >= self.settings.match_threshold:
            return best

        fallbacks = [t for t in self.templates if t.category in FALLBACK_CATEGORIES]
        if not fallbacks:
            return self.templates[0]
        _LOGGER.debug("Best template score %d below threshold, using a fallback", best_score)
        return fallbacks[self.rng.below(len(fallbacks))]

    def render(
        self,
        template: Template,
        keywords: Sequence[ExtractedKeyword],
        *,
        now: Optional[datetime] = None,
    ) -> str:
        """Fill the template's ``{{slot}}`` markers."""

        pieces: List[str] = []
        at_start = True
        position = 0
        for match in _SLOT_RE.finditer(template.response):
            literal = template.response[position : match.start()]
            if literal:
                pieces.append(_capitalize_first(literal) if at_start else literal)
                at_start = False
            position = match.end()

            name = match.group(1).strip()
            if name.startswith("keyword"):
                digits = name[len("keyword") :]
                index = int(digits) if digits.isdigit() else 0
                word = keywords[index].word if index < len(keywords) else PLACEHOLDER_WORD
                pieces.append(_capitalize_first(word) if at_start else word)
                at_start = False
            elif name == "time":
                pieces.append(format_time(now or self.clock()))
                at_start = False
            elif name == "date":
                pieces.append(format_date(now or self.clock()))
                at_start = False
            else:
                _LOGGER.debug("Skipping unknown slot %r", name)

        literal = template.response[position:]
        if literal:
            pieces.append(_capitalize_first(literal) if at_start else literal)
        return "".join(pieces)[: self.settings.max_response_length]

    def generate(self, user_message: Optional[str] = None) -> str:
        if not user_message:
            return GREETING_RESPONSE
        user_input = user_message[: self.max_input_length]
        keywords = self.extract_keywords(user_input)
        template = self.select_best(user_input, keywords)
        if template is None:
            return NO_TEMPLATE_RESPONSE
        return self.render(template, keywords)
