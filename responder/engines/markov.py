"""Bigram Markov-chain response engine."""
from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from ..config import MarkovConfig, config
from ..data.corpus import SEED_TEXT
from ..data.vocabulary import RELEVANCE_STOP_WORDS, TOPIC_KEYWORDS
from ..host import Clock, system_clock
from ..random_source import RandomSource
from .base import ResponseEngine

_LOGGER = logging.getLogger(__name__)

SENTENCE_ENDINGS = ".!?"
_TRAILING_PUNCTUATION = "".join(ch for ch in string.punctuation if ch not in SENTENCE_ENDINGS)
_WORD_RE = re.compile(r"[a-z0-9']+")

EMPTY_CHAIN_RESPONSE = "I don't have enough information yet."


def ends_sentence(word: str) -> bool:
    return bool(word) and word[-1] in SENTENCE_ENDINGS


def tokenize_training_text(text: str) -> List[str]:
    """Split *text* on whitespace, keeping only terminal punctuation."""

    tokens: List[str] = []
    for raw in text.split():
        token = raw.rstrip(_TRAILING_PUNCTUATION)
        if token:
            tokens.append(token)
    return tokens


@dataclass(slots=True)
class Follower:
    """A word observed after a bigram, with its occurrence count."""

    word: str
    frequency: int = 1


@dataclass(slots=True)
class MarkovState:
    """A two-word key and the words that followed it during training."""

    key: str
    followers: List[Follower] = field(default_factory=list)
    is_sentence_start: bool = False

    @property
    def words(self) -> List[str]:
        return self.key.split(" ")

    def add_follower(self, word: str, *, max_followers: int, max_frequency: int) -> bool:
        """Record *word* as a follower; return False if it could not be stored.

        A full follower list only makes room by replacing an entry that has
        been seen exactly once, so frequent followers are never evicted.
        """

        for follower in self.followers:
            if follower.word == word:
                follower.frequency = min(follower.frequency + 1, max_frequency)
                return True
        if len(self.followers) < max_followers:
            self.followers.append(Follower(word))
            return True
        for index, follower in enumerate(self.followers):
            if follower.frequency == 1:
                self.followers[index] = Follower(word)
                return True
        return False


class MarkovChain:
    """Bounded set of bigram states keyed by their exact text."""

    def __init__(self, max_states: int) -> None:
        self.max_states = max_states
        self._states: Dict[str, MarkovState] = {}
        self._order: List[MarkovState] = []

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[MarkovState]:
        return iter(self._order)

    def __getitem__(self, index: int) -> MarkovState:
        return self._order[index]

    def find(self, key: str) -> Optional[MarkovState]:
        return self._states.get(key)

    def find_or_insert(self, key: str) -> Optional[MarkovState]:
        """Return the state for *key*, creating it while there is room."""

        state = self._states.get(key)
        if state is not None:
            return state
        if len(self._order) >= self.max_states:
            return None
        state = MarkovState(key=key)
        self._states[key] = state
        self._order.append(state)
        return state

    def reset(self) -> None:
        self._states.clear()
        self._order.clear()


class MarkovEngine(ResponseEngine):
    """Generate replies by a weighted random walk over trained bigrams."""

    welcome_message = "Hello! I've been reading up on computers. Ask me anything."

    def __init__(
        self,
        markov_config: MarkovConfig | None = None,
        *,
        seed_text: Iterable[str] = SEED_TEXT,
        max_input_length: int | None = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        clock: Clock = system_clock,
    ) -> None:
        super().__init__(seed=seed, rng=rng, clock=clock)
        self.settings = markov_config or config.markov
        self.seed_text = tuple(seed_text)
        self.max_input_length = max_input_length or config.history.max_message_length
        self.chain = MarkovChain(self.settings.max_states)

    def initialize(self) -> None:
        self.rng.reseed(self.seed)
        self.chain.reset()
        for text in self.seed_text:
            self.train(text)
        _LOGGER.info("Markov chain trained with %d states", len(self.chain))

    def dispose(self) -> None:
        self.chain.reset()

    def observe_user_message(self, text: str) -> None:
        self.train(text[: self.max_input_length])

    def train(self, text: str) -> None:
        tokens = tokenize_training_text(text)
        for index in range(len(tokens) - 1):
            key = f"{tokens[index]} {tokens[index + 1]}"
            state = self.chain.find_or_insert(key)
            if state is None:
                _LOGGER.debug("Markov chain full, skipping state %r", key)
                continue
            if index == 0 or ends_sentence(tokens[index - 1]):
                state.is_sentence_start = True
            if index + 2 >= len(tokens):
                continue
            stored = state.add_follower(
                tokens[index + 2],
                max_followers=self.settings.max_followers,
                max_frequency=self.settings.max_frequency,
            )
            if not stored:
                _LOGGER.debug("No room for follower %r of %r", tokens[index + 2], key)

    def choose_follower(self, state: MarkovState) -> str:
        """Draw a follower with probability proportional to its frequency."""

        total = sum(follower.frequency for follower in state.followers)
        roll = self.rng.below(total)
        for follower in state.followers:
            if roll < follower.frequency:
                return follower.word
            roll -= follower.frequency
        return state.followers[-1].word

    def random_start(self) -> MarkovState:
        """Pick a random state, preferring one that opens a sentence."""

        state = self.chain[self.rng.below(len(self.chain))]
        for _ in range(self.settings.start_attempts - 1):
            if state.is_sentence_start:
                break
            state = self.chain[self.rng.below(len(self.chain))]
        return state

    def _start_from_topic(self, message: str) -> Optional[MarkovState]:
        topic = next((keyword for keyword in TOPIC_KEYWORDS if keyword in message), None)
        if topic is None:
            return None
        for state in self.chain:
            if state.is_sentence_start and topic in state.key.lower():
                return state
        return None

    def _start_from_relevance(self, message: str) -> Optional[MarkovState]:
        tokens = [
            token
            for token in _WORD_RE.findall(message)
            if len(token) >= self.settings.min_relevance_word_length
            and token not in RELEVANCE_STOP_WORDS
        ]
        best: Optional[MarkovState] = None
        best_score = 0
        for token in tokens:
            for state in self.chain:
                if token not in state.key.lower():
                    continue
                score = 1
                if state.is_sentence_start:
                    score += 2
                if len(state.followers) > 2:
                    score += 1
                if score > best_score:
                    best, best_score = state, score
        return best

    def choose_start(self, user_message: Optional[str] = None) -> MarkovState:
        """Find an opening state related to *user_message* if possible."""

        if user_message and len(user_message) >= self.settings.min_context_length:
            message = user_message[: self.max_input_length].lower()
            state = self._start_from_topic(message) or self._start_from_relevance(message)
            if state is not None:
                return state
        return self.random_start()

    def generate(self, user_message: Optional[str] = None) -> str:
        if not len(self.chain):
            return EMPTY_CHAIN_RESPONSE

        target = self.rng.below(2) + 1
        budget = self.settings.max_response_length
        state = self.choose_start(user_message)
        words = state.words
        current = state.key
        length = len(state.key)
        sentences = 0
        since_boundary = len(words)

        while sentences < target and length < budget:
            state = self.chain.find(current)
            runaway = since_boundary > self.settings.max_words_per_sentence
            if state is None or not state.followers or runaway:
                if runaway:
                    _LOGGER.debug("Forcing a sentence break after %d words", since_boundary)
                if not ends_sentence(words[-1]):
                    words[-1] += "."
                    length += 1
                sentences += 1
                if sentences >= target:
                    break
                state = self.random_start()
                words.extend(state.words)
                length += len(state.key) + 1
                current = state.key
                since_boundary = 2
                continue

            word = self.choose_follower(state)
            words.append(word)
            length += len(word) + 1
            current = f"{current.split(' ', 1)[1]} {word}"
            since_boundary += 1
            if ends_sentence(word):
                sentences += 1
                since_boundary = 0

        response = " ".join(words)[:budget].rstrip()
        if not ends_sentence(response):
            response = response[: budget - 1].rstrip() + "."
        return response
