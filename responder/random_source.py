"""Seedable random number source shared by the response engines."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import numpy as np

from .host import Clock, system_clock

_LOGGER = logging.getLogger(__name__)


def clock_seed(moment: datetime) -> int:
    """Derive a seed from a wall-clock reading."""

    return moment.hour * 3600 + moment.minute * 60 + moment.second + moment.year


class RandomSource:
    """Deterministic pseudo-random integers backed by :mod:`numpy`.

    Not suitable for anything security related. Given the same seed, the
    sequence of draws is fully reproducible.
    """

    def __init__(self, seed: Optional[int] = None, *, clock: Clock = system_clock) -> None:
        self._clock = clock
        self.seed = 0
        self._generator = np.random.default_rng(0)
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> int:
        """Restart the sequence from *seed*, or from the clock when it is None."""

        if seed is None:
            seed = clock_seed(self._clock())
        self.seed = seed
        self._generator = np.random.default_rng(seed)
        _LOGGER.debug("Random source seeded with %d", seed)
        return seed

    def below(self, upper: int) -> int:
        """Return a uniform integer in ``[0, upper)``."""

        if upper <= 0:
            raise ValueError("upper bound must be positive")
        return int(self._generator.integers(upper))
