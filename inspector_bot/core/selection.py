"""Ordering and truncation policy for trending result sets."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .errors import NoResults
from .models import RepoRecord

LOGGER = logging.getLogger(__name__)

NO_TRENDING_MESSAGE = "there are not trending repos yet for today, try again later"


class ResultSelector:
    """Shuffles candidates and keeps a bounded prefix.

    Trending lists are dominated by the same few repositories on repeated
    queries; shuffling before truncating gives each invocation a different
    sample.
    """

    def __init__(self, cap: int, rng: Optional[random.Random] = None, shuffle: bool = True) -> None:
        if cap < 1:
            raise ValueError(f"cap must be a positive integer, got {cap}")
        self._cap = cap
        self._rng = rng or random.Random()
        self._shuffle = shuffle

    @property
    def cap(self) -> int:
        return self._cap

    def select(self, candidates: Sequence[RepoRecord]) -> List[RepoRecord]:
        if not candidates:
            raise NoResults(NO_TRENDING_MESSAGE)

        items = list(candidates)
        if self._shuffle:
            self._rng.shuffle(items)
        batch = items[: self._cap]
        LOGGER.debug("Selected %s of %s candidate(s)", len(batch), len(items))
        return batch
