"""First-match keyword selection with a uniform random fallback."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class Selection:
    response: str
    keyword: Optional[str] = None
    default_index: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.keyword is not None


def order_words(words: Iterable[str], word_order: str = "sorted") -> List[str]:
    if word_order == "sorted":
        return sorted(words)
    return list(words)


def select(
    words: Iterable[str],
    table: Mapping[str, str],
    defaults: Sequence[str],
    rng: random.Random,
) -> Selection:
    """
    Return the response for the first word that is a key in ``table``.

    Words are scanned in the order they are given and the scan stops at the
    first hit. When nothing matches (including an empty word set) a default
    is picked uniformly from ``defaults``.
    """
    for word in words:
        response = table.get(word)
        if response is not None:
            return Selection(response=response, keyword=word)
    index = rng.randrange(len(defaults))
    return Selection(response=defaults[index], default_index=index)


def generate(
    words: Iterable[str],
    table: Mapping[str, str],
    defaults: Sequence[str],
    rng: random.Random,
) -> str:
    return select(words, table, defaults, rng).response


class ResponseSelector:
    """Binds a read-only table and default list to a lock-guarded RNG."""

    def __init__(
        self,
        table: Mapping[str, str],
        defaults: Sequence[str],
        rng: Optional[random.Random] = None,
        word_order: str = "sorted",
    ) -> None:
        if not defaults:
            raise ValueError("defaults must hold at least one response")
        self._table = table
        self._defaults = defaults
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()
        self._word_order = word_order

    def select(self, words: Iterable[str]) -> Selection:
        ordered = order_words(words, self._word_order)
        with self._rng_lock:
            return select(ordered, self._table, self._defaults, self._rng)

    def generate(self, words: Iterable[str]) -> str:
        return self.select(words).response
