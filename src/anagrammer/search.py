"""Recursive anagram search over a dictionary index."""

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import product
from time import time
from typing import TypeAlias

from anagrammer.index import DictionaryIndex
from anagrammer.keys import Signature
from anagrammer.multiset import subtract

Sink: TypeAlias = Callable[[list[str]], object]
"""Receives one result at a time, as a list of words in reverse phrase order.

A truthy return value stops the search.
"""


@dataclass
class SearchStats:
    """Statistics collected during a search."""

    nodes_visited: int = 0
    """Number of recursive calls made."""

    results_emitted: int = 0
    """Number of word sequences passed to the sink."""

    max_depth_reached: int = 0
    """Largest number of words chosen along any branch."""

    signatures_considered: int = 0
    """Number of signatures left in the index after narrowing to the pool."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""

    stopped: bool = False
    """Whether the sink asked for the search to stop early."""


class SearchEngine:
    """Enumerate every partition of a letter pool into dictionary words.

    The engine owns its index: `find_anagrams` narrows it in place, so pass
    `index.copy()` if the index is needed again afterwards.
    """

    def __init__(
        self,
        index: DictionaryIndex,
        *,
        allow_repeats: bool = False,
        max_words_cap: int | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            index (DictionaryIndex): The index to search.  Taken over by the engine.
            allow_repeats (bool): Whether a signature may be used more than once in the
                same result (e.g. "a a" for "aa").
            max_words_cap (int | None): Optional hard limit on the number of words per
                result, which is also the recursion depth limit.
        """
        self.index = index
        self.allow_repeats = allow_repeats
        self.max_words_cap = max_words_cap
        self.stats = SearchStats()

        self._sink: Sink | None = None

    def find_anagrams(
        self,
        pool: Signature,
        sink: Sink,
        *,
        min_words: int = 0,
        max_words: int | None = None,
    ) -> SearchStats:
        """Find all anagrams of `pool` and pass each one to `sink`.

        Args:
            pool (Signature): Normalized letters of the phrase.
            sink (Sink): Called once per result with the words in reverse phrase order.
            min_words (int): Minimum number of words per result.
            max_words (int | None): Maximum number of words per result.  None means
                unbounded, which in practice is one word per letter.

        Returns:
            Statistics for this search.  Bound combinations that cannot be satisfied
            (including negative bounds) simply produce no results.
        """
        self.stats = SearchStats()
        if min_words < 0 or (max_words is not None and max_words < 0):
            return self.stats

        # Every indexed signature is non-empty, so no result has more words than letters
        limit = len(pool) if max_words is None else min(max_words, len(pool))
        if self.max_words_cap is not None:
            limit = min(limit, self.max_words_cap)

        self.index.restrict_to_pool(pool)
        self.stats.signatures_considered = len(self.index)

        with self.index.frozen():
            self._sink = sink
            try:
                self._search(0, pool, min_words, limit, [])
            finally:
                self._sink = None

        return self.stats

    def _search(
        self,
        cursor: int,
        pool: Signature,
        min_words: int,
        max_words: int,
        chosen: list[list[str]],
    ) -> bool:
        """Extend the partial result `chosen` until `pool` is used up.

        Only positions at or after `cursor` may be selected, and each selection moves the
        cursor forward, so every multiset of signatures is reached along exactly one
        path through the index order.

        Returns:
            True if the sink asked to stop.
        """
        stats = self.stats
        stats.nodes_visited += 1
        stats.max_depth_reached = max(stats.max_depth_reached, len(chosen))

        if min_words > max_words:
            return False

        if not pool and min_words == 0:
            return self._emit(chosen)

        if max_words == 0:
            return False

        if max_words == 1:
            # Only a word using the whole pool can finish this branch
            pos = self.index.position(pool)
            if pos is None or pos < cursor:
                return False
            chosen.append(self.index.group_at(pos))
            try:
                return self._emit(chosen)
            finally:
                chosen.pop()

        next_min = max(min_words - 1, 0)
        index = self.index
        for pos in range(cursor, len(index)):
            new_pool = subtract(index.signature_at(pos), pool)
            if new_pool is None:
                continue
            next_cursor = pos if self.allow_repeats else pos + 1
            chosen.append(index.group_at(pos))
            try:
                if self._search(next_cursor, new_pool, next_min, max_words - 1, chosen):
                    return True
            finally:
                chosen.pop()

        return False

    def _emit(self, chosen: list[list[str]]) -> bool:
        """Pass every spelling of the chosen signatures to the sink."""
        assert self._sink is not None, "Sink must be set for the duration of a search."
        stats = self.stats
        stats.max_depth_reached = max(stats.max_depth_reached, len(chosen))
        for words in product(*chosen):
            stats.results_emitted += 1
            if self._sink(list(reversed(words))):
                stats.stopped = True
                return True
        return False
