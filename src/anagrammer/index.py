"""Dictionary index grouping words by their letter signature."""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sortedcontainers import SortedDict

from anagrammer.errors import UnsupportedInputError
from anagrammer.keys import Signature, normalize
from anagrammer.multiset import is_sub_multiset


@dataclass
class BuildStats:
    """Statistics collected while building an index."""

    lines_read: int = 0
    """Number of lines (or strings) consumed from the word source."""

    words_indexed: int = 0
    """Number of words added to the index."""

    skipped_unsupported: int = 0
    """Words skipped because they failed the ASCII-only policy."""

    skipped_empty: int = 0
    """Words skipped because they contain no letters or digits."""


class DictionaryIndex:
    """Map from signature to the words sharing that signature.

    Entries are kept sorted by signature, and that order is the fixed total order a
    search walks through.  It is very important that the index is not structurally
    modified while a search is running, since search cursors are positions in it.
    """

    def __init__(self, entries: SortedDict | None = None, *, ascii_only: bool = False) -> None:
        self._entries: SortedDict = entries if entries is not None else SortedDict()
        """Signature -> list of original words, in insertion order."""

        self.ascii_only = ascii_only
        """Normalization policy the index was built with."""

        self.build_stats = BuildStats()
        """Statistics from the last call to `build`."""

        self._searching = False

    @classmethod
    def build(cls, word_source: Iterable[str], *, ascii_only: bool = False) -> "DictionaryIndex":
        """Build an index from an iterable of raw lines or words.

        Blank lines are ignored.  Words rejected by the normalization policy, and words
        without any letters or digits, are skipped rather than aborting the build.
        """
        index = cls(ascii_only=ascii_only)
        stats = index.build_stats
        for line in word_source:
            stats.lines_read += 1
            word = line.strip()
            if not word:
                continue
            try:
                key = normalize(word, ascii_only=ascii_only)
            except UnsupportedInputError:
                stats.skipped_unsupported += 1
                continue
            if not key:
                stats.skipped_empty += 1
                continue
            index.add(key, word)
            stats.words_indexed += 1
        return index

    def add(self, key: Signature, word: str) -> None:
        """Append a word to the group for `key`."""
        self._check_not_searching()
        group = self._entries.get(key)
        if group is None:
            self._entries[key] = [word]
        else:
            group.append(word)

    def restrict_to_pool(self, pool: Signature) -> None:
        """Remove every entry that cannot be formed from the letters of `pool`."""
        self._retain(lambda key: is_sub_multiset(key, pool))

    def restrict_by_length(self, min_letters: int = 0, max_letters: int | None = None) -> None:
        """Remove every entry whose signature length is outside `[min_letters, max_letters]`.

        `max_letters=None` means no upper bound.
        """

        def _in_range(key: Signature) -> bool:
            return len(key) >= min_letters and (max_letters is None or len(key) <= max_letters)

        self._retain(_in_range)

    def _retain(self, keep: Callable[[Signature], bool]) -> None:
        self._check_not_searching()
        for key in [k for k in self._entries if not keep(k)]:
            del self._entries[key]

    def _check_not_searching(self) -> None:
        if self._searching:
            raise RuntimeError("Dictionary index cannot be modified during a search.")

    @contextmanager
    def frozen(self) -> Iterator[None]:
        """Reject structural changes to the index until the block exits."""
        if self._searching:
            raise RuntimeError("Dictionary index is already being searched.")
        self._searching = True
        try:
            yield
        finally:
            self._searching = False

    def copy(self) -> "DictionaryIndex":
        """Return an independent copy (word groups are copied too)."""
        entries = SortedDict({key: list(words) for key, words in self._entries.items()})
        clone = DictionaryIndex(entries, ascii_only=self.ascii_only)
        clone.build_stats = BuildStats(**vars(self.build_stats))
        return clone

    def words(self, key: Signature) -> list[str]:
        """Return the words stored under `key` (empty if there are none)."""
        return list(self._entries.get(key, ()))

    def position(self, key: Signature) -> int | None:
        """Return the position of `key` in the index order, or None if absent."""
        if key not in self._entries:
            return None
        return self._entries.index(key)

    def signature_at(self, pos: int) -> Signature:
        """Return the signature at position `pos` in the index order."""
        return self._entries.keys()[pos]

    def group_at(self, pos: int) -> list[str]:
        """Return the word group at position `pos` in the index order."""
        return self._entries.values()[pos]

    def items(self) -> Iterator[tuple[Signature, list[str]]]:
        """Iterate over (signature, words) pairs in index order."""
        return iter(self._entries.items())

    @property
    def word_count(self) -> int:
        """Total number of words across all signatures."""
        return sum(len(words) for words in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"DictionaryIndex({len(self)} signatures, {self.word_count} words)"
