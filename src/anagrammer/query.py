"""Representation of a single anagram query."""

from dataclasses import asdict, dataclass

from anagrammer.keys import Signature, normalize


@dataclass
class Query:
    """A phrase to find anagrams of, with bounds on the results."""

    phrase: str
    """The raw phrase, as typed by the user."""

    min_words: int = 0
    """Minimum number of words per result."""

    max_words: int | None = None
    """Maximum number of words per result.  None means unbounded."""

    min_letters: int = 0
    """Minimum number of letters per word."""

    max_letters: int | None = None
    """Maximum number of letters per word.  None means unbounded."""

    def __str__(self) -> str:
        """Return a one-line summary of the query."""
        max_words = "*" if self.max_words is None else self.max_words
        max_letters = "*" if self.max_letters is None else self.max_letters
        return (
            f"{self.phrase!r} (words: {self.min_words}..{max_words}, "
            f"letters per word: {self.min_letters}..{max_letters})"
        )

    @property
    def has_length_bounds(self) -> bool:
        """Whether the query restricts the number of letters per word."""
        return (self.min_letters, self.max_letters) != (0, None)

    def signature(self, *, ascii_only: bool = False) -> Signature:
        """Normalize the phrase into the letter pool to search.

        Raises:
            UnsupportedInputError: If `ascii_only` is set and the phrase is not ASCII.
        """
        return normalize(self.phrase, ascii_only=ascii_only)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the query, for logging."""
        return asdict(self)
