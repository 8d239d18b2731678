"""Canonical letter signatures for words and phrases."""

from typing import TypeAlias

from anagrammer.errors import UnsupportedInputError

Signature: TypeAlias = str
"""Sorted, case-folded, alphanumeric-only characters of a word.

Two words are anagrams of each other iff their signatures are equal.
"""


def normalize(word: str, *, ascii_only: bool = False) -> Signature:
    """Return the signature of a word or phrase.

    Args:
        word: Raw text, as found in the word list or typed by the user.
        ascii_only: Use the restricted ASCII policy instead of full Unicode folding.
            The same policy must be used for the dictionary and the query.

    Raises:
        UnsupportedInputError: If `ascii_only` is set and the text contains non-ASCII
            characters.
    """
    if ascii_only:
        if not word.isascii():
            bad_chars = "".join(sorted({ch for ch in word if not ch.isascii()}))
            raise UnsupportedInputError(word, bad_chars)
        folded = word.lower()
    else:
        # Folding may expand a character (e.g. "ß" -> "ss"), so filter afterwards
        folded = word.casefold()
    return "".join(sorted(ch for ch in folded if ch.isalnum()))
