"""Module for loading word lists."""

from pathlib import Path

from anagrammer.errors import SourceUnavailableError
from anagrammer.index import DictionaryIndex

DEFAULT_WORD_LIST_PATH = Path(__file__).parent / "english-words.txt"
"""Word list bundled with the package, used when no other list is configured."""


def load_word_list(path: str | Path) -> list[str]:
    """Read a word list file, one word per line.

    Lines are returned as read (minus line endings); trimming and skipping blank lines is
    left to the index builder.

    Raises:
        SourceUnavailableError: If the file does not exist or cannot be read as UTF-8.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise SourceUnavailableError(f"Word list file not found: {word_list_path}")
    try:
        with word_list_path.open("r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"Could not read word list {word_list_path}: {e}") from e


def default_word_list() -> list[str]:
    """Return the bundled English word list."""
    return load_word_list(DEFAULT_WORD_LIST_PATH)


def load_index(path: str | Path | None = None, *, ascii_only: bool = False) -> DictionaryIndex:
    """Build a dictionary index from a word list file, or from the bundled list if None."""
    words = default_word_list() if path is None else load_word_list(path)
    return DictionaryIndex.build(words, ascii_only=ascii_only)
