"""Anagram finder configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class AnagramConfig(BaseSettings):
    """Configuration settings for the anagram finder.

    Values can be set through `ANAGRAMMER_*` environment variables or a `.env` file, and
    are overridden per run by command-line flags.
    """

    word_list_path: str | None = None
    """Path to the word list, one word per line. If None (default), uses the bundled list."""

    ascii_only: bool = False
    """Reject non-ASCII input instead of folding full Unicode text. Default: False.

    Applies to both the word list (offending words are skipped) and the query phrase
    (the query is rejected).
    """

    allow_repeated_words: bool = False
    """Whether the same word (or an anagram of it) may appear twice in one result.

    Default: False.
    """

    max_words_cap: int | None = None
    """Hard limit on words per result, regardless of the query. If None (default), no limit."""

    log_dir: str | None = "logs"
    """Directory for per-run log files. If None, no log file is written. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_prefix="ANAGRAMMER_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = AnagramConfig()
