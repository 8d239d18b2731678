"""Exceptions raised by the anagram finder."""


class AnagramError(Exception):
    """Base class for errors reported to the caller of a query."""


class UnsupportedInputError(AnagramError, ValueError):
    """The input contains characters outside the active normalization policy."""

    def __init__(self, text: str, bad_chars: str) -> None:
        super().__init__(f"Unsupported characters {bad_chars!r} in input: {text!r}")
        self.text = text
        self.bad_chars = bad_chars


class SourceUnavailableError(AnagramError, OSError):
    """The word list could not be read."""
