import pytest

from anagrammer.errors import UnsupportedInputError
from anagrammer.keys import normalize


def test_normalize_sorts_folds_and_strips() -> None:
    assert normalize("  HeL-lo!42  ") == "24ehllo"


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ("listen", "silent"),
        ("Dormitory", "dirty room"),
        ("The eyes", "they see!"),
        ("Astronomer", "Moon starer"),
    ],
)
def test_anagrams_share_a_signature(first: str, second: str) -> None:
    assert normalize(first) == normalize(second)


@pytest.mark.parametrize(
    ("first", "second"),
    [("tea", "teas"), ("aab", "abb"), ("stop", "spit")],
)
def test_non_anagrams_differ(first: str, second: str) -> None:
    assert normalize(first) != normalize(second)


def test_normalize_unicode_folding() -> None:
    assert normalize("Straße") == normalize("STRASSE")
    assert normalize("Éa") == "aé"


def test_normalize_only_punctuation_is_empty() -> None:
    assert normalize("--- !!") == ""


def test_ascii_only_accepts_ascii() -> None:
    assert normalize("Tea Time", ascii_only=True) == "aeeimtt"


def test_ascii_only_rejects_non_ascii() -> None:
    with pytest.raises(UnsupportedInputError) as exc_info:
        normalize("café", ascii_only=True)
    assert exc_info.value.bad_chars == "é"
    assert isinstance(exc_info.value, ValueError)
