import pytest

from anagrammer.index import DictionaryIndex

SMALL_WORDS = ["a", "at", "tea", "eat", "ate", "tab"]


@pytest.fixture
def small_words() -> list[str]:
    return list(SMALL_WORDS)


@pytest.fixture
def small_index() -> DictionaryIndex:
    return DictionaryIndex.build(SMALL_WORDS)
