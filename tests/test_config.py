from pathlib import Path

import pytest

from anagrammer.config import AnagramConfig


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ANAGRAMMER_LOG_DIR", raising=False)
    settings = AnagramConfig(_env_file=None)
    assert settings.word_list_path is None
    assert settings.ascii_only is False
    assert settings.log_dir == "logs"


def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANAGRAMMER_ASCII_ONLY", "true")
    monkeypatch.setenv("ANAGRAMMER_MAX_WORDS_CAP", "3")
    settings = AnagramConfig()
    assert settings.ascii_only is True
    assert settings.max_words_cap == 3
    assert settings.allow_repeated_words is False


def test_config_ignores_unrelated_env_file_keys(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "DATABASE_URL=postgres://localhost/db\nANAGRAMMER_ASCII_ONLY=true\n", encoding="utf-8"
    )
    settings = AnagramConfig(_env_file=env_file)
    assert settings.ascii_only is True
    assert not hasattr(settings, "database_url")
