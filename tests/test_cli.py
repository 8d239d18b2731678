from pathlib import Path

import pytest

from anagrammer import main, parse_args


@pytest.fixture
def word_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("a\naa\nat\ntea\neat\nate\ntab\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Run logs are written relative to the working directory
    monkeypatch.chdir(tmp_path)


def test_parse_args_defaults() -> None:
    args = parse_args(["some phrase"])
    assert args.string == "some phrase"
    assert (args.min_words, args.max_words) == (0, None)
    assert (args.min_letters, args.max_letters) == (0, None)
    assert args.dictionary is None
    assert args.ascii_only is None
    assert args.allow_repeats is None


def test_parse_args_short_flags() -> None:
    args = parse_args(["x", "-w", "1", "-W", "3", "-l", "2", "-L", "5", "-f", "dict.txt"])
    assert (args.min_words, args.max_words, args.min_letters, args.max_letters) == (1, 3, 2, 5)
    assert args.dictionary == "dict.txt"


def test_main_prints_anagrams(word_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["tea", "-W", "1", "-f", str(word_file)])
    assert sorted(capsys.readouterr().out.splitlines()) == ["ate", "eat", "tea"]


def test_main_multi_word(word_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["a t a", "-w", "2", "-f", str(word_file)])
    assert capsys.readouterr().out.splitlines() == ["a at"]


def test_main_allow_repeats(word_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["aaa", "-f", str(word_file), "--allow-repeats"])
    assert sorted(capsys.readouterr().out.splitlines()) == ["a a a", "a aa"]


def test_main_reports_missing_dictionary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["tea", "-f", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "error: Word list file not found" in capsys.readouterr().err


def test_main_reports_unsupported_input(
    word_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["thé", "-f", str(word_file), "--ascii-only"])
    assert exc_info.value.code == 1
    assert "Unsupported characters" in capsys.readouterr().err
