from pathlib import Path

import pytest

from wordguess.datasets import WordLists, load_words, read_lines, write_lines


def test_load_words_takes_first_token(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane 1200\n\n  slate\t7\nbrine\r\n", encoding="utf-8")
    assert load_words(p) == ["crane", "slate", "brine"]


def test_read_lines_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_write_lines_roundtrip(tmp_path: Path):
    p = tmp_path / "sub" / "out.txt"
    write_lines(["crane", "slate"], p)
    assert p.read_text(encoding="utf-8") == "crane\nslate\n"


def test_wordlists_from_files(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    write_lines(["crane", "slate"], ans)
    write_lines(["slate", "hotel"], allw)

    lists = WordLists.from_files(ans, allw)
    assert lists.answers == ["crane", "slate"]
    assert lists.dictionary == ["crane", "slate", "hotel"]


def test_wordlists_empty_answers(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    ans.write_text("\n", encoding="utf-8")
    allw = tmp_path / "allowed.txt"
    write_lines(["hotel"], allw)
    with pytest.raises(ValueError):
        WordLists.from_files(ans, allw)


def test_default_lists():
    lists = WordLists.default()
    assert lists.answers[0] == "crane"
    assert all(len(w) == 5 for w in lists.dictionary)
    assert len(lists.dictionary) == len(set(lists.dictionary))
