from pathlib import Path

import pytest

from gamehub.dictionary import DictionaryLoadError, load_words
from gamehub.paths import PACKAGE_DATA, dictionary_path
from gamehub.variants import build_match


def test_load_words_uppercases_and_strips(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("cat\n  Dog \n\nsun\n")
    assert load_words(p) == frozenset({"CAT", "DOG", "SUN"})


def test_missing_dictionary_raises(tmp_path: Path):
    with pytest.raises(DictionaryLoadError):
        load_words(tmp_path / "nope.txt")


def test_empty_dictionary_raises(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n")
    with pytest.raises(DictionaryLoadError):
        load_words(p)


def test_packaged_dictionary_loads(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("GAMEHUB_DICTIONARY", raising=False)
    monkeypatch.chdir(tmp_path)
    assert dictionary_path() == PACKAGE_DATA / "dic.txt"
    words = load_words()
    assert "CAT" in words
    assert all(len(w) == 3 for w in words)


def test_env_dictionary_wins(monkeypatch, tmp_path: Path):
    p = tmp_path / "mine.txt"
    p.write_text("zap\n")
    monkeypatch.setenv("GAMEHUB_DICTIONARY", str(p))
    assert load_words() == frozenset({"ZAP"})


def test_word_match_setup_fails_without_dictionary(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("GAMEHUB_DICTIONARY", str(tmp_path / "missing.txt"))
    with pytest.raises(DictionaryLoadError):
        build_match("word", quiet=True)


def test_word_match_loads_dictionary_from_env(monkeypatch, tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("sun\nfox\n")
    monkeypatch.setenv("GAMEHUB_DICTIONARY", str(p))
    board, _ = build_match("word", quiet=True)
    assert board.words == frozenset({"SUN", "FOX"})
