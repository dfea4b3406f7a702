from pathlib import Path
from hangmanai.datasets import validate_corpus, pretty_summary, load_corpus, normalize_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_corpus_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["cat", "goat", "letter"])

    rep = validate_corpus(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["lengths"] == {3: 1, 4: 1, 6: 1}
    s = pretty_summary(rep)
    assert "words=3" in s and "lengths 3..6" in s and s.endswith("OK")


def test_validate_corpus_flags_errors(tmp_path: Path):
    words = tmp_path / "words.txt"
    # blank line, uppercase, digits and a duplicate
    words.write_text("cat\n\nDog\nb4t\ncat\n", encoding="utf-8")

    rep = validate_corpus(str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_corpus_missing_file(tmp_path: Path):
    rep = validate_corpus(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_corpus_from_file(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Cat\r\n  dog \n\nbat\n", encoding="utf-8")
    assert load_corpus(str(words)) == ["cat", "dog", "bat"]


def test_normalize_words_keeps_order_and_duplicates():
    assert normalize_words(["b", " A", "", "b"]) == ["b", "a", "b"]
