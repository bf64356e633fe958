from pathlib import Path
from wordgame.datasets import clean_words, pretty_summary, validate_vocabulary, write_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_vocabulary_happy_path(tmp_path: Path):
    v = tmp_path / "vocab_data.txt"
    _write(v, ["crane", "raise", "stare"])

    rep = validate_vocabulary(str(v), expected_count=3)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "vocab=3" in s and "OK" in s


def test_validate_vocabulary_flags_errors(tmp_path: Path):
    # 'cranes' (len 6) and '???' are invalid for N=5
    v = tmp_path / "vocab_data.txt"
    v.write_text("crane\ncranes\n???\n", encoding="utf-8")

    rep = validate_vocabulary(str(v))
    assert rep["passed"] is False
    assert rep["invalid_tokens"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_vocabulary_count_mismatch(tmp_path: Path):
    v = tmp_path / "vocab_data.txt"
    _write(v, ["crane", "raise"])

    rep = validate_vocabulary(str(v), expected_count=2315)
    assert rep["passed"] is False
    assert any("expected 2315" in msg for msg in rep["issues"])


def test_validate_vocabulary_duplicates_reported_not_fatal(tmp_path: Path):
    v = tmp_path / "vocab_data.txt"
    _write(v, ["crane", "CRANE", "stare"])

    rep = validate_vocabulary(str(v))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_vocabulary_missing_file(tmp_path: Path):
    rep = validate_vocabulary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False


def test_clean_words():
    lines = ["Crane", "", "crane slate", "too-long", "ab", "Adieu"]
    assert clean_words(lines) == ["crane", "slate", "adieu"]
    assert clean_words(lines, sort=True) == ["adieu", "crane", "slate"]


def test_write_words_round_trips_through_loader(tmp_path: Path):
    from wordgame.engine import load

    out = tmp_path / "nested" / "vocab_data.txt"
    assert write_words(["crane", "slate"], out) == 2
    assert out.read_text(encoding="utf-8") == "crane\nslate\n"
    assert load(out).words == ("crane", "slate")
