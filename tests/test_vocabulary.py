import io
import logging
import random
from pathlib import Path

import numpy as np
import pytest
from wordgame.engine import (
    EmptyVocabularyError,
    LoadError,
    SessionState,
    Vocabulary,
    load,
    start_new_round,
)


def _write(p: Path, text: str) -> Path:
    p.write_text(text, encoding="utf-8")
    return p


def test_load_from_path(tmp_path: Path):
    p = _write(tmp_path / "vocab_data.txt", "crane\nslate\n  trace  \n")
    v = load(p)
    assert len(v) == 3
    assert v.words == ("crane", "slate", "trace")
    assert v.contains("slate") and "trace" in v
    assert not v.contains("zzzzz")


def test_load_from_stream_any_whitespace():
    v = load(io.StringIO("crane slate\ttrace\n\nadieu"))
    assert list(v) == ["crane", "slate", "trace", "adieu"]


def test_load_normalizes_case():
    v = load(io.StringIO("CRANE Slate"))
    assert v.contains("crane") and v.contains("slate")
    assert not v.contains("CRANE")


def test_load_drops_duplicates_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="wordgame.engine.vocabulary"):
        v = load(io.StringIO("crane\nslate\ncrane\n"))
    assert v.words == ("crane", "slate")
    assert "duplicate" in caplog.text


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(LoadError) as ei:
        load(tmp_path / "nope.txt")
    assert isinstance(ei.value.__cause__, OSError)


@pytest.mark.parametrize("text", ["crane\ncranes\n", "crane\nc4ane\n", "crane\nhi\n"])
def test_load_rejects_malformed_tokens(text):
    with pytest.raises(LoadError, match="not 5-letter"):
        load(io.StringIO(text))


def test_load_rejects_empty_source():
    with pytest.raises(LoadError, match="no words"):
        load(io.StringIO("  \n\n"))


def test_load_expected_count(tmp_path: Path):
    p = _write(tmp_path / "v.txt", "crane\nslate\n")
    assert len(load(p, expected_count=2)) == 2
    with pytest.raises(LoadError, match="expected 3 words, found 2"):
        load(p, expected_count=3)


def test_random_word_empty():
    with pytest.raises(EmptyVocabularyError):
        Vocabulary([]).random_word(random.Random(0))


def test_random_word_comes_from_vocabulary():
    v = Vocabulary(["crane", "slate", "trace"])
    rng = random.Random(1)
    assert all(v.random_word(rng) in v for _ in range(50))


def test_random_word_is_roughly_uniform():
    words = [f"word{c}" for c in "abcdefghij"]
    v = Vocabulary(words)
    rng = random.Random(2024)
    draws = 20000
    counts = np.zeros(len(words))
    index = {w: i for i, w in enumerate(words)}
    for _ in range(draws):
        counts[index[v.random_word(rng)]] += 1

    expected = draws / len(words)
    chi2 = float(((counts - expected) ** 2 / expected).sum())
    # chi-square critical value, 9 degrees of freedom, p = 0.001
    assert chi2 < 27.88


def test_random_word_does_not_reseed():
    v = Vocabulary(["crane", "slate", "trace", "adieu", "roate"])
    rng = random.Random(5)
    seq = [v.random_word(rng) for _ in range(30)]
    # a reseeding implementation would keep returning one word
    assert len(set(seq)) > 1


@pytest.mark.parametrize("words", [["ab", "toolong"], ["crane", "cr4ne"], ["crane", ""]])
def test_constructor_rejects_malformed_words(words):
    with pytest.raises(ValueError, match="not 5-letter"):
        Vocabulary(words)


def test_constructor_normalizes_so_every_target_is_guessable():
    v = Vocabulary(["CRANE", " slate ", "crane"])
    assert v.words == ("crane", "slate")

    class FirstWord:
        def randrange(self, n):
            return 0

    s = start_new_round(v, FirstWord())
    assert s.submit_guess("CRANE").accepted
    assert s.state is SessionState.ROUND_WON


def test_load_invalid_utf8_chains_cause(tmp_path: Path):
    p = tmp_path / "vocab_data.txt"
    p.write_bytes(b"crane\n\xff\xfe\xfa\n")
    with pytest.raises(LoadError) as ei:
        load(p)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_load_stream_read_error_chains_cause():
    class BrokenStream:
        name = "broken"

        def read(self):
            raise OSError("device gone")

    with pytest.raises(LoadError, match="device gone") as ei:
        load(BrokenStream())
    assert isinstance(ei.value.__cause__, OSError)
