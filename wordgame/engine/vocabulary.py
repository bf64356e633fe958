"""
Vocabulary: the fixed set of words valid as guesses and targets.

Loading policy:
  - tokens are whitespace-separated; each is stripped and lowercased
  - every token must be exactly WORD_LENGTH ASCII letters, otherwise the
    whole load fails (a half-valid list is never used silently)
  - duplicates are dropped, keeping the first occurrence
  - an empty source fails
  - the word count is only checked when `expected_count` is given
"""

from __future__ import annotations

import io
import logging
import random
import re
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Tuple, Union

from .errors import EmptyVocabularyError, LoadError
from .rules import WORD_LENGTH

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(rf"^[a-z]{{{WORD_LENGTH}}}$")

Source = Union[str, Path, IO[str]]


def normalize(word: str) -> str:
    """Canonical form used for membership: stripped, lowercase."""
    return word.strip().lower()


class Vocabulary:
    """
    Immutable, ordered collection of words with O(1) membership.

    Words are normalized on the way in; a word that is not WORD_LENGTH
    ASCII letters afterwards raises ValueError.
    """

    def __init__(self, words: Iterable[str]):
        normed = [normalize(w) for w in words]
        bad = [w for w in normed if not _WORD_RE.match(w)]
        if bad:
            raise ValueError(
                f"{len(bad)} token(s) are not {WORD_LENGTH}-letter words (e.g., {bad[:5]})"
            )

        ordered: List[str] = []
        seen = set()
        for w in normed:
            if w in seen:
                continue
            seen.add(w)
            ordered.append(w)
        self._words: Tuple[str, ...] = tuple(ordered)
        self._index = frozenset(ordered)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def contains(self, word: str) -> bool:
        return word in self._index

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._words)} words)"

    def random_word(self, rng: random.Random) -> str:
        """
        Pick one word uniformly at random.

        The caller owns `rng` and should seed it once per process; the
        vocabulary never reseeds it.
        """
        if not self._words:
            raise EmptyVocabularyError("cannot draw a word from an empty vocabulary")
        return self._words[rng.randrange(len(self._words))]


def _read_text(source: Source) -> Tuple[str, str]:
    """Return (text, label) for a path or an open text stream."""
    if isinstance(source, (str, Path)):
        p = Path(source)
        try:
            return p.read_text(encoding="utf-8"), str(p)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"unable to read vocabulary file {p}: {e}") from e
    try:
        return source.read(), getattr(source, "name", "<stream>")
    except (OSError, UnicodeDecodeError, io.UnsupportedOperation) as e:
        raise LoadError(f"unable to read vocabulary stream: {e}") from e


def load(source: Source, *, expected_count: int | None = None) -> Vocabulary:
    """
    Build a Vocabulary from a file path or a text stream.

    Args:
      source         : path to a word file, or an open text stream
      expected_count : if given, the number of unique words must match exactly

    Raises:
      LoadError when the source is unreadable, empty, contains malformed
      tokens, or does not hold `expected_count` words.
    """
    text, label = _read_text(source)

    tokens = text.split()
    try:
        vocab = Vocabulary(tokens)
    except ValueError as e:
        raise LoadError(f"{label}: {e}") from e
    if len(vocab) == 0:
        raise LoadError(f"{label}: vocabulary source contains no words")

    dupes = len(tokens) - len(vocab)
    if dupes:
        logger.warning("Dropped %s duplicate word(s) from %s", dupes, label)

    if expected_count is not None and len(vocab) != expected_count:
        raise LoadError(f"{label}: expected {expected_count} words, found {len(vocab)}")

    logger.info("Loaded %s words from %s", len(vocab), label)
    return vocab
