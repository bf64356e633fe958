"""
Feedback (scoring) for a single (target, guess) pair.

Marks:
  - EXACT   : correct letter in the correct position      (pattern char 'G')
  - PRESENT : letter occurs elsewhere in the target         (pattern char 'Y')
  - ABSENT  : letter not present, or all of its occurrences
              were already claimed by other positions       (pattern char '-')

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the target)
  - deterministic (same inputs -> same outputs)
  - normalization-free: callers compare words in the same canonical form
    (the Session lowercases at its boundary), the scorer compares raw chars

Algorithm (two-pass, consume-on-use):
  1) First pass marks every exact match and counts the target letters that
     were NOT matched; those form the pool of still-available letters.
  2) Second pass walks the remaining positions left to right and marks a
     letter PRESENT only while the pool still holds an occurrence of it.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Tuple

from .errors import LengthMismatchError
from .rules import WORD_LENGTH


class Mark(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


# One mark per letter position, in guess order.
Feedback = Tuple[Mark, ...]


def score(target: str, guess: str) -> Feedback:
    """
    Compute the feedback for `guess` against the hidden `target`.

    Preconditions:
      - len(target) == len(guess) == WORD_LENGTH

    Raises:
      LengthMismatchError if either word has the wrong length.

    Examples (shown via pattern_string):
      score("speed", "erase") -> "Y--YY"  (only two e's to hand out)
      score("abbey", "babes") -> "YYGG-"
    """
    if len(target) != WORD_LENGTH or len(guess) != WORD_LENGTH:
        raise LengthMismatchError(
            f"score() needs two {WORD_LENGTH}-letter words; "
            f"got target={target!r} guess={guess!r}"
        )

    marks = [Mark.ABSENT] * WORD_LENGTH

    # Pass 1: exact matches consume their target letter first.
    remaining: Counter = Counter()
    for i, (t, g) in enumerate(zip(target, guess)):
        if t == g:
            marks[i] = Mark.EXACT
        else:
            remaining[t] += 1

    # Pass 2: misplaced letters, left to right, capped by what is left.
    for i, g in enumerate(guess):
        if marks[i] is Mark.EXACT:
            continue
        if remaining[g] > 0:
            marks[i] = Mark.PRESENT
            remaining[g] -= 1  # consume one instance

    return tuple(marks)


def is_solved(feedback: Feedback) -> bool:
    """True if every position is an exact match."""
    return len(feedback) == WORD_LENGTH and all(m is Mark.EXACT for m in feedback)


def pattern_string(feedback: Feedback) -> str:
    """Compact text form, e.g. (EXACT, ABSENT, PRESENT, ...) -> 'G-Y..'."""
    return "".join(m.value for m in feedback)
