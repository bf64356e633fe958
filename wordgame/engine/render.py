"""
Text rendering of a round.

Pure functions: transcript in, display rows out. Nothing here touches
the Session, so the same board can be printed mid-round or from a
RoundResult after the round.

Board layout (two rows per attempt):

    crane
    -&!--
    slate
    !!!!!
    <blank>
    -----
    ...
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .rules import (
    ALLOWED_GUESSES,
    CORRECT_L_SYMBOL,
    CORRECT_LP_SYMBOL,
    INCORRECT_L_SYMBOL,
    WORD_LENGTH,
)
from .scoring import Feedback, Mark

SYMBOLS = {
    Mark.EXACT: CORRECT_LP_SYMBOL,
    Mark.PRESENT: CORRECT_L_SYMBOL,
    Mark.ABSENT: INCORRECT_L_SYMBOL,
}


def render_feedback(feedback: Feedback) -> str:
    return "".join(SYMBOLS[m] for m in feedback)


def render_board(transcript: Iterable[Tuple[str, Feedback]],
                 allowed: int = ALLOWED_GUESSES) -> List[str]:
    """Guess row + hint row for every attempt; unused attempts stay blank."""
    rows: List[str] = []
    entries = list(transcript)
    for guess, feedback in entries[:allowed]:
        rows.append(guess)
        rows.append(render_feedback(feedback))
    for _ in range(allowed - len(entries)):
        rows.append("")
        rows.append(INCORRECT_L_SYMBOL * WORD_LENGTH)
    return rows
