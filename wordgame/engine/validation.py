"""
Guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is accepted iff, after normalization (strip + lowercase):
  - it has exact length WORD_LENGTH
  - it exists in the vocabulary

Rejections are ordinary values, not exceptions: the caller re-prompts and
no attempt is consumed.
"""

from __future__ import annotations

from enum import Enum

from .rules import WORD_LENGTH
from .vocabulary import Vocabulary


class GuessStatus(str, Enum):
    ACCEPTED = "accepted"
    WRONG_LENGTH = "wrong_length"
    NOT_IN_VOCABULARY = "not_in_vocabulary"


def validate_guess(word: str, vocabulary: Vocabulary) -> GuessStatus:
    """
    Classify an already-normalized guess.

    Length is checked first so a player typing "cranes" learns about the
    length rather than being told the word is unknown.
    """
    if len(word) != WORD_LENGTH:
        return GuessStatus.WRONG_LENGTH
    if not vocabulary.contains(word):
        return GuessStatus.NOT_IN_VOCABULARY
    return GuessStatus.ACCEPTED
