"""
One round of the game.

States:
  AWAITING_GUESS -> ROUND_WON   (accepted guess equals the target)
  AWAITING_GUESS -> ROUND_LOST  (ALLOWED_GUESSES accepted guesses, none correct)

A Session owns its target and transcript. It is UI-agnostic: the CLI, the
self-play harness and the tests all drive it through submit_guess().
A finished Session accepts nothing more; start a new one for the next round.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import RoundInProgressError, RoundOverError
from .rules import ALLOWED_GUESSES
from .scoring import Feedback, score
from .validation import GuessStatus, validate_guess
from .vocabulary import Vocabulary, normalize

logger = logging.getLogger(__name__)

# Transcript entries are (guess, feedback) in attempt order.
Transcript = Tuple[Tuple[str, Feedback], ...]


class SessionState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    ROUND_WON = "round_won"
    ROUND_LOST = "round_lost"


@dataclass(frozen=True)
class Submission:
    """Result of one submit_guess() call."""
    status: GuessStatus
    guess: str                            # normalized form of what was submitted
    feedback: Optional[Feedback] = None   # set only when accepted

    @property
    def accepted(self) -> bool:
        return self.status is GuessStatus.ACCEPTED


@dataclass(frozen=True)
class RoundOutcome:
    won: bool
    attempts: int   # guesses used; equals ALLOWED_GUESSES on a loss

    def __str__(self) -> str:
        return f"Won({self.attempts})" if self.won else "Lost"


@dataclass(frozen=True)
class RoundResult:
    outcome: RoundOutcome
    target: str
    transcript: Transcript


class Session:
    def __init__(self, vocabulary: Vocabulary, rng: random.Random):
        self._vocabulary = vocabulary
        self._target = vocabulary.random_word(rng)
        self._transcript: List[Tuple[str, Feedback]] = []
        self._state = SessionState.AWAITING_GUESS
        self._outcome: Optional[RoundOutcome] = None
        logger.debug("New round started (vocabulary=%s words)", len(vocabulary))

    # ------------------------------------------------------------------
    # Guessing
    # ------------------------------------------------------------------

    def submit_guess(self, word: str) -> Submission:
        """
        Validate, score and record one guess.

        Returns a Submission; rejected guesses leave the round untouched.

        Raises:
          RoundOverError if the round has already ended.
        """
        if self.is_over:
            raise RoundOverError(f"round is over ({self._outcome}); start a new round")

        guess = normalize(word)
        status = validate_guess(guess, self._vocabulary)
        if status is not GuessStatus.ACCEPTED:
            logger.debug("Rejected guess %r: %s", guess, status.value)
            return Submission(status=status, guess=guess)

        feedback = score(self._target, guess)
        self._transcript.append((guess, feedback))

        if guess == self._target:
            self._finish(SessionState.ROUND_WON, won=True)
        elif len(self._transcript) >= ALLOWED_GUESSES:
            self._finish(SessionState.ROUND_LOST, won=False)

        return Submission(status=status, guess=guess, feedback=feedback)

    def _finish(self, state: SessionState, *, won: bool) -> None:
        self._state = state
        self._outcome = RoundOutcome(won=won, attempts=len(self._transcript))
        logger.debug("Round finished: %s", self._outcome)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is not SessionState.AWAITING_GUESS

    @property
    def remaining_guesses(self) -> int:
        return ALLOWED_GUESSES - len(self._transcript)

    @property
    def transcript(self) -> Transcript:
        return tuple(self._transcript)

    @property
    def outcome(self) -> Optional[RoundOutcome]:
        """None while the round is still running."""
        return self._outcome

    @property
    def target(self) -> str:
        """Reveal the target (only after the round ends)."""
        if not self.is_over:
            raise RoundInProgressError("target is hidden until the round ends")
        return self._target

    def result(self) -> RoundResult:
        if self._outcome is None:
            raise RoundInProgressError("round has not finished yet")
        return RoundResult(outcome=self._outcome, target=self._target,
                           transcript=self.transcript)


def start_new_round(vocabulary: Vocabulary, rng: random.Random) -> Session:
    """Fresh Session with a newly drawn target."""
    return Session(vocabulary, rng)
