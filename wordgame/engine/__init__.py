from .errors import (
    EmptyVocabularyError,
    LengthMismatchError,
    LoadError,
    RoundInProgressError,
    RoundOverError,
    WordGameError,
)
from .scoring import Feedback, Mark, score, is_solved, pattern_string
from .vocabulary import Vocabulary, load
from .validation import GuessStatus, validate_guess
from .session import (
    RoundOutcome,
    RoundResult,
    Session,
    SessionState,
    Submission,
    start_new_round,
)
from .constraints import filter_candidates
from .render import render_board, render_feedback

__all__ = [
    "WordGameError", "LoadError", "EmptyVocabularyError", "LengthMismatchError",
    "RoundOverError", "RoundInProgressError",
    "Mark", "Feedback", "score", "is_solved", "pattern_string",
    "Vocabulary", "load",
    "GuessStatus", "validate_guess",
    "Session", "SessionState", "Submission", "RoundOutcome", "RoundResult",
    "start_new_round",
    "filter_candidates",
    "render_board", "render_feedback",
]
