"""
Candidate filtering given a round transcript.

Given:
  - a pool of words (usually the whole vocabulary)
  - a transcript of (guess, feedback) pairs

Return:
  - words that would have produced exactly the same feedback for every
    guess, i.e. the targets still possible.

The self-play harness uses this to keep its automated player honest.
"""

from typing import Iterable, List, Tuple

from .scoring import Feedback, score

History = Iterable[Tuple[str, Feedback]]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every (guess, feedback) in `history`.

    Order is preserved as in `words`.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        # If this word were the target, would each old guess score the same?
        if all(score(w, g) == fb for g, fb in history):
            out.append(w)

    return out
