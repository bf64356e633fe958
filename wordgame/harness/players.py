"""
Automated players for self-play.

A player sees only what a human would: the vocabulary and the transcript
so far. It never sees the target.

Players register themselves by `id` so the simulate CLI can pick one by
name.
"""

from __future__ import annotations

import random
from typing import Dict, List, Sequence, Tuple, Type

from wordgame.engine import Feedback, Vocabulary, filter_candidates

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


def create_player(player_id: str) -> "BasePlayer":
    try:
        cls = REGISTRY[player_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown player id: {player_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_player_ids() -> List[str]:
    return sorted(REGISTRY.keys())


class BasePlayer:
    id = "base"
    name = "Base"

    def __init__(self):
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, vocabulary: Vocabulary, seed: int | None = None) -> None:
        self.words = list(vocabulary)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, transcript: Sequence[Tuple[str, Feedback]]) -> str:
        raise NotImplementedError("Override in subclass")


@register
class RandomPlayer(BasePlayer):
    """Any vocabulary word, ignoring feedback. Mostly useful as a loser."""
    id = "random"
    name = "Random"

    def next_guess(self, transcript):
        return self.words[self.rng.randrange(len(self.words))]


@register
class RandomConsistentPlayer(BasePlayer):
    """
    Choose uniformly among the words still consistent with every feedback
    seen so far. Falls back to the whole vocabulary if nothing fits (only
    possible when the target is outside the player's word list).
    """
    id = "random_consistent"
    name = "Random Consistent"

    def next_guess(self, transcript):
        candidates = filter_candidates(self.words, transcript)
        pool = candidates if candidates else self.words
        return pool[self.rng.randrange(len(pool))]
