"""
Self-play harness.

- run_round: play one round through the public Session API with a player.
- run_batch: play many rounds in sequence with a tqdm progress bar.
- summarize: win rate, mean attempts and the attempt histogram.

The harness never peeks at the target until the Session reveals it, so a
clean batch is also an end-to-end check of the engine.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from wordgame.engine import Vocabulary, pattern_string, start_new_round
from wordgame.engine.rules import ALLOWED_GUESSES

from .players import BasePlayer

logger = logging.getLogger(__name__)


def run_round(vocabulary: Vocabulary, player: BasePlayer, rng: random.Random, *,
              seed: int | None = None) -> Dict:
    """
    Play one round to completion.

    Args:
        vocabulary: shared, read-only word set
        player:     automated player (reset here with `seed`)
        rng:        process-wide random source used to draw the target
        seed:       player tie-break seed, for reproducible runs

    Returns:
        dict with keys:
            won (bool), attempts (int), time_ms (float), target (str),
            history (list[(guess, pattern)])

    Raises:
        ValueError if the player proposes a guess the session rejects.
    """
    player.reset(vocabulary, seed=seed)
    session = start_new_round(vocabulary, rng)

    t0 = time.perf_counter()
    while not session.is_over:
        guess = player.next_guess(session.transcript)
        sub = session.submit_guess(guess)
        if not sub.accepted:
            raise ValueError(f"player {player.id!r} proposed {guess!r}: {sub.status.value}")
    dt = (time.perf_counter() - t0) * 1000.0

    res = session.result()
    return {
        "won": res.outcome.won,
        "attempts": res.outcome.attempts,
        "time_ms": dt,
        "target": res.target,
        "history": [(g, pattern_string(fb)) for g, fb in res.transcript],
    }


def run_batch(vocabulary: Vocabulary, player: BasePlayer, *, rounds: int,
              seed: int | None = None, progress: bool = True) -> List[Dict]:
    """
    Play `rounds` rounds back-to-back.

    One random source is seeded once for the whole batch and drives every
    target draw; per-round player seeds are derived from it.
    """
    rng = random.Random(seed)
    out: List[Dict] = []
    for _ in tqdm(range(rounds), ncols=80, desc=player.id, unit="round",
                  disable=not progress):
        out.append(run_round(vocabulary, player, rng, seed=rng.randint(0, 2 ** 31 - 1)))
    logger.info("Played %s round(s) with %s", len(out), player.id)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate round results.

    `histogram[i]` counts wins on attempt i + 1. `mean_attempts` averages
    winning rounds only and is None when nothing was won.
    """
    won = np.array([r["won"] for r in results], dtype=bool)
    attempts = np.array([r["attempts"] for r in results], dtype=int)

    hist = np.bincount(attempts[won], minlength=ALLOWED_GUESSES + 1)[1:ALLOWED_GUESSES + 1]
    return {
        "rounds": int(len(results)),
        "wins": int(won.sum()),
        "win_rate": float(won.mean()) if len(results) else 0.0,
        "mean_attempts": float(attempts[won].mean()) if won.any() else None,
        "histogram": [int(c) for c in hist],
    }


def pretty_summary(summary: Dict) -> str:
    mean = summary["mean_attempts"]
    mean_s = f"{mean:.3f}" if mean is not None else "n/a"
    hist = " ".join(f"{i}:{c}" for i, c in enumerate(summary["histogram"], start=1))
    return (
        f"rounds={summary['rounds']} | wins={summary['wins']} "
        f"({100.0 * summary['win_rate']:.1f}%) | mean_attempts={mean_s} | {hist}"
    )
