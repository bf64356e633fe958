# apps/cli/simulate.py
"""
Self-play: let an automated player run many rounds and print the outcome
distribution. Nothing is written to disk.

Usage:
    python -m apps.cli.simulate --vocab vocab_data.txt --rounds 500 --seed 123
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordgame.engine import LoadError, load
from wordgame.engine.rules import DEFAULT_VOCAB_PATH
from wordgame.harness import create_player, get_player_ids, pretty_summary, run_batch, summarize


def main(argv: list[str] | None = None) -> None:
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="wordgame: self-play simulation")
    ap.add_argument("--vocab", default=DEFAULT_VOCAB_PATH, help="path to the vocabulary file")
    ap.add_argument("--player", default="random_consistent",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        vocabulary = load(args.vocab)
    except LoadError as e:
        raise SystemExit(f"Unable to load vocabulary: {e}") from e

    try:
        player = create_player(args.player)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    show = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(vocabulary, player, rounds=args.rounds, seed=args.seed, progress=show)
    print(pretty_summary(summarize(results)))


if __name__ == "__main__":
    main()
