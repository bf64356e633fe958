# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Validates the vocabulary file and prints a one-line summary.
  2) Loads the vocabulary once and seeds one random source for the process.
  3) Plays rounds until the player picks "Quit game" (or input ends).

Feedback symbols: '!' right letter + right spot, '&' right letter elsewhere,
'-' letter not in the word.

Usage:
    python -m apps.cli.play --vocab vocab_data.txt
    python -m apps.cli.play --vocab vocab_data.txt --strict --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable

from wordgame.datasets import validate_vocabulary, pretty_summary
from wordgame.engine import (
    GuessStatus,
    LoadError,
    Session,
    Vocabulary,
    load,
    render_board,
    start_new_round,
)
from wordgame.engine.rules import (
    ALLOWED_GUESSES,
    DEFAULT_VOCAB_PATH,
    EXPECTED_VOCAB_SIZE,
    WORD_LENGTH,
)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

REJECTION_MESSAGES = {
    GuessStatus.WRONG_LENGTH: f"Your word must be exactly {WORD_LENGTH} letters long.\n",
    GuessStatus.NOT_IN_VOCABULARY: "That word doesn't belong in the word list.\n",
}


def play_round(session: Session, read: Reader = input, write: Writer = print) -> None:
    """
    Prompt until the session ends, printing the board after every accepted
    guess. Rejected words are re-asked without costing a guess.
    """
    while not session.is_over:
        write("What word would you like to guess?")
        write(f"Guesses left: {session.remaining_guesses}/{ALLOWED_GUESSES}")
        sub = session.submit_guess(read("\nYour word: "))
        write("")
        while not sub.accepted:
            write(REJECTION_MESSAGES[sub.status])
            sub = session.submit_guess(read("Your word: "))
            write("")

        for row in render_board(session.transcript):
            write(row)

    res = session.result()
    if res.outcome.won:
        write("You've successfully guessed the mystery word!\n")
    else:
        write("You ran out of guesses.\n")
    write(f"Mystery word: {res.target}")


def ask_play_again(read: Reader = input, write: Writer = print) -> bool:
    write("\nWhat would you like to do?")
    write("1. Play again")
    write("2. Quit game")
    choice = read("Enter your choice (1 or 2): ").strip()
    while choice not in ("1", "2"):
        choice = read("Please enter a valid choice (1 or 2): ").strip()
    return choice == "1"


def run_game(vocabulary: Vocabulary, rng: random.Random,
             read: Reader = input, write: Writer = print) -> int:
    """
    Play rounds until the player quits. Returns the number of finished rounds.
    End of input (Ctrl-D, closed pipe) quits like choosing option 2.
    """
    rounds = 0
    try:
        while True:
            play_round(start_new_round(vocabulary, rng), read, write)
            rounds += 1
            if not ask_play_again(read, write):
                break
    except EOFError:
        write("")
    write("\nThanks for playing!")
    return rounds


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="wordgame: guess the five-letter word")
    ap.add_argument("--vocab", default=DEFAULT_VOCAB_PATH,
                    help="path to the vocabulary file (whitespace-separated words)")
    ap.add_argument("--seed", type=int,
                    help="seed for target selection (default: OS entropy)")
    ap.add_argument("--strict", action="store_true",
                    help=f"require exactly {EXPECTED_VOCAB_SIZE} words in the vocabulary")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    expected = EXPECTED_VOCAB_SIZE if args.strict else None

    # 1) Report on the file before trusting it
    rep = validate_vocabulary(args.vocab, expected_count=expected)
    print(pretty_summary(rep))

    # 2) Load once; a bad vocabulary means no round can start
    try:
        vocabulary = load(args.vocab, expected_count=expected)
    except LoadError as e:
        raise SystemExit(f"Unable to load vocabulary: {e}") from e

    # 3) One random source for the whole process
    rng = random.Random(args.seed)
    run_game(vocabulary, rng, input, print)


if __name__ == "__main__":
    main()
