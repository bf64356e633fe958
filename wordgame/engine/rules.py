"""
Game rules and display conventions.

Single source of truth for the word length, the attempt budget and the
symbols used when a board is printed. Everything else imports from here.
"""

from __future__ import annotations

WORD_LENGTH = 5
ALLOWED_GUESSES = 6

# Size of the reference vocabulary (past answers list). Only enforced when a
# caller asks for strict loading.
EXPECTED_VOCAB_SIZE = 2315

DEFAULT_VOCAB_PATH = "vocab_data.txt"

# Board symbols: letter + position correct, letter elsewhere, letter absent
CORRECT_LP_SYMBOL = "!"
CORRECT_L_SYMBOL = "&"
INCORRECT_L_SYMBOL = "-"
