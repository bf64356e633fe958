"""
Normalize a word file so the game can load it.

- Lowercases every word.
- Drops anything that is not a 5-letter a–z word (blank lines, punctuation,
  other lengths).
- Removes duplicates, keeping the first occurrence.
- Optionally sorts alphabetically; otherwise keeps input order.
- Overwrites in place by default, or writes to a separate --out path.

Usage:
    python -m script.clean_vocab --in vocab_data.txt
    python -m script.clean_vocab --in raw_words.txt --out vocab_data.txt --sort
"""

import argparse
from pathlib import Path

from wordgame.datasets import clean_words, write_words


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a vocabulary file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep input order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = inp.read_text(encoding="utf-8").splitlines()
    n = write_words(clean_words(lines, sort=args.sort), outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({n} words)")


if __name__ == "__main__":
    main()
