"""
Build a vocabulary file from the archive of past daily answers on
wordlehints.co.uk.

The archive is NOT the 2315-word reference list: it holds only answers that
have already been played, and it grows by one word a day. Its size will
almost never equal EXPECTED_VOCAB_SIZE, so the resulting file loads in the
default (permissive) mode but fails `apps.cli.play --strict`. After writing,
the script prints the validator summary against the reference size so the
mismatch is visible instead of surfacing at game start.

Rows on the page look like: YYYY-MM-DD (Day) <num> <ANSWER>. Words are
written oldest first, lowercased and de-duplicated.

Usage:
    python -m script.fetch_vocab --out vocab_data.txt
    python -m script.fetch_vocab --until 2023-12-31 --sort
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup

from wordgame.datasets import clean_words, pretty_summary, validate_vocabulary, write_words
from wordgame.engine.rules import DEFAULT_VOCAB_PATH, EXPECTED_VOCAB_SIZE

ARCHIVE_URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_rows(html: str) -> list[tuple[str, str]]:
    """(iso_date, ANSWER) pairs in date order, oldest first."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return sorted((m.group(1), m.group(2)) for m in ROW_RE.finditer(text))


def parse_answers(html: str, until: str | None = None) -> list[str]:
    """Clean answer words played on or before `until` (ISO date), oldest first."""
    rows = parse_rows(html)
    if until is not None:
        rows = [(d, w) for d, w in rows if d <= until]
    return clean_words(w for _, w in rows)


def main():
    ap = argparse.ArgumentParser(description="Download past answers into a vocabulary file")
    ap.add_argument("--url", default=ARCHIVE_URL)
    ap.add_argument("--out", default=DEFAULT_VOCAB_PATH)
    ap.add_argument("--until", help="keep answers played on or before this date (YYYY-MM-DD)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of by date")
    args = ap.parse_args()

    r = requests.get(args.url, timeout=30)
    r.raise_for_status()
    words = parse_answers(r.text, until=args.until)
    if args.sort:
        words = sorted(words)

    n = write_words(words, args.out)
    print(f"Wrote {n} words -> {args.out}")
    print(pretty_summary(validate_vocabulary(args.out, expected_count=EXPECTED_VOCAB_SIZE)))


if __name__ == "__main__":
    main()
