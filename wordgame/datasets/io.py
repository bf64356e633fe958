from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordgame.engine.rules import WORD_LENGTH


def clean_words(lines: Iterable[str], N: int = WORD_LENGTH, *, sort: bool = False) -> List[str]:
    """
    Turn raw lines into a loadable word list: lowercase, keep only N-letter
    ASCII words, drop duplicates (first occurrence wins).
    Optionally sort alphabetically; otherwise input order is kept.
    """
    seen, out = set(), []
    for line in lines:
        for tok in line.split():
            w = tok.lower()
            if len(w) != N or not (w.isascii() and w.isalpha()):
                continue
            if w not in seen:
                seen.add(w)
                out.append(w)
    return sorted(out) if sort else out


def write_words(words: Iterable[str], p: Path | str) -> int:
    """
    Write one word per line (the format the loader reads), creating parent
    directories as needed. Returns the number of words written.
    """
    words = list(words)
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(w + "\n" for w in words), encoding="utf-8")
    return len(words)
