"""
Vocabulary file validator.

What this module does:
- Validate a vocabulary file (whitespace-separated words, usually one per line).
- Enforce formatting rules (a–z only after lowercasing, exact length N).
- Detect duplicates and invalid tokens; compute SHA-256 of the raw file.
- Optionally check the unique word count against an expected total.
- Return a machine-readable dict and provide a pretty one-line summary.

It never raises on bad content: it reports. The loader in
wordgame.engine.vocabulary is the strict gate; this is the diagnostic
printed before a game starts.

Typical use:
    from wordgame.datasets import validate_vocabulary, pretty_summary
    rep = validate_vocabulary("vocab_data.txt", N=5, expected_count=2315)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordgame.engine.rules import WORD_LENGTH


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class VocabularyReport:
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID tokens
    unique_count: int    # unique valid words (after dedupe)
    invalid_tokens: int  # tokens that are not N-letter words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    expected_count: int | None
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], List[str]]:
    """
    Split the file into tokens and sort them into (valid, invalid).

    A token is valid when, lowercased, it is alphabetic ASCII of length N.
    """
    valid: List[str] = []
    invalid: List[str] = []

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            for tok in raw.split():
                w = tok.lower()
                if len(w) == N and w.isascii() and w.isalpha():
                    valid.append(w)
                else:
                    invalid.append(tok)

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_vocabulary(path: str, N: int = WORD_LENGTH,
                        expected_count: int | None = None) -> Dict:
    """
    Validate a vocabulary file for word length N.

    Parameters
    ----------
    path : str
        Path to the vocabulary file.
    N : int
        Required word length.
    expected_count : int or None
        If given, the unique word count must match it.

    Returns
    -------
    Dict
        JSON-serializable VocabularyReport; `passed` is strict: the file
        exists, is non-empty, has no invalid tokens and (if asked) has the
        expected count. Duplicates are reported but do not fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"vocabulary file not found: {path}")
        rep = VocabularyReport(path, N, False, 0, 0, 0, "", expected_count, False, issues)
        return asdict(rep)

    try:
        valid, invalid = _load_and_check(p, N)
    except (OSError, UnicodeDecodeError) as e:
        issues.append(f"vocabulary file unreadable: {e}")
        rep = VocabularyReport(str(p), N, True, 0, 0, 0, "", expected_count, False, issues)
        return asdict(rep)

    unique_count = len(set(valid))

    if not valid:
        issues.append("vocabulary contains 0 valid words")
    if invalid:
        issues.append(f"vocabulary has {len(invalid)} invalid token(s) (e.g., {invalid[:5]})")
    if len(valid) != unique_count:
        issues.append(f"vocabulary contains {len(valid) - unique_count} duplicate word(s)")

    count_ok = expected_count is None or unique_count == expected_count
    if not count_ok:
        issues.append(f"expected {expected_count} words, found {unique_count}")

    passed = bool(valid) and not invalid and count_ok

    rep = VocabularyReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(valid),
        unique_count=unique_count,
        invalid_tokens=len(invalid),
        sha256=_sha256_file(p),
        expected_count=expected_count,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | vocab=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"N={report['N']} | vocab={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_tokens']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
