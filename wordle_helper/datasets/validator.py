"""
Dictionary validator.

What this module does:
- Validate one word list (e.g. data/svenska6.txt) for a given length N.
- Enforce formatting rules (lowercase, letters of the language's alphabet only,
  exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordle_helper.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/english5.txt", 5, "abcdefghijklmnopqrstuvwxyz")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordlistReport:
    """Diagnostics and metadata for a single word list."""
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int, alphabet: str) -> Tuple[List[str], int]:
    """
    Load words and count invalid lines.

    Rules:
      - one token per line
      - lowercase, every character in `alphabet`
      - exact length N
      - empty/whitespace-only lines are INVALID
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and len(w) == N and all(ch in alphabet for ch in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: int, alphabet: str) -> Dict:
    """
    Validate the word list at `path` for length N.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is strict:
    the file must exist, be non-empty, and contain no invalid lines.
    Duplicates are reported as an issue but do not fail validation.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(str(path), N, False, 0, "", 0, 0, False, issues))

    words, invalid = _load_and_check(p, N, alphabet)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        data/english5.txt | N=5 | words=2315 (uniq=2315, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
