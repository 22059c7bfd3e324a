"""
Dictionary validator for license-to-spell.

What this module does:
- Load a dictionary file (JSON mapping, JSON array, or one word per line).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters).
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from license_to_spell.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/word-dictionary.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from license_to_spell.engine import PLATE_LENGTH
from .io import read_entries


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid entries encountered
    shortest: int        # length of the shortest valid word (0 if none)
    longest: int         # length of the longest valid word (0 if none)
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


def _check_entries(entries: List[str], min_length: int) -> Tuple[List[str], int]:
    """
    Rules:
      - must be lowercase a–z
      - must have at least `min_length` letters
      - empty/whitespace-only entries are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for raw in entries:
        w = raw.strip()
        if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str, min_length: int = PLATE_LENGTH) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the dictionary (JSON mapping/array or text).
    min_length : int
        Shortest acceptable word. Words shorter than a plate can never match.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with
        `passed` (strict: non-empty, no invalids, no duplicates) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, 0, "", 0, 0, 0, 0, False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    try:
        entries = read_entries(p)
    except ValueError as e:
        rep = DictionaryReport(str(p), True, 0, _sha256_file(p), 0, 0, 0, 0, False,
                               [f"unreadable dictionary: {e}"])
        return asdict(rep)

    words, invalid = _check_entries(entries, min_length)
    unique = set(words)
    lengths = [len(w) for w in words]

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if len(unique) != len(words):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        shortest=min(lengths, default=0),
        longest=max(lengths, default=0),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=word-dictionary.json | words=58109 (uniq=58109, len 3..31, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"dictionary={name} | words={report['count']} (uniq={report['unique_count']}, "
        f"len {report['shortest']}..{report['longest']}, sha={sha}) | {status}"
    )
