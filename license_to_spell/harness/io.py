"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Plate numbers are prefixed with an apostrophe to keep spreadsheet apps
  from turning "042" into 42.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = [
    "player", "plate", "plate_number", "word_count", "score", "possible_points",
    "coverage", "num_guesses", "rejected", "average_length", "ended_by", "time_used",
    "guesses",
]


def _excel_safe_number(num: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "042" -> "'042"
    """
    return "'" + num if num else num


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Guesses are joined with spaces into a single column.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "player": r.get("player_id", "?"),
                "plate": r["plate"],
                "plate_number": _excel_safe_number(r["plate_number"]),
                "word_count": r["word_count"],
                "score": r["score"],
                "possible_points": r["possible_points"],
                "coverage": round(float(r["coverage"]), 4),
                "num_guesses": r["num_guesses"],
                "rejected": r["rejected"],
                "average_length": round(float(r["average_length"]), 3),
                "ended_by": r["ended_by"],
                "time_used": round(float(r["time_used"]), 1),
                "guesses": " ".join(r["guesses"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, rounds, ranges, seed, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
