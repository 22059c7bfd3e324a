"""
Batch summaries for simulated rounds.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def _describe(values: List[float]) -> Dict[str, float]:
    if not values:
        return {"mean": 0.0, "median": 0.0, "p90": 0.0, "min": 0.0, "max": 0.0}
    arr = np.asarray(values, dtype=float)
    return {
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "p90": float(np.percentile(arr, 90)),
        "min": float(arr.min()),
        "max": float(arr.max()),
    }


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate run_round results: score, coverage and word counts,
    plus how rounds ended.
    """
    ended = {}
    for r in results:
        ended[r["ended_by"]] = ended.get(r["ended_by"], 0) + 1
    return {
        "rounds": len(results),
        "score": _describe([r["score"] for r in results]),
        "coverage": _describe([r["coverage"] for r in results]),
        "word_count": _describe([r["word_count"] for r in results]),
        "ended_by": ended,
    }


def pretty_summary(summary: Dict) -> str:
    s = summary["score"]
    c = summary["coverage"]
    return (
        f"rounds={summary['rounds']} | score mean={s['mean']:.1f} median={s['median']:.1f} "
        f"p90={s['p90']:.1f} | coverage mean={100 * c['mean']:.1f}% | ended_by={summary['ended_by']}"
    )
