"""
Scoring for a list of words.

A word is worth one point per letter, so the score of a list is the sum of
word lengths. The same reducer is used for the player's guesses (current
score) and for a plate's full valid-word set (total possible points).
"""

from dataclasses import dataclass, asdict
from typing import Dict, Sequence


@dataclass(frozen=True)
class ScoreStats:
    """Aggregate over a word list."""
    total_points: int
    average_length: float

    def as_dict(self) -> Dict:
        return asdict(self)


def calculate_score(words: Sequence[str]) -> int:
    """
    Sum of word lengths. No case or whitespace normalization is applied.

    Examples:
      calculate_score([]) -> 0
      calculate_score(["CAT", "CATCH", "CATAPULT"]) -> 16
    """
    return sum(len(w) for w in words)


def calculate_stats(words: Sequence[str]) -> ScoreStats:
    """
    Total points and average word length for `words`.

    An empty list gives ScoreStats(0, 0.0) instead of dividing by zero.
    """
    if not words:
        return ScoreStats(total_points=0, average_length=0.0)

    total = calculate_score(words)
    return ScoreStats(total_points=total, average_length=total / len(words))
