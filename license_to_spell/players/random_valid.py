"""
Random Valid player.

Strategy:
  - Each turn, "think of" a random valid word for the plate that hasn't been
    submitted yet.
  - With probability (1 - recall) the word is forgotten instead: it is
    dropped from the pool without being submitted.
  - Stop early once the pool is empty.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - recall=1.0 eventually finds every valid word if time allows.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class RandomValidPlayer(BasePlayer):
    id = "random_valid"
    name = "Random Valid"
    version = "1.0.0"

    def __init__(self, recall: float = 0.35):
        super().__init__()
        if not 0.0 <= recall <= 1.0:
            raise ValueError(f"recall must be in [0, 1]; got {recall}")
        self.recall = recall
        self._pool: List[str] = []
        self._plate: str | None = None

    def reset(self, *, dictionary: List[str], seed: int | None = None) -> None:
        super().reset(dictionary=dictionary, seed=seed)
        self._pool = []
        self._plate = None

    def next_word(self, state: dict) -> str | None:
        """
        Args:
            state: dict with keys:
                - "plate":       current plate letters
                - "valid_words": the plate's valid-word set
                - "guesses":     words accepted so far

        Returns:
            A word to submit, or None when nothing is left to try.
        """
        if state["plate"] != self._plate:
            self._plate = state["plate"]
            self._pool = list(state["valid_words"])

        while self._pool:
            w = self._pool.pop(self.rng.randrange(len(self._pool)))
            if self.rng.random() < self.recall:
                return w
        return None
