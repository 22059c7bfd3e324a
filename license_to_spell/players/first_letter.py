"""
First Letter player.

A careless baseline: submits random dictionary words that merely start with
the plate's first letter. Many of them fail the in-order rule, which makes
this player useful for exercising the rejection paths of a round.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class FirstLetterPlayer(BasePlayer):
    id = "first_letter"
    name = "First Letter"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._pool: List[str] = []
        self._plate: str | None = None

    def reset(self, *, dictionary: List[str], seed: int | None = None) -> None:
        super().reset(dictionary=dictionary, seed=seed)
        self._pool = []
        self._plate = None

    def next_word(self, state: dict) -> str | None:
        if state["plate"] != self._plate:
            self._plate = state["plate"]
            first = self._plate[0].lower()
            self._pool = [w for w in self.dictionary if w[:1].lower() == first]

        if not self._pool:
            return None
        return self._pool.pop(self.rng.randrange(len(self._pool)))
