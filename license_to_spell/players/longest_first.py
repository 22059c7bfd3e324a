"""
Longest First player.

Submits the plate's valid words from longest to shortest (ties broken
alphabetically), skipping anything already accepted. Since each letter is a
point, this maximizes score per submission, but longer words also take longer
to type on the harness clock.
"""

from __future__ import annotations

from .base import BasePlayer, register


@register
class LongestFirstPlayer(BasePlayer):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def next_word(self, state: dict) -> str | None:
        done = {g.upper() for g in state["guesses"]}
        for w in sorted(state["valid_words"], key=lambda s: (-len(s), s)):
            if w.upper() not in done:
                return w
        return None
