"""
Cosmetic dressing for a plate: which state it's from, its motto and colours.

None of this affects play; it only decides how a PlateResult is shown.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Mapping

from license_to_spell.engine import PlateResult

DEFAULT_MOTTO = "LICENSE TO SPELL"

US_STATES = [
    "Alabama", "Alaska", "Arizona", "Arkansas", "California",
    "Colorado", "Connecticut", "Delaware", "Florida", "Georgia",
    "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa",
    "Kansas", "Kentucky", "Louisiana", "Maine", "Maryland",
    "Massachusetts", "Michigan", "Minnesota", "Mississippi", "Missouri",
    "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont",
    "Virginia", "Washington", "West Virginia", "Wisconsin", "Wyoming",
]

# (background, text) pairs
COLOR_COMBINATIONS = [
    ("amber-50", "amber-700"),
    ("sky-100", "sky-700"),
    ("emerald-50", "emerald-700"),
    ("rose-50", "rose-600"),
    ("violet-50", "violet-700"),
    ("orange-50", "orange-600"),
    ("teal-50", "teal-700"),
    ("indigo-100", "indigo-700"),
    ("lime-50", "lime-700"),
    ("cyan-50", "cyan-700"),
    ("fuchsia-50", "fuchsia-700"),
    ("yellow-50", "yellow-700"),
]


@dataclass(frozen=True)
class PlateDisplay:
    letters: str
    number: str
    state: str
    motto: str
    background: str
    text_color: str

    def render(self) -> str:
        """Plain-text plate for terminals."""
        body = f"{self.letters} {self.number}"
        width = max(len(self.state), len(self.motto), len(body)) + 4
        line = "+" + "-" * width + "+"
        return "\n".join([
            line,
            "|" + self.state.upper().center(width) + "|",
            "|" + body.center(width) + "|",
            "|" + self.motto.upper().center(width) + "|",
            line,
        ])


def decorate_plate(
        result: PlateResult,
        *,
        rng: random.Random,
        mottos: Mapping[str, str] | None = None,
) -> PlateDisplay:
    """Pick a random state and colour scheme; use the state's motto if known."""
    state = rng.choice(US_STATES)
    background, text_color = rng.choice(COLOR_COMBINATIONS)
    motto = (mottos or {}).get(state) or DEFAULT_MOTTO
    return PlateDisplay(
        letters=result.letters.upper(),
        number=result.plate_number,
        state=state,
        motto=motto,
        background=background,
        text_color=text_color,
    )
