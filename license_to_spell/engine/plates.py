"""
Plate generation by rejection sampling.

Loop:
  1) draw three independent, uniform letters A-Z (repeats allowed)
  2) compute the plate's valid words against the dictionary
  3) accept iff min_words <= count <= max_words, otherwise redraw

With max_attempts=None the loop has no cap and will spin forever on a
dictionary that cannot produce any plate in range. Passing an integer bounds
it and raises PlateNotFoundError instead.

The number shown on the plate is the valid-word count padded to 3 digits.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .constraints import get_valid_words
from .matching import PLATE_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_MIN_WORDS = 100
DEFAULT_MAX_WORDS = 999


class PlateNotFoundError(RuntimeError):
    """No plate in range was found within the attempt budget."""

    def __init__(self, attempts: int, min_words: int, max_words: int):
        super().__init__(
            f"no plate with {min_words}..{max_words} valid words after {attempts} attempts"
        )
        self.attempts = attempts
        self.min_words = min_words
        self.max_words = max_words


@dataclass(frozen=True)
class PlateResult:
    """An accepted plate together with its valid-word set."""
    letters: str
    word_count: int
    valid_words: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def plate_number(self) -> str:
        return format_plate_number(self.word_count)


def format_plate_number(count: int) -> str:
    """Zero-pad a word count to 3 digits, e.g. 42 -> "042"."""
    return str(count).zfill(3)


def random_letters(rng: random.Random, n: int = PLATE_LENGTH) -> str:
    """n independent uniform draws from A-Z."""
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(n))


def generate_valid_plate(
        dictionary: Iterable[str],
        min_words: int = DEFAULT_MIN_WORDS,
        max_words: int = DEFAULT_MAX_WORDS,
        *,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
) -> PlateResult:
    """
    Sample plates until one has between min_words and max_words (inclusive)
    valid words.

    Args:
      dictionary   : words to match against (read once into a list)
      min_words    : lower bound on the valid-word count
      max_words    : upper bound on the valid-word count
      rng          : random.Random to draw from (seed it for reproducible plates)
      max_attempts : None loops until a plate is found; an int caps the search

    Returns:
      PlateResult with uppercase letters, word_count == len(valid_words).

    Raises:
      ValueError         : the range is empty or negative
      PlateNotFoundError : max_attempts was reached
    """
    if min_words < 0 or max_words < 0:
        raise ValueError(f"word bounds must be non-negative; got {min_words}..{max_words}")
    if min_words > max_words:
        raise ValueError(f"min_words ({min_words}) exceeds max_words ({max_words})")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")

    if rng is None:
        rng = random.Random()
    words: List[str] = list(dictionary)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        letters = random_letters(rng)
        valid = get_valid_words(letters, words)

        if min_words <= len(valid) <= max_words:
            logger.debug("accepted plate %s (%d words) after %d attempts",
                         letters, len(valid), attempts)
            return PlateResult(letters=letters, word_count=len(valid), valid_words=tuple(valid))

        logger.debug("rejected plate %s (%d words)", letters, len(valid))

    raise PlateNotFoundError(attempts, min_words, max_words)
