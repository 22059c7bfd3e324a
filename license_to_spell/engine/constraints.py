"""
Dictionary filtering for a plate.

Given:
  - a plate (e.g., "BAM")
  - a dictionary (any iterable of words)

Return:
  - the words that satisfy the plate, in dictionary order.

The valid-word set is recomputed on every call; nothing is cached.
"""

from typing import Iterable, List
from .matching import is_valid_word


def get_valid_words(plate: str, dictionary: Iterable[str]) -> List[str]:
    """
    Keep only the words of `dictionary` that are valid for `plate`.

    Args:
      plate      : plate letters (any case)
      dictionary : iterable of candidate words (left unmodified)

    Returns:
      List[str] of valid words, original order and casing preserved.
      An empty dictionary or an impossible plate gives [].
    """
    return [w for w in dictionary if is_valid_word(plate, w)]
