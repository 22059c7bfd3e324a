"""
Guess validation during a round.

This module answers the question: "Should this submission count?"
A guess is accepted iff, after normalization (letters only, uppercase):
  - it is non-empty and at most MAX_WORD_LENGTH letters
  - it has not been accepted already this round
  - it satisfies the plate (see matching.is_valid_word)
  - it is a dictionary word

Checks run in that order, so a repeated guess is reported as a repeat even
if it would also fail a later check.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Collection, Iterable

from .matching import is_valid_word

# Longest word the input box accepts.
MAX_WORD_LENGTH = 31

_NON_LETTERS = re.compile(r"[^A-Za-z]")


class GuessVerdict(str, Enum):
    ACCEPTED = "accepted"
    EMPTY = "empty"
    TOO_LONG = "too_long"
    ALREADY_GUESSED = "already_guessed"
    WRONG_PATTERN = "wrong_pattern"
    NOT_A_WORD = "not_a_word"

    @property
    def accepted(self) -> bool:
        return self is GuessVerdict.ACCEPTED

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    GuessVerdict.ACCEPTED: "Nice!",
    GuessVerdict.EMPTY: "Type a word first",
    GuessVerdict.TOO_LONG: f"Words are limited to {MAX_WORD_LENGTH} letters",
    GuessVerdict.ALREADY_GUESSED: "Already guessed",
    GuessVerdict.WRONG_PATTERN: "Doesn't match the plate",
    GuessVerdict.NOT_A_WORD: "Not in the dictionary",
}


def normalize_guess(word: str) -> str:
    """Drop anything that isn't A-Z and uppercase the rest."""
    return _NON_LETTERS.sub("", word).upper()


def validate_guess(
        plate: str,
        word: str,
        dictionary: Collection[str],
        guessed: Iterable[str] = (),
        *,
        lowercased: bool = False,
) -> GuessVerdict:
    """
    Classify a submission against the plate and the round so far.

    Args:
      plate      : current plate letters
      word       : raw player input
      dictionary : accepted words; membership is case-insensitive
      guessed    : words already accepted this round (any case)
      lowercased : the caller guarantees `dictionary` is a set of lowercase
                   words, so membership is a hash lookup

    Notes:
      - Otherwise `dictionary` is scanned linearly, lowercasing each entry.
        The Round class builds the lowercase set once per round.
    """
    w = normalize_guess(word)

    if not w:
        return GuessVerdict.EMPTY
    if len(w) > MAX_WORD_LENGTH:
        return GuessVerdict.TOO_LONG
    if w in {g.upper() for g in guessed}:
        return GuessVerdict.ALREADY_GUESSED
    if not is_valid_word(plate, w):
        return GuessVerdict.WRONG_PATTERN

    lw = w.lower()
    if lowercased:
        found = lw in dictionary
    else:
        found = any(d.lower() == lw for d in dictionary)
    if not found:
        return GuessVerdict.NOT_A_WORD

    return GuessVerdict.ACCEPTED
