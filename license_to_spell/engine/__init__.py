from .matching import is_valid_word, PLATE_LENGTH
from .constraints import get_valid_words
from .scoring import calculate_score, calculate_stats, ScoreStats
from .plates import (
    generate_valid_plate,
    random_letters,
    format_plate_number,
    PlateResult,
    PlateNotFoundError,
    DEFAULT_MIN_WORDS,
    DEFAULT_MAX_WORDS,
)
from .validation import validate_guess, normalize_guess, GuessVerdict, MAX_WORD_LENGTH

__all__ = [
    "is_valid_word",
    "get_valid_words",
    "calculate_score",
    "calculate_stats",
    "ScoreStats",
    "generate_valid_plate",
    "random_letters",
    "format_plate_number",
    "PlateResult",
    "PlateNotFoundError",
    "validate_guess",
    "normalize_guess",
    "GuessVerdict",
    "PLATE_LENGTH",
    "DEFAULT_MIN_WORDS",
    "DEFAULT_MAX_WORDS",
    "MAX_WORD_LENGTH",
]
