"""
Simulation harness core primitives.

- run_round: play one timed round with a simulated player.
- run_batch: play many rounds in sequence with derived seeds.
- Rounds run on a SimulatedClock: every submission costs typing time,
  so a batch of five-minute rounds finishes in milliseconds.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Sequence

from license_to_spell.engine import (
    PlateResult,
    DEFAULT_MIN_WORDS,
    DEFAULT_MAX_WORDS,
    generate_valid_plate,
)
from license_to_spell.game import Round, DEFAULT_TIME_LIMIT

# Typing cost model for simulated players (seconds).
SECONDS_PER_GUESS = 2.0
SECONDS_PER_LETTER = 0.4


class SimulatedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def run_round(
        player,
        dictionary: Sequence[str],
        *,
        plate: PlateResult | None = None,
        min_words: int = DEFAULT_MIN_WORDS,
        max_words: int = DEFAULT_MAX_WORDS,
        time_limit: float = DEFAULT_TIME_LIMIT,
        seconds_per_guess: float = SECONDS_PER_GUESS,
        seconds_per_letter: float = SECONDS_PER_LETTER,
        max_attempts: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the player stops or the clock runs out.

    Args:
        player:             an object implementing BasePlayer with next_word(state)
        dictionary:         all accepted words
        plate:              a fixed plate; if None one is generated with the seed
        min_words/max_words:acceptance range for generated plates
        time_limit:         round length in simulated seconds
        seconds_per_guess:  fixed cost of a submission (must be > 0)
        seconds_per_letter: extra cost per letter typed
        max_attempts:       cap for plate generation (None = unbounded)
        seed:               seeds both plate generation and the player

    Returns:
        dict with keys:
            plate, plate_number, word_count, score, guesses, num_guesses,
            rejected, rejected_by, possible_points, average_length,
            coverage, ended_by, time_used
    """
    if seconds_per_guess <= 0:
        raise ValueError(f"seconds_per_guess must be positive; got {seconds_per_guess}")

    if plate is None:
        plate = generate_valid_plate(
            dictionary, min_words, max_words,
            rng=random.Random(seed), max_attempts=max_attempts,
        )

    player.reset(dictionary=dictionary, seed=seed)
    clock = SimulatedClock()
    rnd = Round(dictionary, time_limit=time_limit, clock=clock)
    rnd.start(plate)

    while rnd.is_playing:
        state = {
            "plate": plate.letters,
            "valid_words": plate.valid_words,
            "guesses": list(rnd.guesses),
            "remaining": rnd.remaining(),
            "rng": player.rng,
        }
        word = player.next_word(state)
        if word is None:
            rnd.stop()
            break

        # Typing takes time; the buzzer may go before the word is in.
        clock.advance(seconds_per_guess + seconds_per_letter * len(word))
        if not rnd.is_playing:
            break
        rnd.submit(word)

    possible = rnd.possible_stats()
    rejected_by = Counter(v.value for _, v in rnd.rejected)
    return {
        "plate": plate.letters,
        "plate_number": plate.plate_number,
        "word_count": plate.word_count,
        "score": rnd.score,
        "guesses": list(rnd.guesses),
        "num_guesses": len(rnd.guesses),
        "rejected": len(rnd.rejected),
        "rejected_by": dict(rejected_by),
        "possible_points": possible.total_points,
        "average_length": rnd.stats().average_length,
        "coverage": (rnd.score / possible.total_points) if possible.total_points else 0.0,
        "ended_by": rnd.ended_by,
        "time_used": rnd.elapsed(),
    }


def run_batch(
        player,
        dictionary: Sequence[str],
        *,
        rounds: int,
        seed: int | None = None,
        **kwargs,
) -> List[Dict]:
    """
    Run many rounds back-to-back, each on its own generated plate.

    Each round's seed is derived from the base seed to make runs reproducible
    but not identical across rounds (seed + index). Extra keyword arguments
    are passed through to run_round.
    """
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0; got {rounds}")

    out: List[Dict] = []
    for idx in range(1, rounds + 1):
        round_seed = None if seed is None else (seed + idx)
        r = run_round(player, dictionary, seed=round_seed, **kwargs)
        out.append(r)
    return out
