"""
One timed round of play.

Lifecycle:
  IDLE --start()--> PLAYING --stop() / time runs out--> ENDED --start()--> PLAYING ...

The round owns a single timer: the clock reading taken at start(). Time left
is derived from it on demand, so there is nothing to cancel when a round
ends; remaining() simply freezes at the moment of stop/timeout.

The clock is injectable (defaults to time.monotonic) so the harness can run
rounds on simulated time and tests don't have to sleep.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Iterable, List

from license_to_spell.engine import (
    PlateResult,
    GuessVerdict,
    ScoreStats,
    calculate_score,
    calculate_stats,
    normalize_guess,
    validate_guess,
)

logger = logging.getLogger(__name__)

# Five minutes, as shown on the timer at the start of a round.
DEFAULT_TIME_LIMIT = 300.0


class RoundState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    ENDED = "ended"


def format_timer(seconds: float) -> str:
    """Render seconds as M:SS, rounding partial seconds up (299.2 -> 5:00)."""
    whole = int(-(-max(seconds, 0.0) // 1))
    return f"{whole // 60}:{whole % 60:02d}"


class Round:
    def __init__(
            self,
            dictionary: Iterable[str],
            *,
            time_limit: float = DEFAULT_TIME_LIMIT,
            clock: Callable[[], float] = time.monotonic,
    ):
        if time_limit <= 0:
            raise ValueError(f"time_limit must be positive; got {time_limit}")
        self.words = frozenset(w.lower() for w in dictionary)
        self.time_limit = float(time_limit)
        self.clock = clock

        self.state = RoundState.IDLE
        self.plate: PlateResult | None = None
        self.guesses: List[str] = []
        self.rejected: List[tuple[str, GuessVerdict]] = []
        self.ended_by: str | None = None
        self._started_at: float | None = None
        self._ended_at: float | None = None

    # ---- lifecycle ----

    def start(self, plate: PlateResult) -> None:
        self._check_timeout()
        if self.state is RoundState.PLAYING:
            raise RuntimeError("round already in progress; stop() it first")
        self.plate = plate
        self.guesses = []
        self.rejected = []
        self.ended_by = None
        self._started_at = self.clock()
        self._ended_at = None
        self.state = RoundState.PLAYING
        logger.info("round started: plate=%s words=%d", plate.letters, plate.word_count)

    def stop(self) -> None:
        """End the round early. No-op if it already ended."""
        self._check_timeout()
        if self.state is RoundState.IDLE:
            raise RuntimeError("round has not started")
        if self.state is RoundState.PLAYING:
            self._end("stopped")

    def _end(self, reason: str) -> None:
        self._ended_at = self.clock()
        self.state = RoundState.ENDED
        self.ended_by = reason
        logger.info("round ended (%s): score=%d, %d words", reason, self.score, len(self.guesses))

    def _check_timeout(self) -> None:
        if self.state is RoundState.PLAYING and self.elapsed() >= self.time_limit:
            self._end("timeout")

    # ---- timer ----

    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._ended_at if self._ended_at is not None else self.clock()
        return min(end - self._started_at, self.time_limit)

    def remaining(self) -> float:
        self._check_timeout()
        return max(self.time_limit - self.elapsed(), 0.0)

    def timer_text(self) -> str:
        return format_timer(self.remaining())

    @property
    def is_playing(self) -> bool:
        self._check_timeout()
        return self.state is RoundState.PLAYING

    # ---- guesses ----

    def submit(self, word: str) -> GuessVerdict:
        """
        Judge a submission. Accepted words are stored uppercase.
        Raises RuntimeError outside of play (including after a timeout).
        """
        self._check_timeout()
        if self.state is not RoundState.PLAYING:
            raise RuntimeError(f"cannot submit while round is {self.state.value}")

        verdict = validate_guess(self.plate.letters, word, self.words, self.guesses, lowercased=True)
        if verdict.accepted:
            self.guesses.append(normalize_guess(word))
        else:
            self.rejected.append((word, verdict))
        return verdict

    # ---- scoring ----

    @property
    def score(self) -> int:
        return calculate_score(self.guesses)

    def stats(self) -> ScoreStats:
        return calculate_stats(self.guesses)

    def possible_stats(self) -> ScoreStats:
        if self.plate is None:
            return calculate_stats([])
        return calculate_stats(self.plate.valid_words)

    def missed_words(self) -> List[str]:
        """Valid words for the plate that were not guessed, dictionary order."""
        if self.plate is None:
            return []
        got = set(self.guesses)
        return [w for w in self.plate.valid_words if w.upper() not in got]
