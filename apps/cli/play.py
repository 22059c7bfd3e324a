# apps/cli/play.py
"""
Play a round of license-to-spell in the terminal.

Type words that start with the plate's first letter and contain all three
plate letters in order. Each letter is worth a point. Type 'stop' to end
early; Ctrl-D / Ctrl-C also end the round.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --time-limit 120 --min 50
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from license_to_spell.datasets import load_dictionary, load_mottos, resolve_dictionary_path
from license_to_spell.engine import DEFAULT_MIN_WORDS, DEFAULT_MAX_WORDS, generate_valid_plate
from license_to_spell.game import Round, DEFAULT_TIME_LIMIT, decorate_plate

STOP_WORDS = {"stop", "quit"}


def _print_results(rnd: Round, show_missed: bool) -> None:
    stats = rnd.stats()
    possible = rnd.possible_stats()
    print()
    print(f"Round over ({rnd.ended_by}).")
    print(f"Final score:     {rnd.score} / {possible.total_points}")
    print(f"Words found:     {len(rnd.guesses)} / {rnd.plate.word_count}")
    print(f"Average length:  {stats.average_length:.2f} (possible {possible.average_length:.2f})")
    if show_missed:
        missed = rnd.missed_words()
        print(f"Missed ({len(missed)}): {' '.join(w.upper() for w in missed)}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="license-to-spell — play in the terminal")
    ap.add_argument("--dictionary", help="word list (default: $LTS_DICTIONARY or data/word-dictionary.json)")
    ap.add_argument("--mottos", help="JSON mapping of state name -> motto")
    ap.add_argument("--min", dest="min_words", type=int, default=DEFAULT_MIN_WORDS)
    ap.add_argument("--max", dest="max_words", type=int, default=DEFAULT_MAX_WORDS)
    ap.add_argument("--time-limit", type=float, default=DEFAULT_TIME_LIMIT, help="seconds per round")
    ap.add_argument("--seed", type=int, help="RNG seed")
    ap.add_argument("--hide-missed", action="store_true", help="don't reveal the words you missed")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(resolve_dictionary_path(args.dictionary))
    mottos = load_mottos(args.mottos) if args.mottos else None
    rng = random.Random(args.seed)

    rnd = Round(dictionary, time_limit=args.time_limit)
    while True:
        plate = generate_valid_plate(dictionary, args.min_words, args.max_words, rng=rng)
        print(decorate_plate(plate, rng=rng, mottos=mottos).render())
        rnd.start(plate)
        print(f"{rnd.timer_text()} on the clock. Go!\n")

        while rnd.is_playing:
            try:
                guess = input(f"  [{rnd.timer_text()} | {rnd.score} pts] ").strip()
            except (EOFError, KeyboardInterrupt):
                rnd.stop()
                break

            if guess.lower() in STOP_WORDS:
                rnd.stop()
                break
            try:
                verdict = rnd.submit(guess)
            except RuntimeError:
                # clock ran out while the word was being typed
                print("  Time's up! That one didn't count.")
                break
            suffix = f" +{len(rnd.guesses[-1])}" if verdict.accepted else ""
            print(f"  {verdict.message}{suffix}")

        _print_results(rnd, show_missed=not args.hide_missed)

        try:
            again = input("\nNew round? [y/N] ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            again = ""
        if again not in {"y", "yes"}:
            return 0


if __name__ == "__main__":
    sys.exit(main())
