# apps/cli/plate.py
"""
Generate one plate and print it with its statistics.

Usage:
    python -m apps.cli.plate --seed 7
    python -m apps.cli.plate --min 20 --max 60 --show-words
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from license_to_spell.datasets import load_dictionary, load_mottos, resolve_dictionary_path
from license_to_spell.engine import (
    DEFAULT_MIN_WORDS,
    DEFAULT_MAX_WORDS,
    PlateNotFoundError,
    calculate_stats,
    generate_valid_plate,
)
from license_to_spell.game import decorate_plate


def main(argv=None):
    ap = argparse.ArgumentParser(description="license-to-spell — generate a plate")
    ap.add_argument("--dictionary", help="word list (default: $LTS_DICTIONARY or data/word-dictionary.json)")
    ap.add_argument("--mottos", help="JSON mapping of state name -> motto")
    ap.add_argument("--min", dest="min_words", type=int, default=DEFAULT_MIN_WORDS)
    ap.add_argument("--max", dest="max_words", type=int, default=DEFAULT_MAX_WORDS)
    ap.add_argument("--max-attempts", type=int, help="give up after this many draws")
    ap.add_argument("--seed", type=int, help="RNG seed")
    ap.add_argument("--show-words", action="store_true", help="list every valid word")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(resolve_dictionary_path(args.dictionary))
    mottos = load_mottos(args.mottos) if args.mottos else None
    rng = random.Random(args.seed)

    try:
        result = generate_valid_plate(dictionary, args.min_words, args.max_words,
                                      rng=rng, max_attempts=args.max_attempts)
    except PlateNotFoundError as e:
        print(f"No plate found: {e}", file=sys.stderr)
        return 1

    stats = calculate_stats(result.valid_words)
    print(decorate_plate(result, rng=rng, mottos=mottos).render())
    print(f"Valid words:      {result.word_count}")
    print(f"Possible points:  {stats.total_points}")
    print(f"Average length:   {stats.average_length:.2f}")

    if args.show_words:
        print()
        for w in result.valid_words:
            print(w.upper())
    return 0


if __name__ == "__main__":
    sys.exit(main())
