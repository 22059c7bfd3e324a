# apps/cli/run.py
"""
CLI entry point for simulated license-to-spell rounds.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it and instantiates the requested simulated player.
  3) Plays a batch of rounds with a live progress indicator and writes:
       - CSV:  per-round results (plate, score, coverage, guesses)
       - JSON: manifest with config, dictionary hash, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from license_to_spell.datasets import validate_dictionary, pretty_summary, load_dictionary, resolve_dictionary_path
from license_to_spell.engine import DEFAULT_MIN_WORDS, DEFAULT_MAX_WORDS
from license_to_spell.game import DEFAULT_TIME_LIMIT
from license_to_spell.harness import run_round, summarize, write_csv, write_manifest
from license_to_spell.harness.core import SECONDS_PER_GUESS, SECONDS_PER_LETTER
from license_to_spell.harness.io import timestamp_id, git_commit_or_unknown
from license_to_spell.harness.summary import pretty_summary as pretty_batch
from license_to_spell.players import create_player, get_player_ids


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="license-to-spell — simulate rounds")
    ap.add_argument("--player", default="random_valid",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--dictionary", help="word list (default: $LTS_DICTIONARY or data/word-dictionary.json)")
    ap.add_argument("--rounds", type=int, default=50, help="number of rounds to play")
    ap.add_argument("--min", dest="min_words", type=int, default=DEFAULT_MIN_WORDS,
                    help="fewest valid words a plate may have")
    ap.add_argument("--max", dest="max_words", type=int, default=DEFAULT_MAX_WORDS,
                    help="most valid words a plate may have")
    ap.add_argument("--max-attempts", type=int, help="give up on plate generation after this many draws")
    ap.add_argument("--time-limit", type=float, default=DEFAULT_TIME_LIMIT, help="round length (seconds)")
    ap.add_argument("--seconds-per-guess", type=float, default=SECONDS_PER_GUESS)
    ap.add_argument("--seconds-per-letter", type=float, default=SECONDS_PER_LETTER)
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    dict_path = resolve_dictionary_path(args.dictionary)
    rep = validate_dictionary(str(dict_path))
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(f"Dictionary not found: {dict_path}")

    # 2) Load words and the player
    dictionary = load_dictionary(dict_path)
    player = create_player(args.player)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.rounds
    indices = range(1, total + 1)
    iterator = tqdm(indices, ncols=80, desc="Playing", unit="round") if mode == "bar" else indices

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Play the batch
    for idx in iterator:
        r = run_round(
            player,
            dictionary,
            min_words=args.min_words,
            max_words=args.max_words,
            time_limit=args.time_limit,
            seconds_per_guess=args.seconds_per_guess,
            seconds_per_letter=args.seconds_per_letter,
            max_attempts=args.max_attempts,
            seed=args.seed + idx,
        )
        r["player_id"] = player.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(pretty_batch(summary))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_rounds": len(results),
        "player_id": player.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
