"""
Download an English word list and write it in the game's dictionary format.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z words between --min-len and --max-len letters.
- De-duplicates while preserving source order.
- Writes a JSON object keyed by word ({"aardvark": 1, ...}), or plain text
  with --txt.

Usage:
    python -m script.build_dictionary --out data/word-dictionary.json
    python -m script.build_dictionary --url https://example.org/words.txt --min-len 4
"""

import re
import argparse
from pathlib import Path

import requests

from license_to_spell.datasets import write_json, write_lines
from license_to_spell.engine import PLATE_LENGTH, MAX_WORD_LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, min_len: int = PLATE_LENGTH, max_len: int = MAX_WORD_LENGTH) -> list[str]:
    words = (ln.strip().lower() for ln in lines)
    kept = [w for w in words if WORD_RE.match(w) and min_len <= len(w) <= max_len]
    return unique_preserve_order(kept)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Build the word dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/word-dictionary.json")
    ap.add_argument("--min-len", type=int, default=PLATE_LENGTH)
    ap.add_argument("--max-len", type=int, default=MAX_WORD_LENGTH)
    ap.add_argument("--txt", action="store_true", help="write one word per line instead of JSON")
    args = ap.parse_args()

    words = clean_words(fetch_words(args.url), args.min_len, args.max_len)
    if args.txt:
        write_lines(words, args.out)
    else:
        write_json({w: 1 for w in words}, args.out)
    print(f"Wrote {len(words)} words -> {Path(args.out)}")


if __name__ == "__main__":
    main()
