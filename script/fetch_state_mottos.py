"""
Scrape U.S. state mottos from Wikipedia into state-mottos.json.

What it does:
- Downloads the list of state and territory mottos.
- Walks the wikitable rows and takes the first two cells: state, motto.
- Keeps the 50 states only, drops footnote markers like "[3]".
- Writes {"Alabama": "...", ...}.

Usage:
    python -m script.fetch_state_mottos --out data/state-mottos.json
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from license_to_spell.datasets import write_json
from license_to_spell.game import US_STATES

URL = "https://en.wikipedia.org/wiki/List_of_U.S._state_and_territory_mottos"
FOOTNOTE_RE = re.compile(r"\[[^\]]*\]")


def _clean(text: str) -> str:
    return " ".join(FOOTNOTE_RE.sub("", text).split()).strip(' "“”')


def parse_mottos(html: str) -> dict[str, str]:
    soup = BeautifulSoup(html, "html.parser")
    states = set(US_STATES)
    mottos: dict[str, str] = {}
    for table in soup.select("table.wikitable"):
        for row in table.find_all("tr"):
            cells = row.find_all(["th", "td"])
            if len(cells) < 2:
                continue
            state = _clean(cells[0].get_text(" ", strip=True))
            motto = _clean(cells[1].get_text(" ", strip=True))
            if state in states and motto and state not in mottos:
                mottos[state] = motto
    return mottos


def fetch_mottos(url: str = URL) -> dict[str, str]:
    r = requests.get(url, timeout=30, headers={"User-Agent": "license-to-spell data script"})
    r.raise_for_status()
    return parse_mottos(r.text)


def main():
    ap = argparse.ArgumentParser(description="Scrape U.S. state mottos")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/state-mottos.json")
    args = ap.parse_args()

    mottos = fetch_mottos(args.url)
    missing = [s for s in US_STATES if s not in mottos]
    write_json(mottos, args.out)
    print(f"Wrote {len(mottos)} mottos -> {args.out}")
    if missing:
        print(f"Missing: {', '.join(missing)}")


if __name__ == "__main__":
    main()
