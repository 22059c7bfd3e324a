from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

# Environment override for the dictionary location.
DICTIONARY_ENV = "LTS_DICTIONARY"
DEFAULT_DICTIONARY = Path("data") / "word-dictionary.json"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def write_json(obj, p: Path | str) -> str:
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)
    return str(p)


def resolve_dictionary_path(path: Path | str | None = None) -> Path:
    """
    Pick the dictionary file: explicit argument, then $LTS_DICTIONARY,
    then data/word-dictionary.json relative to the working directory.
    """
    if path:
        return Path(path)
    env = os.environ.get(DICTIONARY_ENV)
    if env:
        return Path(env)
    return DEFAULT_DICTIONARY


def _read_json(p: Path):
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_entries(p: Path | str) -> List[str]:
    """
    Raw dictionary entries exactly as stored, before any cleaning.

    Accepted formats:
      - .json object  : the keys are the words, values are ignored
                        ({"aardvark": 1, ...} as shipped with the game)
      - .json array   : the items are the words
      - anything else : one word per line

    Raises FileNotFoundError if missing, ValueError for other JSON shapes.
    """
    p = Path(p)
    if p.suffix.lower() != ".json":
        return read_lines(p)

    data = _read_json(p)
    if isinstance(data, dict):
        return [str(k) for k in data.keys()]
    if isinstance(data, list):
        return [str(x) for x in data]
    raise ValueError(f"{p}: expected a JSON object or array, got {type(data).__name__}")


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a word list as a list of lowercase words, order preserved.
    See read_entries for the accepted formats.

    Blank entries are dropped. Duplicates are kept; see validator for checks.
    """
    p = Path(p)
    words = [w.strip().lower() for w in read_entries(p) if w.strip()]
    logger.info("Loaded %s words from %s", len(words), p)
    return words


def load_mottos(p: Path | str) -> Dict[str, str]:
    """
    Load a {state name: motto} mapping from JSON.
    Raises ValueError if the file isn't a JSON object.
    """
    p = Path(p)
    data = _read_json(p)
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a JSON object of state -> motto")
    return {str(k): str(v) for k, v in data.items()}
