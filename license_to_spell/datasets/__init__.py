from .validator import validate_dictionary, pretty_summary
from .io import (
    read_lines,
    read_entries,
    write_lines,
    write_json,
    load_dictionary,
    load_mottos,
    resolve_dictionary_path,
)

__all__ = [
    "validate_dictionary",
    "pretty_summary",
    "read_lines",
    "read_entries",
    "write_lines",
    "write_json",
    "load_dictionary",
    "load_mottos",
    "resolve_dictionary_path",
]
