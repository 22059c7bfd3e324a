import json
from pathlib import Path

import pytest
from license_to_spell.datasets import (
    load_dictionary,
    load_mottos,
    read_lines,
    resolve_dictionary_path,
    write_json,
    write_lines,
)


def test_load_dictionary_json_mapping_keys(tmp_path: Path):
    p = tmp_path / "word-dictionary.json"
    p.write_text(json.dumps({"Became": 1, "balm": 1, " beam ": 0}), encoding="utf-8")
    assert load_dictionary(p) == ["became", "balm", "beam"]


def test_load_dictionary_json_list(tmp_path: Path):
    p = write_json(["cat", "", "Catch"], tmp_path / "words.json")
    assert load_dictionary(p) == ["cat", "catch"]


def test_load_dictionary_text(tmp_path: Path):
    p = write_lines(["cat", "  ", "CATAPULT"], tmp_path / "sub" / "words.txt")
    assert read_lines(p) == ["cat", "  ", "CATAPULT"]
    assert load_dictionary(p) == ["cat", "catapult"]


def test_load_dictionary_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text('"just a string"', encoding="utf-8")
    with pytest.raises(ValueError):
        load_dictionary(bad)


def test_load_mottos(tmp_path: Path):
    p = write_json({"New Hampshire": "Live Free or Die"}, tmp_path / "state-mottos.json")
    assert load_mottos(p) == {"New Hampshire": "Live Free or Die"}
    lst = write_json(["nope"], tmp_path / "list.json")
    with pytest.raises(ValueError):
        load_mottos(lst)


def test_resolve_dictionary_path(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("LTS_DICTIONARY", raising=False)
    assert resolve_dictionary_path() == Path("data") / "word-dictionary.json"
    monkeypatch.setenv("LTS_DICTIONARY", str(tmp_path / "env.json"))
    assert resolve_dictionary_path() == tmp_path / "env.json"
    assert resolve_dictionary_path("explicit.txt") == Path("explicit.txt")


def test_read_entries_keeps_raw_entries(tmp_path: Path):
    from license_to_spell.datasets import read_entries

    mapping = write_json({"Became": 1, " beam ": 0}, tmp_path / "d.json")
    assert read_entries(mapping) == ["Became", " beam "]
    text = write_lines(["Cat", ""], tmp_path / "d.txt")
    assert read_entries(text) == ["Cat", ""]
    with pytest.raises(ValueError):
        read_entries(write_json(3, tmp_path / "n.json"))
