import json
from pathlib import Path
from license_to_spell.datasets import validate_dictionary, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path_json(tmp_path: Path):
    p = tmp_path / "word-dictionary.json"
    p.write_text(json.dumps({"became": 1, "balm": 1, "catapult": 1}), encoding="utf-8")

    rep = validate_dictionary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["shortest"] == 4 and rep["longest"] == 8
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    # 'ab' is shorter than a plate, 'Cat' isn't lowercase, '???' isn't alphabetic
    p = tmp_path / "words.txt"
    p.write_text("became\nab\nCat\n???\n\n", encoding="utf-8")

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 5 - 1
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_dictionary_duplicates(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["became", "balm", "became"])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.json"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_dictionary_bad_json_shape(tmp_path: Path):
    p = tmp_path / "word-dictionary.json"
    p.write_text("42", encoding="utf-8")
    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert any("unreadable" in msg for msg in rep["issues"])
