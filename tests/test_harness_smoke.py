import csv
import json

from license_to_spell.engine import PlateResult, get_valid_words
from license_to_spell.players import create_player
from license_to_spell.harness import run_round, run_batch, summarize, write_csv, write_manifest

DICT = ["became", "bamboo", "balm", "beam", "bam", "bemoan", "embalm",
        "cat", "catch", "catapult", "communicate", "scatter"]
PLATE = PlateResult("BAM", 5, tuple(get_valid_words("BAM", DICT)))


def test_run_round_smoke():
    player = create_player("longest_first")
    r = run_round(player, DICT, plate=PLATE, seed=42)
    assert r["plate"] == "BAM" and r["plate_number"] == "005"
    # Plenty of time: finds everything, then stops
    assert r["ended_by"] == "stopped"
    assert r["guesses"] == ["BAMBOO", "BECAME", "BALM", "BEAM", "BAM"]
    assert r["score"] == r["possible_points"] == 23
    assert r["coverage"] == 1.0
    assert r["rejected"] == 0


def test_run_round_times_out():
    player = create_player("longest_first")
    # 2s + 1s/letter: BAMBOO costs 8s, BECAME another 8s, BALM would land at 22s
    r = run_round(player, DICT, plate=PLATE, time_limit=20, seconds_per_guess=2, seconds_per_letter=1)
    assert r["ended_by"] == "timeout"
    assert r["guesses"] == ["BAMBOO", "BECAME"]
    assert r["time_used"] == 20


def test_run_round_generates_plate():
    player = create_player("random_valid")
    r = run_round(player, DICT, min_words=2, max_words=10, seed=7)
    assert 2 <= r["word_count"] <= 10
    assert r["score"] <= r["possible_points"]


def test_run_batch_and_outputs(tmp_path):
    player = create_player("first_letter")
    results = run_batch(player, DICT, rounds=3, seed=1, min_words=2, max_words=10)
    assert len(results) == 3
    for r in results:
        r["player_id"] = player.id

    s = summarize(results)
    assert s["rounds"] == 3
    assert s["score"]["min"] <= s["score"]["median"] <= s["score"]["max"]
    assert sum(s["ended_by"].values()) == 3

    csv_path = write_csv(results, str(tmp_path / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3 and rows[0]["player"] == "first_letter"
    assert rows[0]["plate_number"].startswith("'")

    m = write_manifest({"summary": s}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["rounds"] == 3


def test_batch_is_reproducible():
    a = run_batch(create_player("random_valid"), DICT, rounds=2, seed=5, min_words=2, max_words=10)
    b = run_batch(create_player("random_valid"), DICT, rounds=2, seed=5, min_words=2, max_words=10)
    assert [r["guesses"] for r in a] == [r["guesses"] for r in b]
    assert [r["plate"] for r in a] == [r["plate"] for r in b]


def test_summarize_empty():
    s = summarize([])
    assert s["rounds"] == 0 and s["score"]["mean"] == 0.0
