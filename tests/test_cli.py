import json
from pathlib import Path

from apps.cli import play, run
from license_to_spell.game import Round
from license_to_spell.harness import SimulatedClock

WORDS = {"bam": 1, "balm": 1, "beam": 1, "became": 1, "cat": 1, "catch": 1}


def _dictionary(tmp_path: Path) -> str:
    p = tmp_path / "word-dictionary.json"
    p.write_text(json.dumps(WORDS), encoding="utf-8")
    return str(p)


def test_run_cli_with_progress_bar(tmp_path: Path, capsys):
    outdir = tmp_path / "out"
    run.main([
        "--dictionary", _dictionary(tmp_path), "--rounds", "2",
        "--min", "1", "--max", "10", "--seed", "3",
        "--outdir", str(outdir), "--progress", "bar",
    ])
    assert len(list(outdir.glob("run_*.csv"))) == 1
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    assert json.loads(manifests[0].read_text(encoding="utf-8"))["num_rounds"] == 2
    assert "rounds=2" in capsys.readouterr().out


def test_play_cli_late_answer_ends_round(tmp_path: Path, monkeypatch, capsys):
    clock = SimulatedClock()
    rounds = []

    def make_round(dictionary, *, time_limit):
        r = Round(dictionary, time_limit=time_limit, clock=clock)
        rounds.append(r)
        return r

    answers = iter(["bam", "n"])

    def slow_input(prompt=""):
        if "New round" not in prompt:
            clock.advance(1000)  # the player takes far too long
        return next(answers)

    monkeypatch.setattr(play, "Round", make_round)
    monkeypatch.setattr("builtins.input", slow_input)

    assert play.main(["--dictionary", _dictionary(tmp_path), "--min", "1", "--max", "10",
                      "--time-limit", "60", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Time's up" in out
    assert rounds[0].ended_by == "timeout"
    assert rounds[0].guesses == []
