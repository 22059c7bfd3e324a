import random
from license_to_spell.engine import PlateResult
from license_to_spell.game import decorate_plate, US_STATES, COLOR_COMBINATIONS, DEFAULT_MOTTO


def test_decorate_plate_defaults():
    d = decorate_plate(PlateResult("bam", 42), rng=random.Random(1))
    assert d.letters == "BAM"
    assert d.number == "042"
    assert d.state in US_STATES
    assert (d.background, d.text_color) in COLOR_COMBINATIONS
    assert d.motto == DEFAULT_MOTTO


def test_decorate_plate_uses_motto():
    mottos = {s: f"motto of {s}" for s in US_STATES}
    d = decorate_plate(PlateResult("BAM", 142), rng=random.Random(9), mottos=mottos)
    assert d.motto == f"motto of {d.state}"
    out = d.render()
    assert "BAM 142" in out and d.state.upper() in out


def test_fifty_states():
    assert len(US_STATES) == 50 == len(set(US_STATES))
