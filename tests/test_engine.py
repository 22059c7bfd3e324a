import pytest
from license_to_spell.engine import (
    is_valid_word,
    get_valid_words,
    calculate_score,
    calculate_stats,
    ScoreStats,
)

# --- plate matching golden tests ---
@pytest.mark.parametrize("plate,word,expected", [
    ("BAM", "BECAME", True),
    ("CAT", "CATAPULT", True),
    ("CAT", "COMMUNICATE", True),
    ("AAA", "AARDVARK", True),
    ("CAT", "CAT", True),
    ("BAM", "BEMOAN", False),   # A comes after M
    ("BAM", "EMBALM", False),   # starts with E
    ("ABC", "AB", False),       # too short
    ("BAM", "BAD", False),      # no M
    ("BAM", "", False),
    ("CAT", "SCATTER", False),  # starts with S
    ("AAA", "ABA", False),      # only two A's
])
def test_is_valid_word_golden(plate, word, expected):
    assert is_valid_word(plate, word) is expected

@pytest.mark.parametrize("plate,word", [
    ("ABC", "AbCdEf"),
    ("abc", "ABCDEF"),
    ("Abc", "aBcDeF"),
])
def test_is_valid_word_ignores_case(plate, word):
    assert is_valid_word(plate, word) is True

def test_is_valid_word_leaves_inputs_alone():
    plate, word = "bam", "became"
    is_valid_word(plate, word)
    assert plate == "bam" and word == "became"

DICT = ["became", "bemoan", "embalm", "bamboo", "balm", "beam", "bam",
        "cat", "catapult", "communicate", "scatter"]

def test_get_valid_words_bam():
    valid = get_valid_words("BAM", DICT)
    assert valid == ["became", "bamboo", "balm", "beam", "bam"]
    assert "bemoan" not in valid and "embalm" not in valid

def test_get_valid_words_preserves_order_and_case():
    assert get_valid_words("cat", ["CATAPULT", "scatter", "Cat"]) == ["CATAPULT", "Cat"]

def test_get_valid_words_empty_cases():
    assert get_valid_words("XQZ", DICT) == []
    assert get_valid_words("BAM", []) == []

def test_get_valid_words_is_pure():
    before = list(DICT)
    assert get_valid_words("CAT", DICT) == get_valid_words("CAT", DICT)
    assert DICT == before

# --- scoring ---
@pytest.mark.parametrize("words,expected", [
    ([], 0),
    (["BECAME"], 6),
    (["CAT", "CATCH", "CATAPULT"], 16),
    (["A", "I"], 2),
    (["COMMUNICATION"], 13),
])
def test_calculate_score(words, expected):
    assert calculate_score(words) == expected

def test_calculate_stats():
    stats = calculate_stats(["CAT", "CATCH", "CATAPULT"])
    assert stats.total_points == 16
    assert stats.average_length == pytest.approx(5.33, abs=0.01)
    assert calculate_stats(["CAT", "BAT", "HAT"]) == ScoreStats(9, 3.0)
    assert calculate_stats(["BECAME"]).average_length == 6

def test_calculate_stats_empty():
    stats = calculate_stats([])
    assert stats == ScoreStats(total_points=0, average_length=0.0)
    assert stats.as_dict() == {"total_points": 0, "average_length": 0.0}

@pytest.mark.parametrize("word", ["CAT", ""])
def test_empty_plate_matches_nothing(word):
    assert is_valid_word("", word) is False
    assert get_valid_words("", [word]) == []
