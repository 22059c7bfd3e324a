from script.build_dictionary import clean_words, unique_preserve_order
from script.fetch_state_mottos import parse_mottos

HTML = """
<table class="wikitable">
  <tr><th>State</th><th>Motto</th><th>Translation</th></tr>
  <tr><td>New Hampshire</td><td>"Live Free or Die"[12]</td><td></td></tr>
  <tr><td>Guam</td><td>Not a state</td><td></td></tr>
  <tr><td>Texas</td><td>Friendship</td><td></td></tr>
  <tr><td>Texas</td><td>Duplicate row</td><td></td></tr>
</table>
"""


def test_parse_mottos():
    assert parse_mottos(HTML) == {"New Hampshire": "Live Free or Die", "Texas": "Friendship"}


def test_clean_words():
    lines = ["Cat", "ab", "o'clock", "catapult", "cat", "x" * 40, ""]
    assert clean_words(lines) == ["cat", "catapult"]
    assert unique_preserve_order(["b", "a", "b"]) == ["b", "a"]
