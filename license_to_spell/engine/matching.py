"""
Plate matching for a single (plate, word) pair.

Rules:
  - the word must start with the plate's first letter
  - every plate letter must appear in the word, in plate order
    (a subsequence, not necessarily adjacent)

Both sides are compared upper-cased; the caller's strings are not touched.

Examples:
  is_valid_word("BAM", "BECAME")  -> True
  is_valid_word("BAM", "BEMOAN")  -> False  (A comes after M)
  is_valid_word("BAM", "EMBALM")  -> False  (starts with E)
  is_valid_word("AAA", "AARDVARK") -> True
"""

# Plates are always three letters, e.g. "BAM".
PLATE_LENGTH = 3


def is_valid_word(plate: str, word: str) -> bool:
    """
    Return True if `word` satisfies `plate`.

    Two-pointer walk: one cursor over the word, one over the plate. The plate
    cursor advances whenever the current word letter equals the plate letter
    it points at; the word is valid iff the plate cursor reaches the end.
    An empty plate matches nothing.
    """
    plate = plate.upper()
    word = word.upper()

    if not plate:
        return False

    # Too short to hold every plate letter (also covers the empty word)
    if len(word) < len(plate):
        return False

    if word[0] != plate[0]:
        return False

    i = 0
    for ch in word:
        if i == len(plate):
            break
        if ch == plate[i]:
            i += 1

    return i == len(plate)
