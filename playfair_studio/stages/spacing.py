"""
Stage 5  |  SPACE REINSERTER
============================
Best-effort word spacing for the flat cipher output.

Word lengths are read off the original text (letters and whitespace
only) and each word consumes exactly that many characters of the
output. Filler letters lengthen the stream, so boundaries drift once a
filler lands inside a word, and any letters left over after the last
word are dropped. This stage is a readability aid, not an inverse.
"""

import re

_NOT_LETTER_OR_SPACE = re.compile(r"[^A-Za-z\s]")


def word_lengths(original: str) -> list:
    return [len(w) for w in _NOT_LETTER_OR_SPACE.sub("", original).split()]


def reinsert_spaces(flat: str, original: str) -> str:
    pieces = []
    idx = 0
    for length in word_lengths(original):
        piece = flat[idx:idx + length]
        idx += len(piece)
        pieces.append(piece)
    return " ".join(pieces)
