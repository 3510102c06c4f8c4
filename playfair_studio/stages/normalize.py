"""
Stage 1  |  NORMALIZER
======================
Maps raw text onto the working alphabet of the classic square.

Rules, in order:
    1. uppercase everything
    2. collapse J onto I (applied unconditionally)
    3. anything outside A-Z becomes one space (keep_spaces) or vanishes
    4. runs of whitespace collapse to a single space (keep_spaces)

Total function: every string, empty included, maps to a string.
"""

import re

_NON_LETTER = re.compile(r"[^A-Z]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str, keep_spaces: bool = False) -> str:
    """Uppercase, J->I, and strip (or space out) non-letters."""
    text = text.upper().replace("J", "I")
    text = _NON_LETTER.sub(" " if keep_spaces else "", text)
    if keep_spaces:
        text = _WHITESPACE.sub(" ", text)
    return text
