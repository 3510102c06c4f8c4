"""
Stage 2  |  KEY SQUARE + POSITION INDEX
=======================================
Builds the 5x5 substitution square from a key:

    deduplicated key letters (first occurrence wins)
    followed by the rest of ABCDEFGHIKLMNOPQRSTUVWXYZ
    laid out row-major, 5 letters per row

Example, key "KRIPTOGRAFI":

    K R I P T
    O G A F B
    C D E H L
    M N Q S U
    V W X Y Z

The square is rebuilt on every call and never mutated.
"""

import logging
from typing import Dict, Tuple

from .normalize import normalize

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"   # 25 letters, J merged into I
SIZE     = 5

Grid = Tuple[Tuple[str, ...], ...]


def build_key_square(key: str, include_j: bool = False) -> Grid:
    """
    Derive the square from `key`. An empty or letter-free key yields
    the plain alphabet.

    `include_j` is accepted for interface compatibility but does not
    change the square: the key is normalised with J->I, and a 5x5
    square has no slot for a 26th letter.
    """
    if include_j:
        logger.debug("include_j requested; classic 25-letter square is used")

    seen = []
    for ch in normalize(key) + ALPHABET:
        if ch not in seen:
            seen.append(ch)
    letters = seen[:SIZE * SIZE]
    return tuple(tuple(letters[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))


def position_index(grid: Grid) -> Dict[str, Tuple[int, int]]:
    """Map every letter of `grid` to its (row, col)."""
    return {ch: (r, c) for r, row in enumerate(grid) for c, ch in enumerate(row)}
