"""
Stage 4  |  PAIR TRANSFORMER
============================
The three Playfair rules, applied to one digraph:

    same row     shift one column right (encrypt) / left (decrypt)
    same column  shift one row down (encrypt) / up (decrypt)
    rectangle    each letter takes the other letter's column

All shifts wrap modulo 5. The rectangle rule is its own inverse.
"""

from typing import Dict, Tuple

from .digraphs import Digraph
from .key_square import Grid, SIZE

MODES = ("encrypt", "decrypt")


def transform(pair: Digraph, grid: Grid,
              index: Dict[str, Tuple[int, int]], mode: str) -> Digraph:
    """
    Encrypt or decrypt one pair. Both letters must be in `grid`
    (J is looked up as I); anything else raises KeyError.
    An unknown `mode` raises ValueError.
    """
    if mode not in MODES:
        raise ValueError("mode must be 'encrypt' or 'decrypt'")
    a, b = pair
    ra, ca = index["I" if a == "J" else a]
    rb, cb = index["I" if b == "J" else b]
    shift = 1 if mode == "encrypt" else -1

    if ra == rb:
        return grid[ra][(ca + shift) % SIZE], grid[rb][(cb + shift) % SIZE]
    if ca == cb:
        return grid[(ra + shift) % SIZE][ca], grid[(rb + shift) % SIZE][cb]
    return grid[ra][cb], grid[rb][ca]
