"""
Stage 3  |  DIGRAPH SEGMENTER
=============================
Splits normalised text into letter pairs in one left-to-right pass.

    HELLO  ->  HE  LX  LO      (doubled L split by the filler)
    CAT    ->  CA  TX          (odd tail padded with the filler)

A doubled letter emits (a, filler) and the second letter is examined
again as the start of the next pair. The filler is not re-checked
against the letter it pads, so "XX" with filler X gives XX XX.
"""

from typing import List, Tuple

Digraph = Tuple[str, str]


def segment(text: str, filler: str = "X") -> List[Digraph]:
    pairs = []
    i = 0
    while i < len(text):
        a = text[i]
        if i + 1 == len(text):
            pairs.append((a, filler))
            break
        b = text[i + 1]
        if a == b:
            pairs.append((a, filler))
            i += 1
        else:
            pairs.append((a, b))
            i += 2
    return pairs
