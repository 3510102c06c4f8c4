"""
playfair_studio
===============
The Playfair digraph substitution cipher (Wheatstone, 1854), built as a
pipeline of small pure stages with a step-by-step trace.

Stages:
    1  NORMALIZER   uppercase, J->I, strip non-letters
    2  KEY SQUARE   5x5 matrix from the key + letter position index
    3  SEGMENTER    letter pairs, filler for doubles and odd tails
    4  TRANSFORMER  row / column / rectangle rules
    5  SPACING      best-effort word re-spacing of the output

Not a secure cipher. It reproduces the classical algorithm faithfully.
"""

__version__ = "1.0.0"

from .config             import PlayfairConfig, sanitize_filler
from .stages.normalize   import normalize
from .stages.key_square  import build_key_square, position_index
from .stages.digraphs    import segment
from .stages.transform   import transform
from .stages.spacing     import reinsert_spaces
from .cipher             import CipherResult, Step, PlayfairCipher, run_cipher, run_config

__all__ = [
    "PlayfairConfig",
    "sanitize_filler",
    "normalize",
    "build_key_square",
    "position_index",
    "segment",
    "transform",
    "reinsert_spaces",
    "CipherResult",
    "Step",
    "PlayfairCipher",
    "run_cipher",
    "run_config",
]
