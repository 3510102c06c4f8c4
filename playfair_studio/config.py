"""
RUN CONFIGURATION  |  playfair_studio
=====================================
One immutable value carries every input of a cipher run:

    text, key, mode, filler, keep_spaces, include_j

It is hashable, so a run can be memoised on it directly. Boundary
clean-up lives here: the filler is cut down to one valid letter and
the mode is validated before the pipeline ever sees them.
"""

import logging
from dataclasses import dataclass

from .stages.normalize import normalize
from .stages.transform import MODES

logger = logging.getLogger(__name__)

DEFAULT_FILLER = "X"
DEFAULT_KEY    = "KRIPTOGRAFI"


def sanitize_filler(value: str) -> str:
    """First usable letter of `value` (J becomes I), else the default X."""
    letters = normalize(value or "")
    if not letters:
        logger.warning(f"Filler {value!r} has no usable letter; using {DEFAULT_FILLER}")
        return DEFAULT_FILLER
    return letters[0]


@dataclass(frozen=True)
class PlayfairConfig:
    text: str
    key: str = DEFAULT_KEY
    mode: str = "encrypt"
    filler: str = DEFAULT_FILLER
    keep_spaces: bool = False
    include_j: bool = False

    def __post_init__(self):
        mode = (self.mode or "").lower()
        if mode not in MODES:
            raise ValueError("mode must be 'encrypt' or 'decrypt'")
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "filler", sanitize_filler(self.filler))
