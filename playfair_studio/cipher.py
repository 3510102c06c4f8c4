"""
PLAYFAIR ORCHESTRATOR  |  playfair_studio
=========================================
Composes the five stages into one pure function:

    text ──normalize──> letters ──segment──> pairs ─┐
    key  ──build_key_square──> grid ──index─────────┼─transform─> flat
                                                    │
    flat ──reinsert_spaces (keep_spaces only)───────┴──> result

Every run returns a CipherResult holding the square, the input pairs,
the per-pair steps and the final text. Nothing is kept between calls
except the memo table of run_config().
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple

from .config import PlayfairConfig, DEFAULT_FILLER
from .stages.normalize  import normalize
from .stages.key_square import Grid, build_key_square, position_index
from .stages.digraphs   import segment
from .stages.transform  import transform
from .stages.spacing    import reinsert_spaces

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """One transformation record: input pair -> output pair."""
    input: str
    output: str


@dataclass(frozen=True)
class CipherResult:
    matrix: Grid
    pairs: Tuple[str, ...] = field(default_factory=tuple)
    steps: Tuple[Step, ...] = field(default_factory=tuple)
    result: str = ""

    def as_dict(self) -> dict:
        """Plain lists and dicts, ready for JSON or a template."""
        return {
            "matrix": [list(row) for row in self.matrix],
            "pairs":  list(self.pairs),
            "steps":  [{"input": s.input, "output": s.output} for s in self.steps],
            "result": self.result,
        }


@lru_cache(maxsize=256)
def run_config(config: PlayfairConfig) -> CipherResult:
    """Run the pipeline for one configuration. Results are memoised."""
    grid  = build_key_square(config.key, config.include_j)
    index = position_index(grid)
    pairs = segment(normalize(config.text), config.filler)

    steps = []
    for pair in pairs:
        out = transform(pair, grid, index, config.mode)
        steps.append(Step("".join(pair), "".join(out)))

    result = "".join(s.output for s in steps)
    if config.keep_spaces:
        result = reinsert_spaces(result, config.text)

    logger.debug(f"{config.mode}: {len(pairs)} pairs -> {len(result)} chars")
    return CipherResult(
        matrix=grid,
        pairs=tuple(s.input for s in steps),
        steps=tuple(steps),
        result=result,
    )


def run_cipher(text: str, key: str, mode: str = "encrypt",
               filler: str = DEFAULT_FILLER, keep_spaces: bool = False,
               include_j: bool = False) -> CipherResult:
    """
    Encrypt or decrypt `text` under `key`.

    Args:
        mode        : "encrypt" or "decrypt" (ValueError otherwise)
        filler      : padding letter; only its first valid letter is used
        keep_spaces : re-space the output after the original's words
        include_j   : accepted; the classic 25-letter square is always used
    """
    return run_config(PlayfairConfig(
        text=text, key=key, mode=mode, filler=filler,
        keep_spaces=keep_spaces, include_j=include_j,
    ))


class PlayfairCipher:
    """
    Playfair digraph substitution bound to one key.

    Classic cipher, trivially broken by digraph frequency analysis.
    Here for faithful reproduction, not secrecy.
    """

    def __init__(self, key: str, filler: str = DEFAULT_FILLER,
                 keep_spaces: bool = False, include_j: bool = False):
        self._key         = key
        self._filler      = filler
        self._keep_spaces = keep_spaces
        self._include_j   = include_j

    @property
    def key_square(self) -> Grid:
        return build_key_square(self._key, self._include_j)

    def run(self, text: str, mode: str) -> CipherResult:
        return run_cipher(text, self._key, mode, self._filler,
                          self._keep_spaces, self._include_j)

    def encrypt(self, plaintext: str) -> str:
        return self.run(plaintext, "encrypt").result

    def decrypt(self, ciphertext: str) -> str:
        return self.run(ciphertext, "decrypt").result

    def __repr__(self):
        return f"PlayfairCipher(key={self._key!r}, filler={self._filler!r})"


if __name__ == "__main__":
    from .render import format_key_square, format_steps

    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    cipher = PlayfairCipher("PLAYFAIR EXAMPLE")
    plain  = "Hide the gold in the tree stump"

    print(f"\n{'═'*60}")
    print("Playfair  |  Self-Test")
    print(f"{'═'*60}")
    print(format_key_square(cipher.key_square))

    enc = cipher.run(plain, "encrypt")
    print(f"\n{format_steps(enc.steps)}\n")
    dec = cipher.decrypt(enc.result)
    logger.info(f"Plaintext : {plain}")
    logger.info(f"Ciphertext: {enc.result}")
    logger.info(f"Decrypted : {dec}")
    assert enc.result == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert dec == "HIDETHEGOLDINTHETREXESTUMP"

    print(f"{'═'*60}")
    print("Playfair: PASSED")
    print(f"{'═'*60}\n")
