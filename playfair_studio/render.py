"""
DISPLAY + EXPORT  |  playfair_studio
====================================
Thin collaborators around a CipherResult:

    format_key_square   5 rows of space-separated letters
    format_pairs        "HE LX LO"
    format_steps        one "IN -> OUT" line per pair
    render_key_square   PNG image of the square (Pillow)
    export_result       write the result to playfair-<mode>.txt

Dependencies: Pillow >= 10.0
"""

import io
from pathlib import Path
from typing import Iterable, Union

from PIL import Image, ImageDraw, ImageFont

from .config            import MODES
from .stages.key_square import Grid


def format_key_square(grid: Grid) -> str:
    return "\n".join(" ".join(row) for row in grid)


def format_pairs(pairs: Iterable[str]) -> str:
    return " ".join(pairs)


def format_steps(steps: Iterable) -> str:
    return "\n".join(f"{s.input} -> {s.output}" for s in steps)


def render_key_square_png(grid: Grid, cell: int = 48) -> bytes:
    """
    Draw the square as a grid of bordered cells, one letter per cell.

    Returns:
        PNG bytes, (5 * cell) pixels on each side
    """
    rows, cols = len(grid), len(grid[0])
    img  = Image.new("RGB", (cols * cell, rows * cell), "white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            x0, y0 = c * cell, r * cell
            draw.rectangle([x0, y0, x0 + cell - 1, y0 + cell - 1], outline="black")
            left, top, right, bottom = font.getbbox(ch)
            x = x0 + (cell - (right - left)) // 2 - left
            y = y0 + (cell - (bottom - top)) // 2 - top
            draw.text((x, y), ch, fill="black", font=font)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def export_filename(mode: str) -> str:
    mode = (mode or "").lower()
    if mode not in MODES:
        raise ValueError("mode must be 'encrypt' or 'decrypt'")
    return f"playfair-{mode}.txt"


def export_result(result: str, mode: str,
                  directory: Union[str, Path] = ".") -> Path:
    """Write `result` as UTF-8 text; returns the written Path."""
    path = Path(directory) / export_filename(mode)
    path.write_text(result, encoding="utf-8")
    return path
