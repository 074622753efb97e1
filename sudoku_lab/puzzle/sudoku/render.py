"""Pillow rendering of Sudoku grids of any box shape."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Set, Tuple

from PIL import Image, ImageDraw, ImageFont

from .grid import BoxSize, Cell

GIVEN_COLOR = "black"
FILLED_COLOR = "blue"
CONFLICT_FILL = (255, 204, 204)


def resolve_font(cell_size: int) -> Tuple[ImageFont.ImageFont, Dict[str, Optional[object]]]:
    target_size = max(10, int(cell_size * 0.6))
    for font_name in ["arial.ttf", "LiberationSans-Regular.ttf", "DejaVuSans.ttf"]:
        try:
            font = ImageFont.truetype(font_name, target_size)
            return font, {"type": "truetype", "name": font_name, "size": target_size}
        except OSError:
            continue
    font = ImageFont.load_default()
    size_attr = getattr(font, "size", target_size)
    return font, {"type": "default", "name": None, "size": int(size_attr)}


def render_board(
    grid: Sequence[Sequence[int]],
    box: BoxSize,
    *,
    cell_size: int = 40,
    puzzle_grid: Optional[Sequence[Sequence[int]]] = None,
    conflicts: Optional[Set[Cell]] = None,
) -> Image.Image:
    """Draw ``grid`` with thick lines on box borders.

    When ``puzzle_grid`` is given, digits that were not clues are drawn in
    blue so filled-in cells stand out from the givens.
    """

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    size = len(grid)
    side = size * cell_size
    canvas = Image.new("RGB", (side + 1, side + 1), color="white")
    draw = ImageDraw.Draw(canvas)
    font, _ = resolve_font(cell_size)

    for r, c in conflicts or ():
        x0, y0 = c * cell_size, r * cell_size
        draw.rectangle((x0, y0, x0 + cell_size, y0 + cell_size), fill=CONFLICT_FILL)

    for i in range(size + 1):
        offset = i * cell_size
        draw.line((0, offset, side, offset), fill="black", width=3 if i % box.rows == 0 else 1)
        draw.line((offset, 0, offset, side), fill="black", width=3 if i % box.cols == 0 else 1)

    for r in range(size):
        for c in range(size):
            value = grid[r][c]
            if value == 0:
                continue
            text = str(value)
            bbox = draw.textbbox((0, 0), text, font=font)
            x_text = c * cell_size + (cell_size - (bbox[2] - bbox[0])) / 2 - bbox[0]
            y_text = r * cell_size + (cell_size - (bbox[3] - bbox[1])) / 2 - bbox[1]
            is_clue = puzzle_grid is None or puzzle_grid[r][c] != 0
            draw.text((x_text, y_text), text, fill=GIVEN_COLOR if is_clue else FILLED_COLOR, font=font)
    return canvas


__all__ = ["render_board", "resolve_font"]
