from __future__ import annotations

import sys
from typing import List, TextIO

import numpy as np

from . import config
from .matrix import add_border, scale_matrix


def render_lines(
    grid: np.ndarray,
    interactive: bool,
    target_size: int,
    border: int = config.DEFAULT_BORDER,
) -> List[str]:
    # Glyphs are the same for TTY and non-TTY output.
    on, off = (config.FULL_BLOCK, config.EMPTY_BLOCK)
    scaled = add_border(scale_matrix(grid, target_size), border)
    return ["".join(on if cell else off for cell in row) for row in scaled]


def render_to_terminal(
    grid: np.ndarray,
    interactive: bool,
    target_size: int,
    border: int = config.DEFAULT_BORDER,
    out: TextIO | None = None,
) -> List[str]:
    """Print the scaled, bordered grid one row per line and return the lines."""
    out = out if out is not None else sys.stdout
    lines = render_lines(grid, interactive, target_size, border)
    for line in lines:
        print(line, file=out)
    return lines
