from __future__ import annotations

import numpy as np


def _source_index(target_size: int, original_size: int) -> np.ndarray:
    """Map each output coordinate back to a source coordinate.

    Coordinates are truncated, not rounded, and clamped to the last source row.
    """
    factor = target_size / original_size
    idx = np.floor(np.arange(target_size) / factor).astype(np.intp)
    return np.minimum(idx, original_size - 1)


def scale_matrix(grid: np.ndarray, target_size: int) -> np.ndarray:
    """Nearest-neighbor resize of a square module grid to ``target_size``."""
    if target_size <= 0 or len(grid) == 0:
        return grid
    original_size = len(grid)
    if target_size == original_size:
        return grid
    src = np.asarray(grid, dtype=bool)
    idx = _source_index(target_size, original_size)
    return src[np.ix_(idx, idx)]


def add_border(grid: np.ndarray, border_size: int) -> np.ndarray:
    """Surround the grid with ``border_size`` rings of light modules."""
    if border_size <= 0 or len(grid) == 0:
        return grid
    src = np.asarray(grid, dtype=bool)
    return np.pad(src, border_size, constant_values=False)
