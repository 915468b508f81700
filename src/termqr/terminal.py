from __future__ import annotations

import os
import sys
from typing import TextIO

from . import config


def is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def auto_size(stream: TextIO | None = None) -> int:
    """Pick a module count that fits the terminal attached to ``stream``.

    Each module is drawn two characters wide, so the usable width is halved.
    Falls back to ``config.DEFAULT_SIZE`` for pipes, files and failed queries.
    """
    stream = stream if stream is not None else sys.stdout
    if not is_interactive(stream):
        return config.DEFAULT_SIZE
    try:
        width, height = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError):
        return config.DEFAULT_SIZE
    candidate = min(width // 2 - 4, height - 6)
    if config.AUTO_SIZE_MIN < candidate < config.AUTO_SIZE_MAX:
        return candidate
    return config.DEFAULT_SIZE


def convert_size_scale(level: int) -> int:
    if level < 1 or level > len(config.SIZE_SCALE):
        return config.DEFAULT_SIZE
    return config.SIZE_SCALE[level - 1]


def resolve_size(level: int, stream: TextIO | None = None) -> int:
    """Scale levels 1-10 use the lookup table; anything else auto-detects."""
    if 1 <= level <= len(config.SIZE_SCALE):
        return convert_size_scale(level)
    return auto_size(stream)
