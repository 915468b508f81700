from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import numpy as np
import pytest

from termqr.errors import EncodingError


class FakeEncoder:
    """Returns a fixed checkerboard instead of a real symbol."""

    def __init__(self, size: int = 21, fail: bool = False) -> None:
        self.size = size
        self.fail = fail
        self.encoded: List[str] = []
        self.rasters: List[Tuple[str, int, str, bool]] = []

    def encode(self, text: str) -> np.ndarray:
        if self.fail:
            raise EncodingError("failed to generate QR code: too much data")
        self.encoded.append(text)
        y, x = np.indices((self.size, self.size))
        return (y + x) % 2 == 0

    def write_raster(self, text: str, pixels_per_module: int, path: str, include_border: bool) -> None:
        if self.fail:
            raise EncodingError("failed to generate QR code: too much data")
        self.rasters.append((text, pixels_per_module, path, include_border))
        Path(path).write_bytes(b"fake")


class FakeTTY:
    def __init__(self) -> None:
        self.parts: List[str] = []

    def write(self, s: str) -> int:
        self.parts.append(s)
        return len(s)

    def flush(self) -> None:
        pass

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 1

    def getvalue(self) -> str:
        return "".join(self.parts)


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def fake_tty() -> FakeTTY:
    return FakeTTY()
