from __future__ import annotations

from pathlib import Path
from typing import Protocol

import cv2
import numpy as np
import segno

from . import config
from .errors import EncodingError, RasterWriteError


class Encoder(Protocol):
    def encode(self, text: str) -> np.ndarray:
        """Return the symbol's module grid without a quiet zone."""
        ...

    def write_raster(
        self,
        text: str,
        pixels_per_module: int,
        path: str,
        include_border: bool,
    ) -> None:
        ...


def make_raster_array(
    matrix: np.ndarray,
    scale: int = config.DEFAULT_PIXELS_PER_MODULE,
    border: int = config.DEFAULT_RASTER_BORDER,
    fg: int = config.DEFAULT_COLOR_FG,
    bg: int = config.DEFAULT_COLOR_BG,
) -> np.ndarray:
    arr = np.asarray(matrix, dtype=np.uint8)
    if border > 0:
        arr = np.pad(arr, border, constant_values=0)
    arr = np.repeat(np.repeat(arr, scale, axis=0), scale, axis=1)
    return np.where(arr > 0, fg, bg).astype(np.uint8)


class SegnoEncoder:
    def __init__(self, error: str = config.DEFAULT_ERROR_LEVEL) -> None:
        self.error = error

    def _make(self, text: str) -> segno.QRCode:
        try:
            return segno.make(text, error=self.error, micro=False)
        except ValueError as exc:  # DataOverflowError is a ValueError
            raise EncodingError(f"failed to generate QR code: {exc}") from exc

    def encode(self, text: str) -> np.ndarray:
        qr = self._make(text)
        return np.array(qr.matrix, dtype=np.uint8).astype(bool)

    def write_raster(
        self,
        text: str,
        pixels_per_module: int,
        path: str,
        include_border: bool,
    ) -> None:
        """Write the symbol as an image.

        The format follows the path's suffix when OpenCV has a writer for it;
        any other path gets PNG data.

        The raster border is either the standard quiet zone or nothing.
        """
        matrix = self.encode(text)
        border = config.DEFAULT_RASTER_BORDER if include_border else 0
        img = make_raster_array(matrix, scale=max(1, pixels_per_module), border=border)
        ext = Path(path).suffix
        if not ext or not cv2.haveImageWriter(path):
            ext = ".png"
        try:
            ok, buf = cv2.imencode(ext, img)
        except cv2.error as exc:
            raise RasterWriteError(f"cannot encode image as {ext}: {exc}") from exc
        if not ok:
            raise RasterWriteError(f"cannot encode image as {ext}")
        try:
            Path(path).write_bytes(buf.tobytes())
        except OSError as exc:
            raise RasterWriteError(f"failed to write {path}: {exc}") from exc
