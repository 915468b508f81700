from __future__ import annotations

import cv2
import numpy as np
import pytest

from termqr import config
from termqr.errors import EncodingError, RasterWriteError
from termqr.qrencode import SegnoEncoder, make_raster_array


def test_encode_returns_square_bool_grid():
    grid = SegnoEncoder().encode("Hello, World!")
    assert grid.dtype == bool
    assert grid.ndim == 2
    assert grid.shape[0] == grid.shape[1] >= 21
    # finder pattern corner is dark
    assert grid[0, 0]


def test_encode_rejects_oversized_payload():
    with pytest.raises(EncodingError, match="failed to generate QR code"):
        SegnoEncoder().encode("a" * 8000)


def test_make_raster_array_pads_and_scales():
    matrix = np.array([[True, False], [False, True]])
    img = make_raster_array(matrix, scale=3, border=1)
    assert img.shape == (12, 12)
    assert img.dtype == np.uint8
    assert (img[:3, :] == config.DEFAULT_COLOR_BG).all()
    assert (img[3:6, 3:6] == config.DEFAULT_COLOR_FG).all()
    assert (img[3:6, 6:9] == config.DEFAULT_COLOR_BG).all()


def test_write_raster_with_border(tmp_path):
    enc = SegnoEncoder()
    path = tmp_path / "test.png"
    enc.write_raster("Hello, World!", 8, str(path), include_border=True)
    assert path.stat().st_size > 0
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    n = len(enc.encode("Hello, World!")) + 2 * config.DEFAULT_RASTER_BORDER
    assert img.shape == (n * 8, n * 8)
    data, _, _ = cv2.QRCodeDetector().detectAndDecode(img)
    assert data == "Hello, World!"


def test_write_raster_without_border(tmp_path):
    enc = SegnoEncoder()
    path = tmp_path / "plain.png"
    enc.write_raster("abc", 4, str(path), include_border=False)
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    n = len(enc.encode("abc"))
    assert img.shape == (n * 4, n * 4)
    assert img[0, 0] == config.DEFAULT_COLOR_FG


def test_write_raster_missing_directory(tmp_path):
    with pytest.raises(RasterWriteError):
        SegnoEncoder().write_raster("abc", 4, str(tmp_path / "nope" / "qr.png"), True)


@pytest.mark.parametrize("name", ["qr.out", "code.txt", "qr"])
def test_write_raster_unknown_suffix_writes_png(tmp_path, name):
    path = tmp_path / name
    SegnoEncoder().write_raster("abc", 4, str(path), True)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert cv2.imread(str(path)) is not None


def test_write_raster_keeps_known_suffix(tmp_path):
    path = tmp_path / "qr.bmp"
    SegnoEncoder().write_raster("abc", 4, str(path), True)
    assert path.read_bytes()[:2] == b"BM"
