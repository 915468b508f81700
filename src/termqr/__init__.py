"""Terminal and raster QR code renderer."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "errors",
    "models",
    "matrix",
    "terminal",
    "render",
    "qrencode",
    "cli",
]
