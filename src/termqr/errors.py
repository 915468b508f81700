from __future__ import annotations


class TermQRError(Exception):
    pass


class MissingInputError(TermQRError):
    pass


class EncodingError(TermQRError):
    pass


class RasterWriteError(TermQRError):
    pass
