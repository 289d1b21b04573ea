# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from .const import ByteClass, CHARCODE_TO_CLASS_MAP, CHARCODE_TO_GLYPH_MAP, BYTE_CLASS_FORMAT_MAP


def _validate(b: int):
    if not 0 <= b <= 0xff:
        raise ValueError(f'Byte value out of range: {b}')


def classify(b: int) -> ByteClass:
    _validate(b)
    return CHARCODE_TO_CLASS_MAP[b]


def glyph(b: int) -> str:
    """
    Return single-char representation of the byte for the ASCII column:
    printable chars as they are, everything else as a substitute symbol.
    """
    _validate(b)
    return CHARCODE_TO_GLYPH_MAP[b]


def colorize(b: int, s: str) -> str:
    return BYTE_CLASS_FORMAT_MAP[classify(b)](s)
