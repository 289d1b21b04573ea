# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pytermor import seq, autof, Format

ZERO_CHARCODES = [0x00]
WHITESPACE_CHARCODES = [0x09, 0x0a, 0x0d, 0x20]
PRINTABLE_CHARCODES = list(range(0x21, 0x7f))
HIGH_BYTE_CHARCODES = list(range(0x80, 0x100))
OTHER_CONTROL_CHARCODES = list(range(0x01, 0x09)) + [0x0b, 0x0c] + list(range(0x0e, 0x20)) + [0x7f]

SEPARATOR = '┃'


class ByteClass(Enum):
    ZERO = 'zero'
    WHITESPACE = 'space'
    PRINTABLE = 'printable'
    HIGH_BYTE = 'high'
    OTHER_CONTROL = 'control'


CHARCODE_TO_CLASS_MAP: List[ByteClass] = [ByteClass.OTHER_CONTROL] * 0x100
for _codes, _byte_class in (
    (ZERO_CHARCODES, ByteClass.ZERO),
    (WHITESPACE_CHARCODES, ByteClass.WHITESPACE),
    (PRINTABLE_CHARCODES, ByteClass.PRINTABLE),
    (HIGH_BYTE_CHARCODES, ByteClass.HIGH_BYTE),
):
    for _b in _codes:
        CHARCODE_TO_CLASS_MAP[_b] = _byte_class

CHARCODE_TO_GLYPH_MAP: Dict[int, str] = {
    **{b: '▴' for b in OTHER_CONTROL_CHARCODES},
    **{b: chr(b) for b in PRINTABLE_CHARCODES},
    **{b: '×' for b in HIGH_BYTE_CHARCODES},
    0x00: '•',
    0x09: '⇥',
    0x0a: '␊',
    0x0d: '␍',
    0x20: '␣',
}

BYTE_CLASS_FORMAT_MAP: Dict[ByteClass, Format] = {
    ByteClass.ZERO: autof(seq.WHITE),
    ByteClass.WHITESPACE: autof(seq.BLUE),
    ByteClass.PRINTABLE: autof(seq.GREEN),
    ByteClass.HIGH_BYTE: autof(seq.YELLOW),
    ByteClass.OTHER_CONTROL: autof(seq.RED),
}
SEPARATOR_FORMAT: Format = autof(seq.GRAY)
