# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
from dataclasses import dataclass

from ..common import InvalidNumberError, InvalidRangeError

_HEX_REGEXP = re.compile(r'0x([0-9a-fA-F]+)')
_DEC_REGEXP = re.compile(r'[0-9]+')


def parse_num(text: str) -> int:
    """
    Parse non-negative integer literal, either ``0x``-prefixed hexadecimal
    or plain decimal.

    >>> parse_num('0xff')
    255
    >>> parse_num('255')
    255
    """
    if m := _HEX_REGEXP.fullmatch(text):
        return int(m.group(1), 16)
    if _DEC_REGEXP.fullmatch(text):
        return int(text, 10)
    raise InvalidNumberError(text)


@dataclass(frozen=True)
class ByteRange:
    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> ByteRange:
        parts = text.split('-')
        if len(parts) != 2:
            raise InvalidRangeError(text, "must be in the format 'start-end'")
        try:
            start, end = (parse_num(part) for part in parts)
        except InvalidNumberError as e:
            raise InvalidRangeError(text, f"'{e.literal}' must be either in the format '0xFF' or '255'") from e

        if end < start:
            raise InvalidRangeError(text, 'end is less than start')
        return cls(start, end)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Window:
    start: int = 0
    max_count: int|None = None  # until EOF


def resolve_window(byte_range: ByteRange|None, skip: int|None = None, length: int|None = None) -> Window:
    for value in (skip, length):
        if value is not None and value < 0:
            raise InvalidNumberError(str(value))

    if byte_range is not None:
        return Window(byte_range.start, byte_range.length)
    if skip is not None or length is not None:
        return Window(skip or 0, length)
    return Window()


def address_width(file_size: int) -> int:
    """
    Amount of hex digits required to display any offset of the file,
    i.e. ``ceil(log16(file_size))``, but not less than 1. Integer math
    is used instead of ``math.log`` to stay exact on powers of 16.
    """
    if file_size <= 1:
        return 1
    return len(f'{file_size - 1:x}')
