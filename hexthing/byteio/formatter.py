# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from .classifier import glyph, colorize
from .const import SEPARATOR, SEPARATOR_FORMAT


# noinspection PyMethodMayBeStatic
class LineFormatter:
    """
    Compose one dump line out of a chunk of bytes:

        `` 0x00 ┃ 41 42 0a <padding> ┃ AB␊``

    All lines produced by the same formatter have equal visible width,
    short chunks are padded with 3 spaces per missing byte.
    """
    PADDING_BYTE = 3 * ' '

    def __init__(self, bytes_per_line: int, addr_width: int, uppercase: bool = False, color: bool = False):
        if bytes_per_line < 1:
            raise ValueError(f'Bytes per line should be positive, got {bytes_per_line}')
        self._bytes_per_line = bytes_per_line
        self._addr_width = addr_width
        self._uppercase = uppercase
        self._color = color

    def format(self, address: int, chunk: bytes) -> str:
        if not chunk:
            raise ValueError('Cannot format empty chunk')
        if len(chunk) > self._bytes_per_line:
            raise ValueError(f'Chunk is longer than {self._bytes_per_line} bytes: {len(chunk)}')

        separator = self._format_separator()
        return ' '.join([
            '',
            self._format_address(address),
            separator,
            self._format_hex(chunk) + self._justify_hex(self._bytes_per_line - len(chunk)),
            separator,
            self._format_ascii(chunk),
        ]) + '\n'

    def _format_address(self, address: int) -> str:
        digits = f'{address:0{self._addr_width}{"X" if self._uppercase else "x"}}'
        return f'0x{digits}'

    def _format_hex(self, chunk: bytes) -> str:
        hex_fmt = '02X' if self._uppercase else '02x'
        return ' '.join(self._apply_color(b, f'{b:{hex_fmt}}') for b in chunk)

    def _justify_hex(self, num_bytes: int) -> str:
        return self.PADDING_BYTE * num_bytes

    def _format_ascii(self, chunk: bytes) -> str:
        return ''.join(self._apply_color(b, glyph(b)) for b in chunk)

    def _format_separator(self) -> str:
        return SEPARATOR_FORMAT(SEPARATOR) if self._color else SEPARATOR

    def _apply_color(self, b: int, s: str) -> str:
        return colorize(b, s) if self._color else s
