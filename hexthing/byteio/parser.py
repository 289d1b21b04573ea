# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Callable, Iterable

from pytermor import seq

from .const import SEPARATOR
from ..common import UnrecognizedLineFormatError, InvalidHexError
from ..console import ConsoleDebugBuffer, Console


# noinspection PyMethodMayBeStatic
class Parser:
    """
    Reverse dump parser. Accepts either lines produced by the forward mode
    (fields divided with separator glyph) or bare hex strings, one per line.
    """
    def __init__(self, parse_callback: Callable[[bytes], None]):
        self._parse_callback = parse_callback
        self._debug_buffer = ConsoleDebugBuffer('parser', seq.BLUE)

    def parse(self, lines: Iterable[str]) -> int:
        total = 0
        for line_num, line in enumerate(lines, start=1):
            data = self.parse_line(line, line_num)
            self._debug_buffer.write(3, f'Line #{line_num}: {Console.printd(data)}')
            if data:
                self._parse_callback(data)
            total += len(data)
        return total

    def parse_line(self, line: str, line_num: int) -> bytes:
        hex_str = self._extract_hex_field(line, line_num).replace(' ', '')
        try:
            return bytes.fromhex(hex_str)
        except ValueError as e:
            raise InvalidHexError(hex_str, line_num) from e

    def _extract_hex_field(self, line: str, line_num: int) -> str:
        parts = line.strip().split(SEPARATOR)
        if len(parts) == 1:
            return parts[0]
        if len(parts) in (2, 3):
            return parts[1]
        raise UnrecognizedLineFormatError(line_num)
