# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from pytermor import fmt

from . import AbstractRunner
from ..byteio import ByteClass, SEPARATOR, classify, glyph, colorize
from ..console import Console


# noinspection PyMethodMayBeStatic
class LegendRunner(AbstractRunner):
    CLASS_LABELS = {
        ByteClass.ZERO: 'null byte',
        ByteClass.WHITESPACE: 'tab, newline, carriage return, space',
        ByteClass.PRINTABLE: 'printable ASCII chars',
        ByteClass.HIGH_BYTE: 'bytes above 0x7f',
        ByteClass.OTHER_CONTROL: 'other control chars',
    }

    def run(self):
        Console.info(fmt.bold('BYTE CLASSES'))
        for byte_class in ByteClass:
            codes = [b for b in range(0x100) if classify(b) is byte_class]
            Console.info('  ' + ' '.join([
                f'{byte_class.value:<10s}',
                SEPARATOR,
                f'{self._format_ranges(codes):<24s}',
                SEPARATOR,
                self._format_glyphs(codes),
                ' ' + self.CLASS_LABELS[byte_class],
            ]))

    def _format_ranges(self, codes: List[int]) -> str:
        ranges = []
        start = prev = codes[0]
        for b in codes[1:] + [None]:
            if b is not None and b == prev + 1:
                prev = b
                continue
            ranges.append(f'{start:02x}' if start == prev else f'{start:02x}-{prev:02x}')
            if b is not None:
                start = prev = b
        return ','.join(ranges)

    def _format_glyphs(self, codes: List[int]) -> str:
        glyphs = []
        for b in codes:
            if glyph(b) not in glyphs:
                glyphs.append(glyph(b))
        if len(glyphs) > 4:
            glyphs = glyphs[:2] + ['..'] + glyphs[-1:]
        return colorize(codes[0], ''.join(glyphs))
