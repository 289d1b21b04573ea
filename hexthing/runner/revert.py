# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from pytermor import fmt

from . import AbstractRunner
from ..byteio import Parser, FileWriter
from ..console import ConsoleDebugBuffer
from ..settings import DumpConfig


class RevertRunner(AbstractRunner):
    def __init__(self, config: DumpConfig):
        self._config = config
        self._debug_buffer = ConsoleDebugBuffer('revert')

    def run(self):
        with open(self._config.filename, 'rt', encoding='utf-8') as f:
            with FileWriter(self._config.output, binary=True) as writer:
                total = Parser(writer.write).parse(f)
        self._debug_buffer.write(1, f'Restored {fmt.bold(str(total))} byte(s)')
