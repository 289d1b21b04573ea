# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from pytermor import fmt

from . import AbstractRunner
from ..byteio import Reader, LineFormatter, Writer, ConsoleWriter, FileWriter, address_width
from ..console import ConsoleDebugBuffer
from ..settings import DumpConfig


# noinspection PyMethodMayBeStatic
class DumpRunner(AbstractRunner):
    def __init__(self, config: DumpConfig):
        self._config = config
        self._debug_buffer = ConsoleDebugBuffer('dump')
        self._reader: Reader|None = None
        self._formatter: LineFormatter|None = None
        self._writer: Writer|None = None

    def run(self):
        self._reader = Reader(self._config.filename, self._config.bytes_per_line, self._config.window, self._process_chunk)
        self._reader.open()
        try:
            self._writer = self._create_writer()
            with self._writer:
                self._formatter = self._create_formatter(self._reader.file_size)
                self._reader.read()
        finally:
            self._reader.close()
        self._debug_buffer.write(1, f'Dumped {fmt.bold(str(self._reader.total_read))} byte(s)')

    def _create_writer(self) -> Writer:
        if self._config.output_to_file:
            return FileWriter(self._config.output)
        return ConsoleWriter(self._config.color)

    def _create_formatter(self, file_size: int) -> LineFormatter:
        addr_width = address_width(file_size)
        self._debug_buffer.write(2, f'Address width: {fmt.bold(str(addr_width))} digit(s)')
        return LineFormatter(self._config.bytes_per_line, addr_width,
                             self._config.uppercase, self._writer.color_allowed)

    def _process_chunk(self, chunk: bytes, address: int):
        self._writer.write(self._formatter.format(address, chunk))
