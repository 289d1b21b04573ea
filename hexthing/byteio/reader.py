# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
from typing import Callable, IO

from pytermor import fmt, seq

from .window import Window
from ..console import ConsoleDebugBuffer, Console


class Reader:
    """
    Read the input file through the window, chunk by chunk, and pass every
    chunk to the callback along with its absolute address.
    """
    def __init__(self, filename: str, chunk_size: int, window: Window, read_callback: Callable[[bytes, int], None]):
        if chunk_size < 1:
            raise ValueError(f'Chunk size should be positive, got {chunk_size}')
        self._filename = filename
        self._chunk_size = chunk_size
        self._window = window
        self._read_callback = read_callback

        self._io: IO|None = None
        self._file_size: int|None = None
        self._address = window.start
        self._total_read = 0
        self._debug_buffer = ConsoleDebugBuffer('reader', seq.MAGENTA)

    @property
    def file_size(self) -> int:
        if self._file_size is None:
            raise RuntimeError('Input is not opened yet')
        return self._file_size

    @property
    def total_read(self) -> int:
        return self._total_read

    def open(self) -> Reader:
        self._io = open(self._filename, 'rb')
        self._file_size = os.fstat(self._io.fileno()).st_size
        self._debug_buffer.write(1, f'Opened file: {fmt.bold(self._filename)} ({self._file_size} bytes)')

        if self._window.start > self._file_size:
            Console.warn(f'Skip offset {self._window.start:#x} is beyond the end of file ({self._file_size:#x} bytes)')
        self._io.seek(min(self._window.start, self._file_size))
        self._debug_buffer.write(2, f'Window: start {fmt.bold(str(self._window.start))}, '
                                    f'max count {fmt.bold(str(self._window.max_count))}')
        return self

    def read(self):
        if self._io is None:
            self.open()
        max_count = self._window.max_count
        chunks = 0
        try:
            while raw_input := self._io.read(self._chunk_size):
                self._debug_buffer.write(3, f'Read chunk #{chunks}: {Console.printd(raw_input)}', offset=self._address)
                chunks += 1

                if max_count is not None:
                    if self._total_read >= max_count:
                        self._debug_buffer.write(2, 'Byte limit reached: ' + fmt.bold(str(max_count)), offset=self._address)
                        break
                    if self._total_read + len(raw_input) > max_count:
                        raw_input = raw_input[:max_count - self._total_read]
                        self._debug_buffer.write(3, f'Cropping input -> {Console.printd(raw_input)}', offset=self._address)

                self._read_callback(raw_input, self._address)
                self._address += len(raw_input)
                self._total_read += len(raw_input)
            else:
                self._debug_buffer.write(1, 'Encountered EOF', offset=self._address)
        finally:
            self.close()

    def close(self):
        if self._io and not self._io.closed:
            self._io.close()
