# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import abc
import sys
from typing import IO, AnyStr

from pytermor import fmt, seq

from ..common import OutputExistsError
from ..console import ConsoleDebugBuffer


class Writer(metaclass=abc.ABCMeta):
    def __init__(self):
        self._io: IO|None = None
        self._debug_buffer = ConsoleDebugBuffer('writer', seq.CYAN)
        self._bytes_written = 0

    @property
    @abc.abstractmethod
    def color_allowed(self) -> bool: raise NotImplementedError

    def open(self) -> Writer:
        self._io = self._open()
        return self

    def write(self, data: AnyStr):
        self._io.write(data)
        self._bytes_written += len(data)

    def close(self):
        if self._io and not self._io.closed:
            self._io.flush()
            self._close()
        self._debug_buffer.write(1, f'Output closed, {fmt.bold(str(self._bytes_written))} unit(s) written')

    @abc.abstractmethod
    def _open(self) -> IO: raise NotImplementedError

    def _close(self):
        self._io.close()

    def __enter__(self) -> Writer:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class ConsoleWriter(Writer):
    def __init__(self, color: bool = True):
        super().__init__()
        self._color = color

    @property
    def color_allowed(self) -> bool:
        return self._color

    def write(self, data: str):
        super().write(data)
        if data.endswith('\n'):
            self._io.flush()

    def _open(self) -> IO:
        self._debug_buffer.write(1, 'Writing to stdout')
        return sys.stdout

    def _close(self):
        pass  # stdout stays open


class FileWriter(Writer):
    """
    Writes to a newly created file; never overwrites existing one.
    """
    def __init__(self, path: str, binary: bool = False):
        super().__init__()
        self._path = path
        self._binary = binary

    @property
    def color_allowed(self) -> bool:
        return False

    def _open(self) -> IO:
        try:
            if self._binary:
                io = open(self._path, 'xb')
            else:
                io = open(self._path, 'xt', encoding='utf-8', newline='\n')
        except FileExistsError as e:
            raise OutputExistsError(self._path) from e
        self._debug_buffer.write(1, f'Created file: {fmt.bold(self._path)}')
        return io
