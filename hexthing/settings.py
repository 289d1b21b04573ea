# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass
from typing import Any

from .byteio import ByteRange, Window, parse_num, resolve_window
from .common import ArgumentError


@dataclass(frozen=True)
class DumpConfig:
    filename: str
    output: str|None
    bytes_per_line: int
    window: Window
    reverse: bool
    uppercase: bool
    color: bool

    @property
    def output_to_file(self) -> bool:
        return self.output is not None


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.byte_range: str|None = None
        self.bytes_per_line: int = 16
        self.debug: int = 0
        self.filename: str|None = None
        self.length: str|None = None
        self.legend: bool = False
        self.no_color: bool = False
        self.output: str|None = None
        self.reverse: bool = False
        self.skip: str|None = None
        self.uppercase: bool = False
        self.version: bool = False

    def to_config(self) -> DumpConfig:
        if not self.filename:
            raise ArgumentError('Input file is not specified')
        if self.reverse and not self.output:
            raise ArgumentError("Reverse mode requires output file ('--output') to be specified")
        if self.byte_range is not None and (self.skip is not None or self.length is not None):
            raise ArgumentError("Byte range cannot be combined with '--skip' or '--length'")
        if self.bytes_per_line < 1:
            raise ArgumentError(f'Bytes per line should be positive, got {self.bytes_per_line}')

        byte_range = ByteRange.parse(self.byte_range) if self.byte_range is not None else None
        skip = parse_num(self.skip) if self.skip is not None else None
        length = parse_num(self.length) if self.length is not None else None

        return DumpConfig(
            filename=self.filename,
            output=self.output,
            bytes_per_line=self.bytes_per_line,
            window=resolve_window(byte_range, skip, length),
            reverse=self.reverse,
            uppercase=self.uppercase,
            color=not self.no_color and not self.output,
        )
