# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from argparse import Namespace
from typing import List, Any

from pytermor import autof, seq, fmt, SequenceSGR, Format

from .common import ArgumentError


class ConsoleDebugBuffer:
    def __init__(self, key_prefix: str = None, prefix_offset_color: SequenceSGR = seq.GRAY):
        self._buf = ''

        self._default_prefix = Console.format_prefix(key_prefix, autof(seq.GRAY + seq.BG_BLACK)) if key_prefix else None
        self._prefix_fmt = autof(prefix_offset_color + seq.BG_BLACK)

        Console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', flush=True):
        if Console.debug_level < level:
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_fmt)
        elif self._default_prefix is not None:
            prefix = self._default_prefix

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    """
    Diagnostics (debug, warnings, errors) go to stderr, stdout is reserved
    for the dump and for informational runners output.
    """
    FMT_WARNING = autof(seq.HI_YELLOW)
    FMT_ERROR_TRACE = fmt.red
    FMT_ERROR = autof(seq.HI_RED)
    MAIN_PREFIX_LEN = 8

    buffers: List[ConsoleDebugBuffer] = list()
    debug_level: int = 0

    @staticmethod
    def init(debug_level: int = 0):
        Console.debug_level = debug_level
        Console.buffers.clear()

    @staticmethod
    def register_buffer(buffer: ConsoleDebugBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.hint(e.USAGE_MSG)

        elif Console.debug_level > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.FMT_ERROR_TRACE('\n'.join(tb_lines)), file=sys.stderr)
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.hint("Run the app with '"+fmt.bold('--debug')+"' argument to see the details")

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def hint(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def warn(s: str = '', end='\n'):
        Console.print(Console.FMT_WARNING(f'WARNING: {s}'), end=end, file=sys.stderr)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.FMT_ERROR(fmt.bold('ERROR: ') + s), end=end, file=sys.stderr)

    @staticmethod
    def debug_settings(settings: Namespace):
        if Console.debug_level < 3:
            return

        default_settings = settings.__class__()
        debug_buffer = ConsoleDebugBuffer()
        fmt_header = autof(seq.BG_BLACK + seq.BOLD)

        attrs = sorted(attr for attr in vars(settings) if not attr.startswith('_'))
        max_attr_len = max([len(attr) for attr in attrs]) + 3

        debug_buffer.write(3, fmt_header('SETTINGS'.ljust(max_attr_len)) + Console.get_separator())
        for attr in attrs:
            app_value, default_value = getattr(settings, attr), getattr(default_settings, attr, None)
            if app_value != default_value:
                values = fmt.green(f'{app_value!s}') + ' ' + fmt.gray(f'[{default_value!s}]')
            else:
                values = fmt.yellow(f'{default_value!s}')
            debug_buffer.write(3, autof(seq.BG_BLACK)(attr.rjust(max_attr_len)) + Console.get_separator() + values)

    @staticmethod
    def get_separator() -> str:
        return autof(seq.GRAY)('│')

    @staticmethod
    def format_prefix(label: str, f: Format) -> str:
        return f(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}') + Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, f: Format = fmt.green) -> str:
        return Console.format_prefix(f'0x{offset:04x}', f)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, bytes):
            result = 'len ' + fmt.bold(str(len(v)))
            if Console.debug_level < 3:
                return result

            if len(v) == 0:
                return f'{result} {seq.GRAY}[]{seq.COLOR_OFF}'
            v = ' '.join([f'{b:02x}' for b in v])
            return f'{result} ' + \
                   f'{seq.GRAY}[' + \
                   f'{v[:3*(max_input_len-1)]}' + \
                   ('.. ' + v[-2:] if len(v) > 3 * (max_input_len - 1) else '') + \
                   f']{seq.COLOR_OFF}'

        return f'{v!s}'
