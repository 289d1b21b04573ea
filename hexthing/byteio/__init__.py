# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import ByteClass, SEPARATOR, ZERO_CHARCODES, WHITESPACE_CHARCODES, PRINTABLE_CHARCODES, \
    HIGH_BYTE_CHARCODES, OTHER_CONTROL_CHARCODES
from .classifier import classify, glyph, colorize
from .window import ByteRange, Window, parse_num, resolve_window, address_width

from .formatter import LineFormatter
from .reader import Reader
from .writer import Writer, ConsoleWriter, FileWriter
from .parser import Parser
