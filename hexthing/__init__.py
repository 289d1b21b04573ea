# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, HexthingError, InvalidNumberError, InvalidRangeError, OutputExistsError, \
    UnrecognizedLineFormatError, InvalidHexError

from .arghelp import AppArgumentParser
from .app import App
