# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations


class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class HexthingError(Exception):
    pass


class InvalidNumberError(HexthingError):
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Number must be either in the format '0xFF' or '255', got '{literal}'")


class InvalidRangeError(HexthingError):
    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid byte range '{text}': {reason}")


class OutputExistsError(HexthingError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Output file already exists: '{path}'")


class UnrecognizedLineFormatError(HexthingError):
    def __init__(self, line_num: int):
        self.line_num = line_num
        super().__init__(f'Unrecognized input format for reverse operation on line {line_num}')


class InvalidHexError(HexthingError):
    def __init__(self, text: str, line_num: int):
        self.text = text
        self.line_num = line_num
        super().__init__(f'Unable to decode hex "{text}" on line {line_num}')
