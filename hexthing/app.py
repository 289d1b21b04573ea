# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import List

from . import AppArgumentParser
from .console import Console
from .runner import RunnerFactory
from .settings import Settings


# noinspection PyMethodMayBeStatic
class App:
    def __init__(self, argv: List[str]|None = None):
        self._argv = argv

    def run(self):
        try:
            settings = self._parse_args()  # help processing is handled by argparse
            (RunnerFactory.create(settings)).run()
        except KeyboardInterrupt:
            Console.flush_buffers()
            Console.warn('Interrupted, output is incomplete')
            self._exit(130)
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(0)

    def _parse_args(self) -> Settings:
        settings = AppArgumentParser().parse_args(self._argv, namespace=Settings())
        Console.init(settings.debug)
        Console.debug_settings(settings)
        return settings

    def _exit(self, code: int):
        sys.stdout.flush()
        sys.exit(code)
