# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AbstractRunner, LegendRunner, VersionRunner, DumpRunner, RevertRunner
from ..settings import Settings


class RunnerFactory:
    @staticmethod
    def create(settings: Settings) -> AbstractRunner:
        if settings.legend:
            return LegendRunner()
        elif settings.version:
            return VersionRunner()

        config = settings.to_config()
        if config.reverse:
            return RevertRunner(config)
        return DumpRunner(config)
