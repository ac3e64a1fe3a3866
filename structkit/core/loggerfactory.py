#!/usr/bin/env python
import logging
from threading import Lock
from typing import Tuple

from structkit.core.flyweightfactory import FlyweightFactory

_PREFIXES = {logging.CRITICAL: "FAULT"}


class ChannelLogger:
    """Shared logger for one (subsystem, category) pair.

    The pair is the intrinsic state; message and level are supplied per
    call. Emission is serialized so lines from concurrent callers never
    interleave inside a handler.
    """

    def __init__(self, subsystem: str, category: str = "") -> None:
        self.subsystem = subsystem
        self.category = category
        name = f"{subsystem}.{category}" if category else subsystem
        self._logger = logging.getLogger(name)
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, message: str, level: int = logging.INFO, stacklevel: int = 1) -> None:
        with self._lock:
            self._logger.log(
                level,
                "%s %s",
                _PREFIXES.get(level, logging.getLevelName(level)),
                message,
                stacklevel=stacklevel + 1,
            )

    def debug(self, message: str) -> None:
        self.log(message, logging.DEBUG, stacklevel=2)

    def info(self, message: str) -> None:
        self.log(message, logging.INFO, stacklevel=2)

    def error(self, message: str) -> None:
        self.log(message, logging.ERROR, stacklevel=2)

    def fault(self, message: str) -> None:
        self.log(message, logging.CRITICAL, stacklevel=2)


class LoggerFactory(FlyweightFactory[Tuple[str, str], ChannelLogger]):
    def __init__(self) -> None:
        super().__init__(lambda key: ChannelLogger(*key))

    def logger(self, subsystem: str, category: str = "") -> ChannelLogger:
        return self.get_or_create((subsystem, category))
