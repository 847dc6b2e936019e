from __future__ import annotations

import logging
from typing import Optional, TextIO

from annostrip.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """`LoggerFactoryProtocol` implementation backed by the 'annostrip' logger.

    The base handler is (re)configured on the first `get_logger` call, so
    building a factory has no side effects.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._ready = False

    def get_logger(self, name: str) -> logging.Logger:
        if not self._ready:
            setup_base_logger(json_logs=self.json_logs, level=self._level, stream=self._stream)
            self._ready = True
        return get_logger(name)
