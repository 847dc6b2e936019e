from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging calls made by the cleaners, the engine and the CLI.

    A stdlib `logging.Logger` satisfies it; tests may pass any recorder
    exposing the same four methods.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out the scoped loggers used by `SourceCleaner` and its cleaners.

    Names are relative to the package ('engine', 'processing.latex', ...).
    """

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
