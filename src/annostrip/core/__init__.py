from __future__ import annotations

"""Public surface for annostrip.core.

Data models and protocol types live here so downstream consumers have a
stable import location:

    from annostrip.core import Mode, CleanOptions, ModeCleanerProtocol
"""

from annostrip.core.interfaces import (
    HighlighterProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    ModeCleanerProtocol,
)
from annostrip.core.models import CleanOptions, CleanResult, InvalidModeError, Mode

__all__ = [
    # Models
    "CleanOptions",
    "CleanResult",
    "InvalidModeError",
    "Mode",
    # Protocols
    "HighlighterProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "ModeCleanerProtocol",
]
