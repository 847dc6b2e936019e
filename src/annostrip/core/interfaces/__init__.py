from .cleaner import ModeCleanerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import HighlighterProtocol

__all__ = [
    'HighlighterProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ModeCleanerProtocol',
]
