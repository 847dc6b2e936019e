from __future__ import annotations

from annostrip.cli import AnnoStrip
from annostrip.core.models import CleanOptions, CleanResult, InvalidModeError, Mode
from annostrip.logging.helpers import get_logger
from annostrip.processing.cleaner_registry import ModeCleanerRegistry
from annostrip.processing.engine import SourceCleaner, clean
from annostrip.processing.line_ops import (
    collapse_blank_runs,
    format_line_numbers,
    join_lines,
    line_numbers,
    split_lines,
)

__version__ = '0.1.0'


__all__ = [
    'AnnoStrip',
    'CleanOptions',
    'CleanResult',
    'InvalidModeError',
    'Mode',
    'ModeCleanerRegistry',
    'SourceCleaner',
    'clean',
    'collapse_blank_runs',
    'format_line_numbers',
    'get_logger',
    'join_lines',
    'line_numbers',
    'split_lines',
]
