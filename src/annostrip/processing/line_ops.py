# src/annostrip/processing/line_ops.py
import re
from typing import Iterable, List

from annostrip.constants import LINE_SEP

_BLANK_RUN_RE = re.compile(r'\n{3,}')


def split_lines(text: str) -> List[str]:
    """Split *text* on '\\n' exactly.

    No line-ending normalization happens: a trailing '\\r' stays part of the
    line. Empty input yields a single empty line.
    """
    return text.split(LINE_SEP)


def join_lines(lines: Iterable[str]) -> str:
    """Rejoin lines with '\\n'; inverse of `split_lines`."""
    return LINE_SEP.join(lines)


def collapse_blank_runs(text: str) -> str:
    """Collapse every run of three or more newlines to exactly two.

    This leaves at most one empty line between content lines and is
    idempotent.
    """
    return _BLANK_RUN_RE.sub(LINE_SEP * 2, text)


def line_numbers(text: str) -> List[int]:
    """Return ``[1, 2, ..., N]`` for the N lines of *text* (``[1]`` if empty)."""
    if not text:
        return [1]
    return list(range(1, len(split_lines(text)) + 1))


def format_line_numbers(text: str) -> str:
    """Return the line-number gutter for *text*, one number per line."""
    return LINE_SEP.join(str(n) for n in line_numbers(text))


def number_lines(text: str) -> str:
    """Prefix every line of *text* with its right-aligned 1-based number."""
    lines = split_lines(text)
    width = len(str(len(lines)))
    return join_lines(f'{n:>{width}}  {ln}' for n, ln in enumerate(lines, start=1))
