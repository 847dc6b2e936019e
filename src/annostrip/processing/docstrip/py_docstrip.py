"""
py_docstrip – Python comment and docstring stripping, line based.

Comments are removed with the quote-parity heuristic from
`comment_rules.python_comment_offset`. Docstrings are removed by a small
forward-only scanner that only knows whether the previous statement was a
``def``/``class`` header (possibly spread over several lines) and whether
it is still at the start of the module.

Notes
-----
• Exactly one leading docstring per header is removed. Triple-quoted
  strings anywhere else (assigned values, mid-body literals) are kept.
• At module start every leading triple-quoted block is removed until the
  first real statement.
• An unterminated docstring consumes the rest of the input.
• ``async def`` headers and decorators are not recognised as headers.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from annostrip.constants import PY_COMMENT, PY_DOCSTRING_DELIMS, PY_HEADER_PREFIXES
from annostrip.core.interfaces.logging import LoggerLikeProtocol
from annostrip.core.models import CleanOptions
from annostrip.logging.helpers import get_logger
from annostrip.processing.comment_rules import python_comment_offset
from annostrip.processing.line_ops import join_lines, split_lines


class ScanState(Enum):
    MODULE_START = 'module_start'
    NORMAL = 'normal'
    AFTER_HEADER = 'after_header'
    IN_SIGNATURE = 'in_signature'


_DOCSTRING_STATES = (ScanState.MODULE_START, ScanState.AFTER_HEADER)


def strip_python_comments(lines: Sequence[str]) -> List[str]:
    """Return *lines* with trailing '#' comments removed."""
    out: List[str] = []
    for ln in lines:
        idx = python_comment_offset(ln)
        out.append(ln if idx is None else ln[:idx])
    return out


def docstring_delimiter(stripped: str) -> Optional[str]:
    """Return the triple-quote delimiter opening *stripped*, if any."""
    for delim in PY_DOCSTRING_DELIMS:
        if stripped.startswith(delim):
            return delim
    return None


class DocstringScanner:
    """Forward-only scanner that drops leading docstrings.

    A scanner instance is single use: build one per input.
    """

    def __init__(self, lines: Sequence[str], *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._lines = list(lines)
        self._log = logger or get_logger('processing.python')
        self.state = ScanState.MODULE_START

    def on_header(self, stripped: str) -> None:
        self.state = ScanState.AFTER_HEADER if stripped.endswith(':') else ScanState.IN_SIGNATURE

    def on_signature_line(self, stripped: str) -> None:
        if stripped.endswith(':'):
            self.state = ScanState.AFTER_HEADER

    def on_docstring(self) -> None:
        if self.state is ScanState.AFTER_HEADER:
            self.state = ScanState.NORMAL

    def on_statement(self, stripped: str) -> None:
        if self.state in _DOCSTRING_STATES and stripped and not stripped.startswith(PY_COMMENT):
            self.state = ScanState.NORMAL

    def _docstring_end(self, start: int, stripped: str, delim: str) -> int:
        """Return the index of the first line after the docstring at *start*."""
        if delim in stripped[len(delim):]:
            return start + 1
        for idx in range(start + 1, len(self._lines)):
            if delim in self._lines[idx]:
                return idx + 1
        self._log.debug('unterminated docstring opened at line %d; dropping the rest', start + 1)
        return len(self._lines)

    def run(self) -> List[str]:
        out: List[str] = []
        i = 0
        total = len(self._lines)
        while i < total:
            line = self._lines[i]
            stripped = line.strip()

            if stripped.startswith(PY_HEADER_PREFIXES):
                out.append(line)
                self.on_header(stripped)
                i += 1
                continue

            if self.state is ScanState.IN_SIGNATURE:
                out.append(line)
                self.on_signature_line(stripped)
                i += 1
                continue

            delim = docstring_delimiter(stripped)
            if delim and self.state in _DOCSTRING_STATES:
                i = self._docstring_end(i, stripped, delim)
                self.on_docstring()
                continue

            self.on_statement(stripped)
            out.append(line)
            i += 1
        return out


def strip_python_docstrings(lines: Sequence[str], *, logger: Optional[LoggerLikeProtocol] = None) -> List[str]:
    """Return *lines* without module, class and function docstrings."""
    return DocstringScanner(lines, logger=logger).run()


class PythonCleaner:
    """Mode cleaner for Python sources."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('processing.python')

    def strip(self, text: str, options: CleanOptions) -> str:
        lines = strip_python_comments(split_lines(text))
        if options.remove_docstrings:
            lines = strip_python_docstrings(lines, logger=self._log)
        return join_lines(lines)
