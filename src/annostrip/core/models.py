from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class InvalidModeError(ValueError):
    """Raised when a mode outside the supported set is requested."""


class Mode(str, Enum):
    """Source language whose comment syntax drives the cleaning rules."""

    LATEX = 'latex'
    PYTHON = 'python'
    MARKDOWN = 'markdown'

    @classmethod
    def parse(cls, value: Union['Mode', str]) -> 'Mode':
        """Return the Mode for *value* (member, value or name, any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        choices = ', '.join(m.value for m in cls)
        raise InvalidModeError(f'unsupported mode {value!r} (expected one of: {choices})')

    @classmethod
    def from_suffix(cls, suffix: str) -> Optional['Mode']:
        """Map a file suffix such as '.tex' to its Mode, or None if unknown."""
        sufx = (suffix or '').lower()
        if sufx and not sufx.startswith('.'):
            sufx = f'.{sufx}'
        return _SUFFIX_MODES.get(sufx)


_SUFFIX_MODES = {
    '.tex': Mode.LATEX,
    '.sty': Mode.LATEX,
    '.cls': Mode.LATEX,
    '.ltx': Mode.LATEX,
    '.py': Mode.PYTHON,
    '.pyw': Mode.PYTHON,
    '.pyi': Mode.PYTHON,
    '.md': Mode.MARKDOWN,
    '.markdown': Mode.MARKDOWN,
}


@dataclass(frozen=True)
class CleanOptions:
    """Optional removal passes.

    `remove_appendix` only applies to LaTeX and `remove_docstrings` only to
    Python; each is ignored by the other modes.
    """
    remove_appendix: bool = False
    remove_docstrings: bool = False


@dataclass(frozen=True)
class CleanResult:
    """Cleaned text plus the independent line numberings of both panes."""
    mode: Mode
    text: str
    input_line_numbers: Tuple[int, ...]
    output_line_numbers: Tuple[int, ...]
    markup: str | None = None
