from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class HighlighterProtocol(Protocol):
    """Downstream syntax highlighter consuming cleaned text.

    The mode name is one of 'latex', 'python' or 'markdown'. The returned
    markup is opaque to annostrip.
    """

    def highlight(self, text: str, mode_name: str) -> str:
        """Return a styled representation of *text*."""
        ...
