from __future__ import annotations
"""Mode cleaner protocol definitions."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from annostrip.core.models import CleanOptions


@runtime_checkable
class ModeCleanerProtocol(Protocol):
    """Protocol for a per-mode stripping strategy.

    Implementations receive the whole raw text and return it with comments
    (and any option-gated blocks such as docstrings or appendices) removed.
    They must be total over arbitrary strings and must ignore options that
    do not apply to their mode.
    """

    def strip(self, text: str, options: 'CleanOptions') -> str:
        ...
