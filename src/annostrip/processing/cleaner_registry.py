from __future__ import annotations
"""
ModeCleanerRegistry

Provide pluggable, mode-aware cleaners so the engine dispatches on the
Mode through a single lookup instead of per-mode conditionals.

Cleaners can be registered eagerly or lazily: a lazy registration stores a
builder callback that is invoked on first access and then cached.

Built-ins:
    - LaTeX: '%' comments with backslash escape, optional appendix collapse.
    - Python: quote-parity '#' comments, optional docstring removal.
    - Markdown: '<!-- ... -->' block comments.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from annostrip.core.interfaces.cleaner import ModeCleanerProtocol
from annostrip.core.interfaces.logging import LoggerFactoryProtocol
from annostrip.core.models import Mode
from annostrip.logging.helpers import get_logger


@dataclass(frozen=True)
class _CleanerRegItem:
    cleaner: ModeCleanerProtocol
    priority: int = 0


class ModeCleanerRegistry:
    def __init__(self) -> None:
        self._by_mode: Dict[Mode, _CleanerRegItem] = {}
        self._lazy_builders: Dict[Mode, tuple[Callable[[], ModeCleanerProtocol], int]] = {}

    @classmethod
    def default(cls, *, logger_factory: Optional[LoggerFactoryProtocol] = None) -> 'ModeCleanerRegistry':
        """Build a registry with the built-in LaTeX, Python and Markdown cleaners.

        When *logger_factory* is given, each cleaner gets its logger from it
        instead of the package-level `get_logger`.
        """
        from annostrip.processing.docstrip.latex_docstrip import LatexCleaner
        from annostrip.processing.docstrip.md_docstrip import MarkdownCleaner
        from annostrip.processing.docstrip.py_docstrip import PythonCleaner

        scoped = logger_factory.get_logger if logger_factory is not None else get_logger

        reg = cls()
        reg.register_lazy(Mode.LATEX, builder=lambda: LatexCleaner(logger=scoped('processing.latex')))
        reg.register_lazy(Mode.PYTHON, builder=lambda: PythonCleaner(logger=scoped('processing.python')))
        reg.register_lazy(Mode.MARKDOWN, builder=lambda: MarkdownCleaner(logger=scoped('processing.markdown')))
        return reg

    def register(self, mode: Union[Mode, str], cleaner: ModeCleanerProtocol, *, priority: int = 0) -> None:
        key = Mode.parse(mode)
        prev = self._by_mode.get(key)
        if prev is None or priority >= prev.priority:
            self._by_mode[key] = _CleanerRegItem(cleaner=cleaner, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(
        self, mode: Union[Mode, str], *, builder: Callable[[], ModeCleanerProtocol], priority: int = 0
    ) -> None:
        key = Mode.parse(mode)
        self._lazy_builders[key] = (builder, priority)

    def for_mode(self, mode: Union[Mode, str]) -> Optional[ModeCleanerProtocol]:
        key = Mode.parse(mode)
        item = self._by_mode.get(key)
        if item:
            return item.cleaner
        lazy = self._lazy_builders.get(key)
        if lazy:
            builder, prio = lazy
            cleaner = builder()
            self.register(key, cleaner, priority=prio)
            return cleaner
        return None
