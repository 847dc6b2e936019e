from __future__ import annotations

from typing import Optional, Union

from annostrip.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from annostrip.core.interfaces.render import HighlighterProtocol
from annostrip.core.models import CleanOptions, CleanResult, InvalidModeError, Mode
from annostrip.logging.helpers import get_logger, trace_io
from annostrip.processing.cleaner_registry import ModeCleanerRegistry
from annostrip.processing.line_ops import collapse_blank_runs, line_numbers


class SourceCleaner:
    """Mode-dispatched cleaning pipeline.

    The registry supplies the mode-specific stripping pass; blank-line
    collapsing runs last for every mode. The instance holds no per-call
    state, so one cleaner may serve any number of independent calls.

    A *logger_factory* scopes the loggers of the engine and of the default
    cleaners; an explicit *logger* still wins for the engine itself.
    """

    def __init__(
        self,
        *,
        registry: Optional[ModeCleanerRegistry] = None,
        logger: Optional[LoggerLikeProtocol] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._registry = registry or ModeCleanerRegistry.default(logger_factory=logger_factory)
        if logger is None:
            logger = logger_factory.get_logger('engine') if logger_factory is not None else get_logger('engine')
        self._log = logger

    def clean(self, raw_text: str, mode: Union[Mode, str], options: Optional[CleanOptions] = None) -> str:
        """Return *raw_text* with the annotations of *mode* removed.

        Raises:
            InvalidModeError: If *mode* is not a supported mode or no cleaner
                is registered for it.
        """
        resolved = Mode.parse(mode)
        cleaner = self._registry.for_mode(resolved)
        if cleaner is None:
            raise InvalidModeError(f'no cleaner registered for mode {resolved.value!r}')
        opts = options or CleanOptions()
        stripped = cleaner.strip(raw_text, opts)
        cleaned = collapse_blank_runs(stripped)
        trace_io(
            self._log,
            'cleaned text',
            mode=resolved.value,
            chars_in=len(raw_text),
            chars_out=len(cleaned),
        )
        return cleaned

    def process(
        self,
        raw_text: str,
        mode: Union[Mode, str],
        options: Optional[CleanOptions] = None,
        *,
        highlighter: Optional[HighlighterProtocol] = None,
    ) -> CleanResult:
        """Clean *raw_text* and compute the line numbering of both panes."""
        resolved = Mode.parse(mode)
        cleaned = self.clean(raw_text, resolved, options)
        markup = highlighter.highlight(cleaned, resolved.value) if highlighter is not None else None
        return CleanResult(
            mode=resolved,
            text=cleaned,
            input_line_numbers=tuple(line_numbers(raw_text)),
            output_line_numbers=tuple(line_numbers(cleaned)),
            markup=markup,
        )


def clean(raw_text: str, mode: Union[Mode, str], options: Optional[CleanOptions] = None) -> str:
    """Clean *raw_text* with a freshly built default `SourceCleaner`."""
    return SourceCleaner().clean(raw_text, mode, options)
