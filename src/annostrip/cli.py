from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from annostrip.core.models import CleanOptions, InvalidModeError, Mode
from annostrip.logging.factory import DefaultLoggerFactory
from annostrip.logging.helpers import get_logger
from annostrip.parsing.parser import _build_parser
from annostrip.processing.engine import SourceCleaner
from annostrip.processing.line_ops import number_lines


logger = get_logger('annostrip')
_logger_factory: Optional[DefaultLoggerFactory] = None


def _configure_logging(enable_json: bool) -> DefaultLoggerFactory:
    """Configure process-wide logging, either JSON or plain text.

    A change of mode between runs re-formats the existing handler.
    """
    global logger, _logger_factory
    if _logger_factory is not None and _logger_factory.json_logs == bool(enable_json):
        return _logger_factory
    _logger_factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO)
    logger = _logger_factory.get_logger('annostrip')
    return _logger_factory


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _resolve_mode(ns: argparse.Namespace) -> Mode:
    """Pick the mode from --mode, then $ANNOSTRIP_MODE, then the FILE suffix."""
    ref = ns.mode or os.getenv('ANNOSTRIP_MODE') or ''
    if ref.strip():
        try:
            return Mode.parse(ref)
        except InvalidModeError as exc:
            _fatal(str(exc), code=2)
    if ns.source != '-':
        inferred = Mode.from_suffix(Path(ns.source).suffix)
        if inferred is not None:
            logger.debug('mode %r inferred from %s', inferred.value, ns.source)
            return inferred
    _fatal('cannot determine the mode; pass -m/--mode or set ANNOSTRIP_MODE', code=2)


def _read_source(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        _fatal(f'source file {path} not found')
    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        _fatal(f'cannot decode {path} as UTF-8: {exc}')


class AnnoStrip:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, cleaner: Optional[SourceCleaner] = None) -> str:
        """Run the tool with an argv-like sequence and return the final text."""
        ns = _build_parser().parse_args(list(argv))
        factory = _configure_logging(ns.json_logs or os.getenv('ANNOSTRIP_JSON_LOGS') == '1')

        mode = _resolve_mode(ns)
        raw = _read_source(ns.source)
        options = CleanOptions(
            remove_appendix=ns.remove_appendix,
            remove_docstrings=ns.remove_docstrings,
        )
        if ns.remove_appendix and mode is not Mode.LATEX:
            logger.warning('⚠  --remove-appendix has no effect in %s mode', mode.value)
        if ns.remove_docstrings and mode is not Mode.PYTHON:
            logger.warning('⚠  --remove-docstrings has no effect in %s mode', mode.value)

        text = (cleaner or SourceCleaner(logger_factory=factory)).clean(raw, mode, options)
        if ns.line_numbers:
            text = number_lines(text)

        if ns.output:
            out = Path(ns.output)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(text, encoding='utf-8')
            logger.info('✔ cleaned %s text written to %s', mode.value, out)
        else:
            sys.stdout.write(text)
            sys.stdout.flush()
        return text


def main() -> NoReturn:
    """Entry point for the `annostrip` console script."""
    try:
        AnnoStrip.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
