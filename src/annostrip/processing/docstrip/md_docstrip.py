"""Markdown comment stripper.

Markdown comments are HTML comments, which are block structured: a comment
may span several lines. Every non-overlapping '<!-- ... -->' span is
removed with a lazy match, so two comments on the same line never swallow
the text between them. An '<!--' without a closing '-->' never matches and
is kept as is.
"""

from typing import Optional

from annostrip.core.interfaces.logging import LoggerLikeProtocol
from annostrip.core.models import CleanOptions, Mode
from annostrip.logging.helpers import get_logger, trace_io
from annostrip.processing.comment_rules import COMMENT_RULES


def strip_markdown_comments(text: str) -> str:
    """Return *text* with every HTML comment span removed."""
    return COMMENT_RULES[Mode.MARKDOWN].block_re.sub('', text)


class MarkdownCleaner:
    """Mode cleaner for Markdown sources. Takes no options."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('processing.markdown')

    def strip(self, text: str, options: CleanOptions) -> str:
        cleaned = strip_markdown_comments(text)
        trace_io(self._log, 'markdown comments removed', removed_chars=len(text) - len(cleaned))
        return cleaned
