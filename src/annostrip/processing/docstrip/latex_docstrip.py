from __future__ import annotations
"""LaTeX comment stripper and appendix truncator.

`strip_latex_comments` works line by line and drops everything from the
first unescaped '%' to the end of the line. `truncate_appendix` collapses
the region between '\\appendix' and '\\end{document}' to a short
placeholder so the document body stays readable.

Notes:
    - Line count is preserved by the comment pass; a fully commented line
      becomes an empty line.
    - Escaping is a single-character lookback, so '\\\\%' is treated as an
      escaped percent sign.
"""

from typing import List, Optional, Sequence

from annostrip.constants import LATEX_APPENDIX, LATEX_APPENDIX_PLACEHOLDER, LATEX_END_DOCUMENT
from annostrip.core.interfaces.logging import LoggerLikeProtocol
from annostrip.core.models import CleanOptions
from annostrip.logging.helpers import get_logger
from annostrip.processing.comment_rules import latex_comment_offset
from annostrip.processing.line_ops import join_lines, split_lines


def strip_latex_comments(lines: Sequence[str]) -> List[str]:
    """Return *lines* with trailing LaTeX comments removed."""
    out: List[str] = []
    for ln in lines:
        idx = latex_comment_offset(ln)
        out.append(ln if idx is None else ln[:idx])
    return out


def truncate_appendix(text: str, logger: Optional[LoggerLikeProtocol] = None) -> str:
    """Replace the appendix body with a '...' placeholder.

    The text is left unchanged when either marker is missing or when the
    first '\\appendix' does not come before the first '\\end{document}'.
    """
    start = text.find(LATEX_APPENDIX)
    end = text.find(LATEX_END_DOCUMENT)
    if start == -1 or end == -1 or start >= end:
        return text
    (logger or get_logger('processing.latex')).debug(
        'collapsing appendix span [%d:%d] (%d chars)', start, end, end - start
    )
    return text[:start] + LATEX_APPENDIX_PLACEHOLDER + text[end:]


class LatexCleaner:
    """Mode cleaner for LaTeX sources."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('processing.latex')

    def strip(self, text: str, options: CleanOptions) -> str:
        cleaned = join_lines(strip_latex_comments(split_lines(text)))
        if options.remove_appendix:
            cleaned = truncate_appendix(cleaned, logger=self._log)
        return cleaned
