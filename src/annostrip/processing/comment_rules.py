"""
comment_rules – Centralized comment-marker rules for annostrip.

This module exposes COMMENT_RULES as the single source of truth for:
  • The inline comment marker of each line-based mode (LaTeX '%', Python '#')
  • The block comment pattern of Markdown ('<!-- ... -->')

and the two "is this marker a real comment start" decisions:
  • latex_comment_offset: single-character backslash lookback
  • python_comment_offset: even quote-parity heuristic

Both decisions look at the *first* marker on the line only. They are
heuristics, not lexers: '\\\\%' still counts as escaped, and quotes inside
triple-quoted strings, escaped quotes or f-strings are not understood.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern

from annostrip.constants import (
    LATEX_COMMENT,
    LATEX_ESCAPE,
    MD_COMMENT_CLOSE,
    MD_COMMENT_OPEN,
    PY_COMMENT,
)
from annostrip.core.models import Mode


@dataclass(frozen=True)
class CommentRule:
    inline_marker: Optional[str] = None
    escape_char: Optional[str] = None
    block_re: Optional[Pattern[str]] = None


MD_COMMENT_RE = re.compile(re.escape(MD_COMMENT_OPEN) + r'.*?' + re.escape(MD_COMMENT_CLOSE), re.S)

COMMENT_RULES: Dict[Mode, CommentRule] = {
    Mode.LATEX: CommentRule(inline_marker=LATEX_COMMENT, escape_char=LATEX_ESCAPE),
    Mode.PYTHON: CommentRule(inline_marker=PY_COMMENT),
    Mode.MARKDOWN: CommentRule(block_re=MD_COMMENT_RE),
}


def latex_comment_offset(line: str) -> Optional[int]:
    """Return the offset of the comment-starting '%' in *line*, or None.

    The first '%' starts a comment unless the character right before it is
    a backslash. A '%' at offset 0 always starts a comment.
    """
    rule = COMMENT_RULES[Mode.LATEX]
    idx = line.find(rule.inline_marker)
    if idx == -1:
        return None
    if idx > 0 and line[idx - 1] == rule.escape_char:
        return None
    return idx


def python_comment_offset(line: str) -> Optional[int]:
    """Return the offset of the comment-starting '#' in *line*, or None.

    The first '#' starts a comment only when the single and double quote
    counts before it are both even.
    """
    idx = line.find(COMMENT_RULES[Mode.PYTHON].inline_marker)
    if idx == -1:
        return None
    before = line[:idx]
    if before.count("'") % 2 == 0 and before.count('"') % 2 == 0:
        return idx
    return None
