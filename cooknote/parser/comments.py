"""Comment removal.

Two comment forms exist:

- line comments: ``-- text`` up to the end of the line
- block comments: ``[- text -]``, possibly spanning lines

An unterminated block comment runs to the end of the input.
"""

from __future__ import annotations

import re

# Alternation is tried left to right at each position, so whichever comment
# opens first wins and markers of the other kind inside it are inert.
COMMENT_RE = re.compile(r"\[-.*?(?:-\]|\Z)|--[^\r\n]*", re.DOTALL)


def strip_comments(source: str) -> str:
    """Remove every line and block comment from ``source``.

    Line breaks outside block comments are preserved, so line numbers
    before the first multi-line block comment are unchanged.

    Examples:
        >>> strip_comments("Add @salt -- to taste")
        'Add @salt '
        >>> strip_comments("Mix [- gently -]well")
        'Mix well'
    """
    return COMMENT_RE.sub("", source)
