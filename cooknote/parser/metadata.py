"""Metadata header lines (``>> key: value``)."""

from __future__ import annotations

import re

METADATA_RE = re.compile(r"^\s*>>\s*(?P<key>.+?):\s*(?P<value>.*)$")


def read_metadata_line(line: str) -> tuple[str, str] | None:
    """Decode a metadata line.

    Args:
        line: A single source line.

    Returns:
        ``(key, value)`` with surrounding whitespace trimmed, or None if the
        line is not a metadata line.
    """
    match = METADATA_RE.match(line)
    if not match:
        return None
    key = match.group("key").strip()
    if not key:
        return None
    return key, match.group("value").strip()
