#!/usr/bin/env python3
"""
md.py
-------------------
YAML frontmatter framing for entry files.

Entry files look like:

    ---
    Seconds: 0
    LowMood: 0
    HighMood: 0
    AverageMood: 0
    ---
    Body text, kept byte-for-byte.

These helpers only cut and join the raw bytes. YAML parsing and value
validation happen in the JournalEntry dataclass. Unlike a Markdown
renderer, nothing here trims blank lines or normalizes line endings: the
body handed back is exactly what followed the closing delimiter.
"""
from __future__ import annotations

from typing import Optional, Tuple

FRONTMATTER_DELIMITER = b"---"


def _split_line(data: bytes, start: int) -> Tuple[bytes, int]:
    """Return the line starting at ``start`` (without EOL) and the next offset."""
    end = data.find(b"\n", start)
    if end == -1:
        return data[start:], len(data)
    line = data[start:end]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line, end + 1


def split_frontmatter(data: bytes) -> Optional[Tuple[bytes, bytes]]:
    """
    Split entry file content into frontmatter and body.

    Args:
        data: Full file content

    Returns:
        Tuple of (frontmatter_bytes, body_bytes), or None when the content
        does not open with a complete ``---`` ... ``---`` block

    Examples:
        >>> split_frontmatter(b"---\\nLowMood: 2\\n---\\nBody\\n")
        (b'LowMood: 2\\n', b'Body\\n')
        >>> split_frontmatter(b"No block here") is None
        True
    """
    first, offset = _split_line(data, 0)
    if first != FRONTMATTER_DELIMITER:
        return None

    block_start = offset
    while offset < len(data):
        line_start = offset
        line, offset = _split_line(data, offset)
        if line == FRONTMATTER_DELIMITER:
            return data[block_start:line_start], data[offset:]

    return None


def join_frontmatter(frontmatter: bytes, body: bytes) -> bytes:
    """
    Frame serialized YAML between delimiters and append the body unchanged.

    Args:
        frontmatter: YAML mapping text; a trailing newline is added if missing
        body: Entry body

    Returns:
        Full file content
    """
    if frontmatter and not frontmatter.endswith(b"\n"):
        frontmatter += b"\n"
    return FRONTMATTER_DELIMITER + b"\n" + frontmatter + FRONTMATTER_DELIMITER + b"\n" + body
