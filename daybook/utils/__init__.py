"""
Utilities package for Daybook.

- fs: Entry file naming, recognition and directory scanning
- md: YAML frontmatter framing of entry files

Import commonly-used utilities directly from this package:
    from daybook.utils import entry_filename, is_entry, split_frontmatter
"""

from .fs import (
    ENTRY_EXTENSION,
    ENTRY_FORMAT,
    ENTRY_PATTERN,
    entry_filename,
    find_entry_files,
    is_entry,
    parse_date_from_filename,
)
from .md import join_frontmatter, split_frontmatter

__all__ = [
    "ENTRY_EXTENSION",
    "ENTRY_FORMAT",
    "ENTRY_PATTERN",
    "entry_filename",
    "find_entry_files",
    "is_entry",
    "parse_date_from_filename",
    "join_frontmatter",
    "split_frontmatter",
]
