#!/usr/bin/env python3
"""
fs.py
-------------------
Entry file naming and directory scanning.

Every journal entry is a file named after its day:

    2024-01-15-Journal-Entry-for-Jan-15.md

The name is produced and checked against the one ``ENTRY_FORMAT`` constant,
so any name this module builds parses back to the same day. ``ENTRY_PATTERN``
recognizes entry names when scanning a directory.

Functions:
    entry_filename: Build the entry file name for a moment
    parse_date_from_filename: Recover the day from an entry file name
    is_entry: Check whether a path looks like an entry file
    find_entry_files: List entry files in a journal directory

Usage:
    from daybook.utils.fs import entry_filename, find_entry_files

    name = entry_filename(datetime.now())
    for path in find_entry_files(Path("~/daybook/journal").expanduser()):
        ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime
from pathlib import Path
from typing import List, Union

# --- Local imports ---
from daybook.core.exceptions import EntryParseError

ENTRY_EXTENSION = ".md"

DATE_FORMAT = "%Y-%m-%d"

# strftime format; {day} is the unpadded day of the month
ENTRY_FORMAT = DATE_FORMAT + "-Journal-Entry-for-%b-{day}" + ENTRY_EXTENSION

ENTRY_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}-Journal-Entry-for-\S{3}-\d{1,2}" + re.escape(ENTRY_EXTENSION)
)


def entry_filename(moment: Union[date, datetime]) -> str:
    """
    Build the entry file name for the day of ``moment``.

    Examples:
        >>> entry_filename(date(2023, 7, 4))
        '2023-07-04-Journal-Entry-for-Jul-4.md'
    """
    return moment.strftime(ENTRY_FORMAT).format(day=moment.day)


def parse_date_from_filename(path: Union[str, Path]) -> datetime:
    """
    Parse the day encoded in an entry file name.

    Args:
        path: Entry path or bare file name; only the final component is used

    Returns:
        Midnight of the entry's day

    Raises:
        EntryParseError: If the name does not follow ENTRY_FORMAT
    """
    name = Path(path).name
    try:
        parsed = datetime.strptime(name[: len("YYYY-MM-DD")], DATE_FORMAT)
    except ValueError as e:
        raise EntryParseError(f"Not an entry file name: {name}") from e

    # The rest of the name (month abbreviation, day, extension) must be
    # exactly what ENTRY_FORMAT produces for that day.
    if entry_filename(parsed) != name:
        raise EntryParseError(f"Not an entry file name: {name}")
    return parsed


def is_entry(path: Union[str, Path]) -> bool:
    """
    Return True if the final component of ``path`` is an entry file name.

    Examples:
        >>> is_entry("2023-07-04-Journal-Entry-for-Jul-4.md")
        True
        >>> is_entry("2023-07-04-Journal-Entry-for-July-4.md")
        False
    """
    return ENTRY_PATTERN.fullmatch(Path(path).name) is not None


def find_entry_files(directory: Path) -> List[Path]:
    """Find entry files directly inside ``directory``, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        path for path in directory.iterdir() if path.is_file() and is_entry(path)
    )
