"""
Daybook
=======

A one-file-per-day plain-text journal with mood tracking.

Each entry lives in its own Markdown file named after its date
(``2024-01-15-Journal-Entry-for-Jan-15.md``). The file starts with a small
YAML frontmatter block holding the day's mood ratings and the seconds spent
writing, followed by the free-form body exactly as the writer left it.

Main Components:
    - core: Exceptions, logging, paths, CLI helpers and statistics
    - dataclasses: The JournalEntry model (load/save/date/words)
    - pipeline: Interactive metadata prompting
    - utils: Entry file naming, directory scanning, frontmatter splitting
    - cli: ``daybook`` command-line interface

Example Usage:
    >>> from daybook import JournalEntry, MetadataPrompter
    >>> from daybook.core.paths import JOURNAL_DIR
    >>> entry = JournalEntry.resolve(JOURNAL_DIR)
    >>> MetadataPrompter(sys.stdin, sys.stdout).prompt_for_metadata(entry)
    >>> entry.save()

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Daybook Project"

from daybook.dataclasses.journal_entry import JournalEntry
from daybook.pipeline.prompter import MetadataPrompter
from daybook.utils.fs import is_entry

__all__ = [
    "JournalEntry",
    "MetadataPrompter",
    "is_entry",
]
