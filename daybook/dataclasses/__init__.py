"""
Entry data structures for Daybook.

- journal_entry: JournalEntry, one day's frontmatter metadata and body
"""

from .journal_entry import JournalEntry

__all__ = ["JournalEntry"]
