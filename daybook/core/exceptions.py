#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Daybook project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions when locating, reading, writing and
filling in journal entries.

Exception Hierarchy:
    Exception (built-in)
    └── DaybookError - Base for all Daybook errors
        ├── EntryNotFoundError - Journal directory or entry file missing
        ├── EntryNotADirectoryError - Journal path is not a directory
        ├── EntryReadError - Entry file could not be read
        ├── EntryWriteError - Entry file could not be written
        ├── EntryParseError - Malformed frontmatter or entry file name
        └── InputStreamError - Prompt input closed or failed mid-prompt

Usage:
    from daybook.core.exceptions import EntryParseError, EntryWriteError

    try:
        entry.load()
    except EntryParseError as e:
        logger.error(f"Entry frontmatter is malformed: {e}")
"""
from __future__ import annotations

from typing import Optional


class DaybookError(Exception):
    """
    Base exception for all Daybook errors.

    Catch this to handle any failure raised by the entry model or the
    metadata prompter, or catch specific subclasses for more granular
    error handling.
    """

    pass


class EntryNotFoundError(DaybookError, FileNotFoundError):
    """
    Exception for a missing journal directory or entry file.

    Also a FileNotFoundError, so callers that only care about the
    built-in category can keep catching that.

    Examples:
        >>> raise EntryNotFoundError("Journal directory not found: ~/journal")
    """

    pass


class EntryNotADirectoryError(DaybookError, NotADirectoryError):
    """
    Exception for a journal path that exists but is not a directory.

    Examples:
        >>> raise EntryNotADirectoryError("Must be a directory: notes.txt")
    """

    pass


class EntryReadError(DaybookError):
    """
    Exception for I/O failures while reading an entry file.

    Raised when the file exists but cannot be opened, read, or stat'ed
    (permissions, I/O errors, the path being a directory, etc.).

    Examples:
        >>> raise EntryReadError("Cannot read entry: permission denied")
    """

    pass


class EntryWriteError(DaybookError):
    """
    Exception for I/O failures while writing an entry file.

    The serialized bytes that could not be written are kept on the
    exception so the caller can show or salvage them. They are diagnostic
    only; the failed save is not retried.

    Attributes:
        content: Full file content that was being written, if available

    Examples:
        >>> raise EntryWriteError("Cannot write entry: disk full", content=data)
    """

    def __init__(self, message: str, content: Optional[bytes] = None) -> None:
        super().__init__(message)
        self.content = content


class EntryParseError(DaybookError):
    """
    Exception for entry parsing failures.

    Raised when:
    - The file does not start with a frontmatter block
    - The frontmatter is not valid YAML or not a mapping
    - A metadata value is not an integer within its range
    - A file name does not match the entry naming format

    Examples:
        >>> raise EntryParseError("Invalid YAML frontmatter: mapping values...")
        >>> raise EntryParseError("Not an entry file name: notes.md")
    """

    pass


class InputStreamError(DaybookError):
    """
    Exception for prompt input failures.

    Raised when the input stream ends or fails while the metadata prompter
    is waiting for an answer. Ratings accepted before the failure stay set
    on the entry.

    Examples:
        >>> raise InputStreamError("Input closed while asking: High mood")
    """

    pass
