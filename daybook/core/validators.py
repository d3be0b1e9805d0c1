#!/usr/bin/env python3
"""
validators.py
--------------------
Validation of entry metadata values.

Frontmatter is hand-editable, so everything read back from YAML is checked
before it reaches a JournalEntry: ratings and seconds must be plain
integers that fit their unsigned widths.
"""
from __future__ import annotations

import re
from typing import Any

from .exceptions import EntryParseError

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF

RATING_PATTERN = re.compile(r"^[1-5]$")


class DataValidator:
    """Centralized validation for entry metadata."""

    @staticmethod
    def normalize_uint(value: Any, maximum: int, field: str) -> int:
        """
        Check that a frontmatter value is an unsigned integer <= ``maximum``.

        Args:
            value: Value loaded from YAML
            maximum: Largest accepted value (UINT8_MAX or UINT16_MAX)
            field: Frontmatter key, used in the error message

        Returns:
            The value as int

        Raises:
            EntryParseError: If value is not an int (bools rejected) or out of range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise EntryParseError(
                f"'{field}' must be an integer, got {type(value).__name__}: {value!r}"
            )
        if value < 0 or value > maximum:
            raise EntryParseError(f"'{field}' must be between 0 and {maximum}, got {value}")
        return value

    @staticmethod
    def is_rating(text: str) -> bool:
        """Return True if text is a single digit 1-5."""
        return RATING_PATTERN.match(text) is not None
