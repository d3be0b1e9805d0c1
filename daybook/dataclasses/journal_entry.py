#!/usr/bin/env python3
"""
journal_entry.py
-------------------
Dataclass representing one day's journal entry.

An entry is a single Markdown file named after its day. The file opens
with a YAML frontmatter block holding the day's metadata and continues
with the body, which is never interpreted or rewritten:

    ---
    Seconds: 1260
    LowMood: 2
    HighMood: 4
    AverageMood: 3
    ---
    Free-form text...

Key Design:
- The file name is the only place the date lives; ``date()`` parses it back
  with the same format that built it.
- Body bytes are kept verbatim across save/load; only the frontmatter
  block is regenerated.
- ``path`` and ``mod_time`` are derived/observed and never written.
- ``load()`` reports whether the file's mtime moved since it was last seen.
  The flag is informational only; nothing is locked or merged.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from daybook.core.exceptions import (
    EntryNotADirectoryError,
    EntryNotFoundError,
    EntryParseError,
    EntryReadError,
    EntryWriteError,
)
from daybook.core.logging_manager import DaybookLogger, safe_logger
from daybook.core.validators import UINT8_MAX, UINT16_MAX, DataValidator
from daybook.utils import fs, md

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(rb"\S+")

# Frontmatter key -> (attribute, largest value), in the order keys are written
METADATA_FIELDS: Tuple[Tuple[str, str, int], ...] = (
    ("Seconds", "seconds", UINT16_MAX),
    ("LowMood", "low_mood", UINT8_MAX),
    ("HighMood", "high_mood", UINT8_MAX),
    ("AverageMood", "average_mood", UINT8_MAX),
)


@dataclass
class JournalEntry:
    """
    A journal entry bound to one file.

    Attributes:
        path: Entry file location (directory / entry file name)
        seconds: Time spent on the entry, 0..65535
        low_mood: Lowest mood of the day, 1-5 (0 = not collected yet)
        high_mood: Highest mood of the day, 1-5 (0 = not collected yet)
        average_mood: Average mood of the day, 1-5 (0 = not collected yet)
        body: Raw content after the frontmatter block
        mod_time: Last observed modification time of the file
        mod_time_ns: The same mtime in integer nanoseconds (None until loaded)
        logger: Optional DaybookLogger for operation logging

    Examples:
        >>> entry = JournalEntry.resolve(Path("~/daybook/journal").expanduser())
        >>> entry.high_mood = 4
        >>> entry.save()
        >>> len(entry.words())
        312
    """

    path: Path
    seconds: int = 0
    low_mood: int = 0
    high_mood: int = 0
    average_mood: int = 0
    body: bytes = b""
    mod_time: Optional[datetime] = None
    mod_time_ns: Optional[int] = field(default=None, repr=False, compare=False)
    logger: Optional[DaybookLogger] = field(default=None, repr=False, compare=False)

    # ---- Construction ----
    @classmethod
    def resolve(
        cls,
        directory: Path,
        now: Optional[datetime] = None,
        logger: Optional[DaybookLogger] = None,
    ) -> JournalEntry:
        """
        Find or create the entry for ``now`` inside ``directory``.

        If the entry file already exists it is loaded; otherwise the entry
        starts with zeroed metadata and an empty body and is saved at once.

        Args:
            directory: Journal directory (must exist)
            now: Moment whose day names the entry (default: datetime.now())
            logger: Optional logger for operation logging

        Returns:
            The populated JournalEntry

        Raises:
            EntryNotFoundError: If directory does not exist
            EntryNotADirectoryError: If directory is not a directory
            EntryReadError: If the directory or entry cannot be checked or read
            EntryParseError: If the existing file is malformed
            EntryWriteError: If creating the new file fails
        """
        directory = Path(directory)
        now = now or datetime.now()

        try:
            found = directory.exists()
            is_dir = found and directory.is_dir()
        except OSError as e:
            raise EntryReadError(f"Cannot access journal directory {directory}: {e}") from e

        if not found:
            raise EntryNotFoundError(f"Journal directory not found: {directory}")
        if not is_dir:
            raise EntryNotADirectoryError(f"Must be a directory: {directory}")

        entry = cls(path=directory / fs.entry_filename(now), logger=logger)

        try:
            entry_exists = entry.path.exists()
        except OSError as e:
            raise EntryReadError(f"Cannot access entry {entry.path}: {e}") from e

        if entry_exists:
            entry.load()
        else:
            entry.mod_time = now
            entry.save()
            safe_logger(logger).log_operation("create_entry", {"path": entry.path})

        return entry

    # ---- Persistence ----
    def load(self) -> bool:
        """
        Read the entry file and replace metadata and body with its content.

        Keys missing from the frontmatter leave the current attribute
        values as they are.

        Returns:
            True if the file's modification time differs from ``mod_time``
            (the file changed since it was last loaded or created)

        Raises:
            EntryNotFoundError: If the file does not exist
            EntryReadError: If the file cannot be read
            EntryParseError: If the frontmatter block is missing or malformed
        """
        try:
            with open(self.path, "rb") as f:
                data = f.read()
                stat = os.fstat(f.fileno())
        except FileNotFoundError as e:
            raise EntryNotFoundError(f"Entry file not found: {self.path}") from e
        except OSError as e:
            raise EntryReadError(f"Cannot read entry {self.path}: {e}") from e

        # Compared in nanoseconds; the datetime is rounded to microseconds
        modified = stat.st_mtime_ns != self.mod_time_ns
        self.mod_time = datetime.fromtimestamp(stat.st_mtime)
        self.mod_time_ns = stat.st_mtime_ns

        metadata, self.body = self.parse_content(data)
        for key, attribute, _ in METADATA_FIELDS:
            if key in metadata:
                setattr(self, attribute, metadata[key])

        safe_logger(self.logger).log_debug(
            "Loaded entry",
            {"path": self.path, "modified": modified, "body_bytes": len(self.body)},
        )
        return modified

    def save(self) -> None:
        """
        Write the frontmatter block followed by the unchanged body to ``path``.

        Any existing file is replaced. Metadata values are range-checked
        first; an out-of-range value leaves the file untouched.

        Raises:
            EntryWriteError: If a metadata value does not fit its width, or
                if the file cannot be written. On I/O failure the attempted
                content is logged and attached to the exception.
        """
        try:
            for key, attribute, maximum in METADATA_FIELDS:
                DataValidator.normalize_uint(getattr(self, attribute), maximum, key)
        except EntryParseError as e:
            raise EntryWriteError(f"Refusing to write entry {self.path}: {e}") from e

        content = self.to_bytes()
        try:
            self.path.write_bytes(content)
        except OSError as e:
            error = EntryWriteError(f"Cannot write entry {self.path}: {e}", content=content)
            safe_logger(self.logger).log_error(
                error,
                {"path": self.path, "dump": content.decode("utf-8", errors="replace")},
            )
            logger.error("Unsaved entry content:\n%s", content.decode("utf-8", errors="replace"))
            raise error from e

        safe_logger(self.logger).log_operation(
            "save_entry", {"path": self.path, **self.metadata()}
        )

    # ---- Serialization ----
    def metadata(self) -> Dict[str, int]:
        """Return the frontmatter mapping in write order."""
        return {key: getattr(self, attribute) for key, attribute, _ in METADATA_FIELDS}

    def to_frontmatter(self) -> bytes:
        """Serialize metadata as YAML (without delimiters)."""
        text = yaml.safe_dump(self.metadata(), sort_keys=False, default_flow_style=False)
        return text.encode("utf-8")

    def to_bytes(self) -> bytes:
        """Return the full file content: frontmatter block then body."""
        return md.join_frontmatter(self.to_frontmatter(), self.body)

    @staticmethod
    def parse_content(data: bytes) -> Tuple[Dict[str, int], bytes]:
        """
        Parse entry file content into validated metadata and body.

        Frontmatter keys are matched case-insensitively, so files written
        with lowercase keys (``lowmood: 2``) load too. Unknown keys are
        ignored.

        Args:
            data: Full file content

        Returns:
            Tuple of (metadata keyed by canonical name, body bytes)

        Raises:
            EntryParseError: If the block is missing, not YAML, not a
                mapping, or holds out-of-range values
        """
        parts = md.split_frontmatter(data)
        if parts is None:
            raise EntryParseError("No YAML frontmatter found (must start with ---)")
        frontmatter, body = parts

        try:
            raw: Any = yaml.safe_load(frontmatter.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise EntryParseError(f"Frontmatter is not valid UTF-8: {e}") from e
        except yaml.YAMLError as e:
            raise EntryParseError(f"Invalid YAML frontmatter: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise EntryParseError("YAML frontmatter must be a mapping")

        known = {key.lower(): (key, maximum) for key, _, maximum in METADATA_FIELDS}
        metadata: Dict[str, int] = {}
        for raw_key, value in raw.items():
            spec = known.get(str(raw_key).lower())
            if spec is None:
                logger.debug(f"Ignoring unknown frontmatter key: {raw_key}")
                continue
            key, maximum = spec
            metadata[key] = DataValidator.normalize_uint(value, maximum, key)

        return metadata, body

    # ---- Derived values ----
    def date(self) -> datetime:
        """
        Return the day this entry is for, parsed from its file name.

        Raises:
            EntryParseError: If the file name does not follow the entry format
        """
        return fs.parse_date_from_filename(self.path)

    def words(self) -> List[bytes]:
        """Split the body into maximal runs of non-whitespace bytes."""
        return WORD_PATTERN.findall(self.body)

    @property
    def word_count(self) -> int:
        return len(self.words())

    # ---- Rating setters ----
    def set_high_mood(self, rating: int) -> None:
        self.high_mood = rating

    def set_low_mood(self, rating: int) -> None:
        self.low_mood = rating

    def set_average_mood(self, rating: int) -> None:
        self.average_mood = rating

