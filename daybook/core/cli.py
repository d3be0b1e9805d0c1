#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Daybook commands.

Functions:
    setup_logger: Initialize DaybookLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    EntryStats: Totals and mood averages over scanned entries

Usage:
    from daybook.core.cli import setup_logger, EntryStats

    logger = setup_logger(log_dir, "cli")
    stats = EntryStats()
    stats.add(entry)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from daybook.core.logging_manager import DaybookLogger
from daybook.dataclasses.journal_entry import JournalEntry


def setup_logger(log_dir: Path, component_name: str) -> DaybookLogger:
    """
    Setup logging for CLI operations.

    Logs go to ``<log_dir>/operations``, which is created if needed.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'cli')

    Returns:
        Configured DaybookLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return DaybookLogger(operations_log_dir, component_name=component_name)


@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """

    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class EntryStats(OperationStats):
    """
    Statistics over a set of journal entries.

    Mood averages only count entries where that rating was collected
    (nonzero), so an unrated day does not drag the average down.

    Attributes:
        words: Total words across all entries
        seconds: Total seconds recorded across all entries
        high_moods: Collected high mood ratings
        low_moods: Collected low mood ratings
        average_moods: Collected average mood ratings
    """

    words: int = 0
    seconds: int = 0
    high_moods: List[int] = field(default_factory=list)
    low_moods: List[int] = field(default_factory=list)
    average_moods: List[int] = field(default_factory=list)

    def add(self, entry: JournalEntry) -> None:
        """Account for one loaded entry."""
        self.files_processed += 1
        self.words += entry.word_count
        self.seconds += entry.seconds
        if entry.high_mood:
            self.high_moods.append(entry.high_mood)
        if entry.low_mood:
            self.low_moods.append(entry.low_mood)
        if entry.average_mood:
            self.average_moods.append(entry.average_mood)

    @staticmethod
    def _mean(ratings: List[int]) -> Optional[float]:
        if not ratings:
            return None
        return sum(ratings) / len(ratings)

    def mood_averages(self) -> Dict[str, Optional[float]]:
        return {
            "high": self._mean(self.high_moods),
            "low": self._mean(self.low_moods),
            "average": self._mean(self.average_moods),
        }

    def summary(self) -> str:
        """Get formatted summary with word, time and mood totals."""
        parts = [
            f"{self.files_processed} entries",
            f"{self.words} words",
            f"{self.seconds}s written",
        ]
        for name, mean in self.mood_averages().items():
            if mean is not None:
                parts.append(f"{name} mood {mean:.1f}")
        parts.append(f"{self.errors} errors")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "words": self.words,
                "seconds": self.seconds,
                "moods": self.mood_averages(),
            }
        )
        return d
