#!/usr/bin/env python3
"""
prompter.py
-------------------
Interactive collection of the day's mood ratings.

The prompter asks one question per mood field that is still unset (0),
in a fixed order, and keeps asking the same question until it gets a
single digit from 1 to 5. Ratings that are already set are never asked
for again, so running it twice on a filled-in entry does nothing.

    High mood for the day? (1-5) 9
    Unrecognized input
    High mood for the day? (1-5) 4
    Low mood for the day? (1-5) 2
    Average mood for the day? (1-5) 3

If the input stream ends or fails, InputStreamError is raised and the
ratings accepted so far stay on the entry.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

# --- Local imports ---
from daybook.core.exceptions import InputStreamError
from daybook.core.logging_manager import DaybookLogger, safe_logger
from daybook.core.validators import DataValidator
from daybook.dataclasses.journal_entry import JournalEntry

UNRECOGNIZED_INPUT = "Unrecognized input"


class RatingField(ABC):
    """A 1-5 rating on an entry that the prompter can ask for."""

    name: str
    prompt: str

    @abstractmethod
    def get(self, entry: JournalEntry) -> int:
        """Current value of the field (0 when unset)."""

    @abstractmethod
    def set(self, entry: JournalEntry, rating: int) -> None:
        """Store an accepted rating on the entry."""

    def is_unset(self, entry: JournalEntry) -> bool:
        return self.get(entry) == 0


class HighMoodField(RatingField):
    name = "HighMood"
    prompt = "High mood for the day? (1-5) "

    def get(self, entry: JournalEntry) -> int:
        return entry.high_mood

    def set(self, entry: JournalEntry, rating: int) -> None:
        entry.set_high_mood(rating)


class LowMoodField(RatingField):
    name = "LowMood"
    prompt = "Low mood for the day? (1-5) "

    def get(self, entry: JournalEntry) -> int:
        return entry.low_mood

    def set(self, entry: JournalEntry, rating: int) -> None:
        entry.set_low_mood(rating)


class AverageMoodField(RatingField):
    name = "AverageMood"
    prompt = "Average mood for the day? (1-5) "

    def get(self, entry: JournalEntry) -> int:
        return entry.average_mood

    def set(self, entry: JournalEntry, rating: int) -> None:
        entry.set_average_mood(rating)


# Order in which questions are asked
RATING_FIELDS: Tuple[RatingField, ...] = (
    HighMoodField(),
    LowMoodField(),
    AverageMoodField(),
)


def missing_ratings(entry: JournalEntry) -> List[RatingField]:
    """Rating fields still unset on ``entry``, in prompt order."""
    return [rating_field for rating_field in RATING_FIELDS if rating_field.is_unset(entry)]


class MetadataPrompter:
    """
    Question/answer loop filling unset mood ratings on an entry.

    Attributes:
        reader: Text stream answers are read from, one per line
        writer: Text stream prompts and rejections are written to
        logger: Optional DaybookLogger

    Examples:
        >>> prompter = MetadataPrompter(sys.stdin, sys.stdout)
        >>> prompter.prompt_for_metadata(entry)
        >>> entry.save()
    """

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        logger: Optional[DaybookLogger] = None,
    ) -> None:
        self.reader = reader
        self.writer = writer
        self.logger = logger

    def prompt_for_metadata(self, entry: JournalEntry) -> int:
        """
        Ask for every unset rating on ``entry`` and store the answers.

        Args:
            entry: Entry to fill in; modified in place

        Returns:
            Number of ratings collected

        Raises:
            InputStreamError: If the input ends or fails before an answer
        """
        collected = 0
        for rating_field in missing_ratings(entry):
            rating = self._ask(rating_field)
            rating_field.set(entry, rating)
            collected += 1
            safe_logger(self.logger).log_debug(
                "Collected rating", {"field": rating_field.name, "rating": rating}
            )
        return collected

    def _ask(self, rating_field: RatingField) -> int:
        """Prompt until a valid rating is read for one field."""
        while True:
            self.writer.write(rating_field.prompt)
            self.writer.flush()

            answer = self._read_line(rating_field)
            if DataValidator.is_rating(answer):
                return int(answer)

            self.writer.write(UNRECOGNIZED_INPUT + "\n")

    def _read_line(self, rating_field: RatingField) -> str:
        """Read one stripped line; a missing line terminator means the stream ended."""
        try:
            line = self.reader.readline()
        except (OSError, ValueError) as e:
            raise InputStreamError(
                f"Cannot read answer for {rating_field.name}: {e}"
            ) from e

        if not line.endswith("\n"):
            raise InputStreamError(f"Input closed while asking for {rating_field.name}")
        return line.strip()
