"""
conftest.py
-----------
Shared pytest fixtures for Daybook tests.

Provides fixtures for:
- Temporary journal directories
- A fixed "now" so entry file names are predictable
- Sample entry file content
"""
import pytest
from pathlib import Path
from datetime import datetime
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def journal_dir(tmp_dir):
    """Empty journal directory."""
    path = tmp_dir / "journal"
    path.mkdir()
    return path


# ----- Time Fixtures -----

@pytest.fixture
def fixed_now():
    """A moment on July 4th, 2023 (single-digit day)."""
    return datetime(2023, 7, 4, 21, 30, 15)


@pytest.fixture
def fixed_entry_name():
    """File name of the entry for fixed_now."""
    return "2023-07-04-Journal-Entry-for-Jul-4.md"


# ----- Sample Content Fixtures -----

@pytest.fixture
def complete_entry_content():
    """Entry with every rating collected and a multi-line body."""
    return (
        b"---\n"
        b"Seconds: 1260\n"
        b"LowMood: 2\n"
        b"HighMood: 4\n"
        b"AverageMood: 3\n"
        b"---\n"
        b"Went for a long walk by the river.\n"
        b"\n"
        b"  Indented line, trailing spaces   \n"
    )


@pytest.fixture
def partial_entry_content():
    """Entry where only the high mood was collected."""
    return (
        b"---\n"
        b"Seconds: 0\n"
        b"LowMood: 0\n"
        b"HighMood: 5\n"
        b"AverageMood: 0\n"
        b"---\n"
        b"Short day.\n"
    )


@pytest.fixture
def existing_entry(journal_dir, fixed_entry_name, complete_entry_content):
    """Write complete_entry_content as the fixed_now entry and return its path."""
    path = journal_dir / fixed_entry_name
    path.write_bytes(complete_entry_content)
    return path
