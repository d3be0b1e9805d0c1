"""
Statistics Command
------------------

Summarize the entries in the journal directory: one line per entry with
its word count, time spent and moods, followed by totals. Entries that
cannot be read or parsed are reported and counted as errors; the scan
carries on with the rest.
"""
from __future__ import annotations

import json

import click

from daybook.core.cli import EntryStats
from daybook.core.exceptions import (
    DaybookError,
    EntryNotADirectoryError,
    EntryNotFoundError,
)
from daybook.core.logging_manager import DaybookLogger, handle_cli_error
from daybook.dataclasses.journal_entry import JournalEntry
from daybook.utils.fs import find_entry_files


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print totals as JSON")
@click.pass_context
def stats(ctx: click.Context, as_json: bool) -> None:
    """Show words, time and moods for every journal entry."""
    logger: DaybookLogger = ctx.obj["logger"]
    journal_dir = ctx.obj["journal_dir"]

    try:
        if not journal_dir.exists():
            raise EntryNotFoundError(f"Journal directory not found: {journal_dir}")
        if not journal_dir.is_dir():
            raise EntryNotADirectoryError(f"Must be a directory: {journal_dir}")

        entry_stats = EntryStats()
        for path in find_entry_files(journal_dir):
            entry = JournalEntry(path=path, logger=logger)
            try:
                entry.load()
                day = entry.date()
            except DaybookError as e:
                entry_stats.errors += 1
                logger.log_warning(f"Skipping {path.name}", {"error": str(e)})
                if not as_json:
                    click.echo(f"  ⚠️  {path.name}: {e}")
                continue

            entry_stats.add(entry)
            if not as_json:
                click.echo(
                    f"  {day:%Y-%m-%d}  "
                    f"{entry.word_count:>6} words  "
                    f"{entry.seconds:>5}s  "
                    f"H{entry.high_mood} L{entry.low_mood} A{entry.average_mood}"
                )

        logger.log_operation("stats", entry_stats.to_dict())

        if as_json:
            click.echo(json.dumps(entry_stats.to_dict(), indent=2))
        else:
            click.echo(f"\n📊 {entry_stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "stats", additional_context={"journal_dir": journal_dir})


__all__ = ["stats"]
