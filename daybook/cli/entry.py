"""
Entry Commands
--------------

Commands working on today's entry.

Commands:
    - today: Find or create today's entry, then ask for missing moods
    - write: Same, but open the entry in an editor first and add the time
      spent to the entry's seconds
"""
from __future__ import annotations

import sys
import time
from typing import Optional

import click

from daybook.core.logging_manager import DaybookLogger, handle_cli_error
from daybook.core.validators import UINT16_MAX
from daybook.dataclasses.journal_entry import JournalEntry
from daybook.pipeline.prompter import MetadataPrompter, missing_ratings


def _prompt_moods(entry: JournalEntry, logger: DaybookLogger) -> int:
    """Ask for unset moods on the console."""
    if missing_ratings(entry):
        click.echo()
    prompter = MetadataPrompter(sys.stdin, sys.stdout, logger=logger)
    return prompter.prompt_for_metadata(entry)


def _echo_entry(entry: JournalEntry) -> None:
    click.echo(f"\n📓 {entry.path}")
    click.echo(f"  Date: {entry.date():%A, %B %d, %Y}")
    click.echo(f"  Words: {entry.word_count}")
    click.echo(f"  Time: {entry.seconds}s")
    click.echo(
        f"  Moods: high {entry.high_mood or '-'}, "
        f"low {entry.low_mood or '-'}, "
        f"average {entry.average_mood or '-'}"
    )


@click.command()
@click.option("--no-prompt", is_flag=True, help="Do not ask for missing moods")
@click.pass_context
def today(ctx: click.Context, no_prompt: bool) -> None:
    """
    Open today's entry, creating it if needed.

    Missing mood ratings are asked for on the console and saved.
    """
    logger: DaybookLogger = ctx.obj["logger"]
    journal_dir = ctx.obj["journal_dir"]

    try:
        entry = JournalEntry.resolve(journal_dir, logger=logger)

        if not no_prompt and _prompt_moods(entry, logger):
            entry.save()

        _echo_entry(entry)

    except Exception as e:
        handle_cli_error(ctx, e, "today", additional_context={"journal_dir": journal_dir})


@click.command()
@click.option("--editor", default=None, help="Editor command (default: $EDITOR)")
@click.option("--no-prompt", is_flag=True, help="Do not ask for missing moods")
@click.pass_context
def write(ctx: click.Context, editor: Optional[str], no_prompt: bool) -> None:
    """
    Edit today's entry and record the time spent.

    The editing session's length is added to the entry's seconds, then any
    missing moods are asked for and everything is saved.
    """
    logger: DaybookLogger = ctx.obj["logger"]
    journal_dir = ctx.obj["journal_dir"]

    try:
        entry = JournalEntry.resolve(journal_dir, logger=logger)
        # Sync mod_time with the file as it is on disk
        entry.load()

        started = time.monotonic()
        click.edit(filename=str(entry.path), editor=editor)
        elapsed = int(time.monotonic() - started)

        if entry.load():
            logger.log_info("Entry changed during editing", {"path": entry.path})
        else:
            click.echo("No changes saved in the editor.")

        entry.seconds = min(UINT16_MAX, entry.seconds + elapsed)
        logger.log_debug("Editing session", {"path": entry.path, "elapsed": elapsed})

        if not no_prompt:
            _prompt_moods(entry, logger)

        entry.save()
        _echo_entry(entry)

    except Exception as e:
        handle_cli_error(ctx, e, "write", additional_context={"journal_dir": journal_dir})


__all__ = ["today", "write"]
