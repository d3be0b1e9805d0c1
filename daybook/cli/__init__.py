#!/usr/bin/env python3
"""
Daybook CLI
-----------

Command-line interface for the daily journal.

Commands:
    - today: Open (or create) today's entry and ask for missing moods
    - write: Edit today's entry in $EDITOR, timing the session
    - stats: Summarize every entry in the journal directory

Usage:
    daybook today
    daybook write
    daybook --journal-dir ~/Dropbox/journal stats
"""
from __future__ import annotations

import click
from pathlib import Path

from daybook.core.paths import JOURNAL_DIR, LOG_DIR
from daybook.core.cli import setup_logger


@click.group()
@click.option(
    "--journal-dir",
    type=click.Path(),
    default=str(JOURNAL_DIR),
    show_default=True,
    help="Directory holding the journal entries",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, journal_dir: str, log_dir: str, verbose: bool) -> None:
    """Daybook - one plain-text journal entry per day"""
    ctx.ensure_object(dict)
    ctx.obj["journal_dir"] = Path(journal_dir).expanduser()
    ctx.obj["log_dir"] = Path(log_dir).expanduser()
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(ctx.obj["log_dir"], "cli")


from .entry import today, write
from .stats import stats

cli.add_command(today)
cli.add_command(write)
cli.add_command(stats)


if __name__ == "__main__":
    cli(obj={})
