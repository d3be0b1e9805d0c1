"""
Integration tests for the daybook CLI (today, write, stats).
"""
import json
import pytest
from click.testing import CliRunner
from datetime import date, datetime
from unittest.mock import patch

from daybook.cli import cli
from daybook.utils.fs import entry_filename


class TestCli:
    """End-to-end CLI runs against a temporary journal directory."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def dirs(self, tmp_path):
        journal = tmp_path / "journal"
        journal.mkdir()
        return {"journal": journal, "logs": tmp_path / "logs"}

    def invoke(self, runner, dirs, args, input=None):
        base_args = [
            "--journal-dir", str(dirs["journal"]),
            "--log-dir", str(dirs["logs"]),
        ]
        return runner.invoke(cli, base_args + args, input=input, obj={})

    def today_path(self, dirs):
        return dirs["journal"] / entry_filename(datetime.now())

    # ----- today -----

    def test_today_creates_and_prompts(self, runner, dirs):
        result = self.invoke(runner, dirs, ["today"], input="3\n4\n2\n")

        assert result.exit_code == 0, result.output
        assert "High mood for the day? (1-5) " in result.output
        assert "Average mood for the day? (1-5) " in result.output

        content = self.today_path(dirs).read_bytes()
        assert b"HighMood: 3\n" in content
        assert b"LowMood: 4\n" in content
        assert b"AverageMood: 2\n" in content

    def test_today_rejects_invalid_input(self, runner, dirs):
        result = self.invoke(runner, dirs, ["today"], input="9\n3\n4\n2\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("Unrecognized input") == 1

    @pytest.mark.filterwarnings("error::DeprecationWarning")
    def test_today_prompts_on_standard_streams(self, runner, dirs):
        result = self.invoke(runner, dirs, ["today"], input="2\n1\n1\n")

        assert result.exit_code == 0, result.output
        assert result.output.count("mood for the day? (1-5) ") == 3
        assert b"HighMood: 2\n" in self.today_path(dirs).read_bytes()

    def test_today_no_prompt(self, runner, dirs):
        result = self.invoke(runner, dirs, ["today", "--no-prompt"])

        assert result.exit_code == 0, result.output
        assert "mood for the day" not in result.output
        assert self.today_path(dirs).exists()

    def test_today_keeps_existing_body_and_ratings(self, runner, dirs):
        path = self.today_path(dirs)
        path.write_bytes(b"---\nSeconds: 5\nLowMood: 1\nHighMood: 5\nAverageMood: 0\n---\nDear diary,\n")

        result = self.invoke(runner, dirs, ["today"], input="3\n")

        assert result.exit_code == 0, result.output
        assert "High mood" not in result.output
        assert path.read_bytes() == (
            b"---\nSeconds: 5\nLowMood: 1\nHighMood: 5\nAverageMood: 3\n---\nDear diary,\n"
        )
        assert "Words: 2" in result.output

    def test_today_input_closed(self, runner, dirs):
        result = self.invoke(runner, dirs, ["today"], input="3\n")

        assert result.exit_code == 1
        assert "InputStreamError" in result.output
        # The entry was still created, without the partial answers
        assert b"HighMood: 0" in self.today_path(dirs).read_bytes()

    def test_today_missing_journal_dir(self, runner, dirs, tmp_path):
        result = runner.invoke(
            cli,
            ["--journal-dir", str(tmp_path / "nope"), "--log-dir", str(dirs["logs"]), "today"],
            obj={},
        )
        assert result.exit_code == 1
        assert "EntryNotFoundError" in result.output

    def test_today_malformed_entry(self, runner, dirs):
        self.today_path(dirs).write_bytes(b"no frontmatter")
        result = self.invoke(runner, dirs, ["today", "--no-prompt"])
        assert result.exit_code == 1
        assert "EntryParseError" in result.output

    # ----- write -----

    def test_write_adds_elapsed_seconds(self, runner, dirs):
        def fake_edit(filename=None, editor=None, **kwargs):
            with open(filename, "ab") as f:
                f.write(b"Written in the editor.\n")

        with patch("click.edit", side_effect=fake_edit), \
                patch("daybook.cli.entry.time") as fake_time:
            fake_time.monotonic.side_effect = [100.0, 190.5]
            result = self.invoke(runner, dirs, ["write", "--no-prompt"])

        assert result.exit_code == 0, result.output
        content = self.today_path(dirs).read_bytes()
        assert b"Seconds: 90\n" in content
        assert content.endswith(b"---\nWritten in the editor.\n")

    def test_write_seconds_clamped(self, runner, dirs):
        self.today_path(dirs).write_bytes(
            b"---\nSeconds: 65500\nLowMood: 1\nHighMood: 1\nAverageMood: 1\n---\n"
        )
        with patch("click.edit"), patch("daybook.cli.entry.time") as fake_time:
            fake_time.monotonic.side_effect = [0.0, 1000.0]
            result = self.invoke(runner, dirs, ["write"])

        assert result.exit_code == 0, result.output
        assert b"Seconds: 65535\n" in self.today_path(dirs).read_bytes()

    def test_write_unchanged_then_prompts(self, runner, dirs):
        with patch("click.edit"), patch("daybook.cli.entry.time") as fake_time:
            fake_time.monotonic.side_effect = [0.0, 2.0]
            result = self.invoke(runner, dirs, ["write"], input="5\n5\n5\n")

        assert result.exit_code == 0, result.output
        assert "No changes saved in the editor." in result.output
        assert b"AverageMood: 5\n" in self.today_path(dirs).read_bytes()

    # ----- stats -----

    def test_stats(self, runner, dirs):
        journal = dirs["journal"]
        (journal / entry_filename(date(2024, 1, 2))).write_bytes(
            b"---\nSeconds: 60\nLowMood: 2\nHighMood: 4\nAverageMood: 3\n---\none two three\n"
        )
        (journal / entry_filename(date(2024, 1, 3))).write_bytes(
            b"---\nSeconds: 30\nLowMood: 0\nHighMood: 0\nAverageMood: 0\n---\nfour\n"
        )
        (journal / "README.md").write_text("not an entry")

        result = self.invoke(runner, dirs, ["stats"])

        assert result.exit_code == 0, result.output
        assert "2024-01-02" in result.output
        assert "2024-01-03" in result.output
        assert "2 entries" in result.output
        assert "4 words" in result.output
        assert "90s written" in result.output

    def test_stats_reports_bad_entries(self, runner, dirs):
        journal = dirs["journal"]
        (journal / entry_filename(date(2024, 1, 2))).write_bytes(b"---\nSeconds: 1\n---\nok\n")
        (journal / entry_filename(date(2024, 1, 3))).write_bytes(b"broken")

        result = self.invoke(runner, dirs, ["stats"])

        assert result.exit_code == 0, result.output
        assert "1 entries" in result.output
        assert "1 errors" in result.output

    def test_stats_json(self, runner, dirs):
        (dirs["journal"] / entry_filename(date(2024, 1, 2))).write_bytes(
            b"---\nSeconds: 10\nLowMood: 1\nHighMood: 5\nAverageMood: 3\n---\na b\n"
        )
        result = self.invoke(runner, dirs, ["stats", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["files_processed"] == 1
        assert data["words"] == 2
        assert data["moods"] == {"high": 5.0, "low": 1.0, "average": 3.0}

    def test_stats_missing_dir(self, runner, dirs, tmp_path):
        result = runner.invoke(
            cli,
            ["--journal-dir", str(tmp_path / "nope"), "--log-dir", str(dirs["logs"]), "stats"],
            obj={},
        )
        assert result.exit_code == 1
