"""
test_md_utils.py
----------------
Unit tests for daybook.utils.md module.

Tests splitting and joining of the frontmatter block.
"""
from daybook.utils.md import join_frontmatter, split_frontmatter


class TestSplitFrontmatter:
    """Test split_frontmatter function."""

    def test_basic_frontmatter(self):
        content = b"---\nLowMood: 2\nHighMood: 4\n---\nBody content here\n"
        frontmatter, body = split_frontmatter(content)
        assert frontmatter == b"LowMood: 2\nHighMood: 4\n"
        assert body == b"Body content here\n"

    def test_body_kept_verbatim(self):
        """Leading blank lines and odd spacing in the body are preserved."""
        content = b"---\nSeconds: 1\n---\n\n\n  indented\t\n\nlast"
        _, body = split_frontmatter(content)
        assert body == b"\n\n  indented\t\n\nlast"

    def test_body_containing_delimiter(self):
        """Only the first closing delimiter ends the block."""
        content = b"---\nSeconds: 1\n---\nabove\n---\nbelow\n"
        frontmatter, body = split_frontmatter(content)
        assert frontmatter == b"Seconds: 1\n"
        assert body == b"above\n---\nbelow\n"

    def test_crlf_line_endings(self):
        content = b"---\r\nSeconds: 1\r\n---\r\nBody\r\n"
        frontmatter, body = split_frontmatter(content)
        assert frontmatter == b"Seconds: 1\r\n"
        assert body == b"Body\r\n"

    def test_empty_frontmatter(self):
        assert split_frontmatter(b"---\n---\nBody") == (b"", b"Body")

    def test_closing_delimiter_at_end_of_file(self):
        assert split_frontmatter(b"---\nSeconds: 1\n---") == (b"Seconds: 1\n", b"")

    def test_no_frontmatter(self):
        assert split_frontmatter(b"Just body content\n") is None

    def test_no_closing_delimiter(self):
        assert split_frontmatter(b"---\nSeconds: 1\nBody\n") is None

    def test_empty_content(self):
        assert split_frontmatter(b"") is None


class TestJoinFrontmatter:
    """Test join_frontmatter function."""

    def test_join(self):
        assert join_frontmatter(b"Seconds: 1\n", b"Body") == b"---\nSeconds: 1\n---\nBody"

    def test_missing_trailing_newline_added(self):
        assert join_frontmatter(b"Seconds: 1", b"") == b"---\nSeconds: 1\n---\n"

    def test_split_undoes_join(self):
        body = b"\n  first\n---\nsecond  \n"
        assert split_frontmatter(join_frontmatter(b"LowMood: 3\n", body)) == (
            b"LowMood: 3\n",
            body,
        )
