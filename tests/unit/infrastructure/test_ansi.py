"""Tests for infrastructure/ansi.py."""

import pytest

from tapreporter.infrastructure.ansi import strip_ansi


class TestStripAnsi:
    """Tests for strip_ansi()."""

    def test_plain_text_unchanged(self) -> None:
        """Text without sequences is returned as-is."""
        assert strip_ansi("plain title") == "plain title"

    def test_empty(self) -> None:
        """Empty text stays empty."""
        assert strip_ansi("") == ""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("\x1b[31mred\x1b[39m", "red"),
            ("\x1b[1;4mbold underline\x1b[0m", "bold underline"),
            ("\x1b[38;5;208morange\x1b[0m", "orange"),
            ("\x1b[2Kcleared", "cleared"),
        ],
    )
    def test_sequences_removed(self, text: str, expected: str) -> None:
        """SGR and other CSI sequences are removed."""
        assert strip_ansi(text) == expected

    def test_line_breaks_preserved(self) -> None:
        """Newlines, including trailing ones, are kept exactly."""
        assert strip_ansi("\x1b[31ma\x1b[0m\n\nb\n") == "a\n\nb\n"

    def test_carriage_returns_preserved(self) -> None:
        """CRLF and lone CR are kept, text before them is not dropped."""
        assert strip_ansi("a\r\nb\rc") == "a\r\nb\rc"
