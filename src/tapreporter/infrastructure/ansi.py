"""ANSI escape sequence stripping."""

from __future__ import annotations

import re

from rich.ansi import AnsiDecoder

# Line and carriage-return boundaries, kept in the split result
_BREAKS = re.compile(r"(\r\n|\r|\n)")


def strip_ansi(text: str) -> str:
    """Remove terminal color and control sequences from text.

    Decoded segment by segment: AnsiDecoder re-splits on line
    boundaries and treats "\\r" as an overwrite, so breaks are
    split off here and put back exactly as given.

    Args:
        text: Text possibly containing ANSI sequences.

    Returns:
        Plain text with the same line breaks.
    """
    decoder = AnsiDecoder()
    parts = _BREAKS.split(text)
    # Odd indices hold the captured breaks
    return "".join(
        part if index % 2 else decoder.decode_line(part).plain
        for index, part in enumerate(parts)
    )
