"""Text layout helpers."""

from __future__ import annotations

import textwrap


def indent(text: str, columns: int) -> str:
    """Prefix every non-blank line of text with spaces.

    Blank lines stay empty so block scalars carry no trailing whitespace.

    Args:
        text: Text to indent.
        columns: Number of spaces. Must be >= 0.

    Returns:
        Indented text.
    """
    if columns < 0:
        raise ValueError(f"columns must be >= 0, got {columns}")
    return textwrap.indent(text, " " * columns)
