"""TAP13 YAML diagnostic block rendering.

Block layout:
      ---
        name: AssertionError
        message: |
          first line
          second line
        at: test_sum (tests/test_math.py:12)
      ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tapreporter.infrastructure.ansi import strip_ansi
from tapreporter.infrastructure.stack import extract_stack
from tapreporter.infrastructure.text import indent

if TYPE_CHECKING:
    from tapreporter.domain.model.error_info import ErrorInfo
    from tapreporter.domain.ports.stack import StackExtractorProtocol

BLOCK_OPEN = "  ---"
BLOCK_CLOSE = "  ..."
PROPERTY_INDENT = 4
SCALAR_INDENT = 6


def format_scalar(value: str) -> str:
    """Format property value as YAML scalar.

    Single-line values are emitted as-is. Multi-line values become a
    literal block scalar with every line indented SCALAR_INDENT spaces.
    """
    if "\n" in value:
        return "|\n" + indent(value, SCALAR_INDENT)
    return value


def source_from_stack(stack: str, extractor: StackExtractorProtocol | None = None) -> str:
    """First call site of a normalized stack (function, file, line)."""
    extract = extractor or extract_stack
    return extract(stack).split("\n")[0]


def render_yaml_block(
    error: ErrorInfo,
    *,
    include_message: bool,
    extractor: StackExtractorProtocol | None = None,
) -> str:
    """Render error diagnostics as a TAP13 YAML block.

    Property order is fixed: name, message, operator, actual,
    expected, at. Absent properties produce no line.
    actual/expected render whenever they are str, including "".

    Args:
        error: Failure diagnostics.
        include_message: Emit the message property.
        extractor: Stack normalizer (default: extract_stack).

    Returns:
        Block text from open marker to close marker, no trailing newline.
    """
    properties: list[tuple[str, str]] = []

    if error.name:
        properties.append(("name", error.name))
    if include_message and error.message:
        properties.append(("message", error.message))
    if error.operator:
        properties.append(("operator", error.operator))
    if isinstance(error.actual, str):
        properties.append(("actual", strip_ansi(error.actual)))
    if isinstance(error.expected, str):
        properties.append(("expected", strip_ansi(error.expected)))

    prefix = " " * PROPERTY_INDENT
    lines = [BLOCK_OPEN]
    lines.extend(f"{prefix}{key}: {format_scalar(value)}" for key, value in properties)
    if error.stack:
        lines.append(f"{prefix}at: {source_from_stack(error.stack, extractor)}")
    lines.append(BLOCK_CLOSE)

    return "\n".join(lines)
