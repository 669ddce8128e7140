"""Stack trace extraction: raw traceback → call sites.

Parses Python traceback text into frames, drops frames from
interpreter, installed-library and reporter paths, and formats
the rest most recent call first as "func (file:line)".
"""

from __future__ import annotations

import re
import sysconfig
from dataclasses import dataclass
from pathlib import Path

_FRAME_PATTERN = re.compile(r'^\s*File "(?P<file>[^"]+)", line (?P<line>\d+), in (?P<func>.+?)\s*$')

# Discover stdlib and site-packages paths from sysconfig (not hardcoded)
_DEFAULT_INTERNAL_PATHS: tuple[Path, ...] = tuple(
    Path(p).resolve()
    for p in dict.fromkeys(
        (
            sysconfig.get_path("stdlib"),
            sysconfig.get_path("purelib"),
            sysconfig.get_path("platlib"),
        )
    )
    if p is not None
) + (Path(__file__).resolve().parent.parent,)


@dataclass(frozen=True, slots=True)
class _Frame:
    """One parsed traceback frame."""

    file: str
    line: int
    func: str

    def format(self) -> str:
        """Format as "func (file:line)"."""
        return f"{self.func} ({self.file}:{self.line})"


class StackExtractor:
    """Callable stack normalizer.

    Frames under any of internal_paths are dropped. When every frame
    is internal, all frames are kept so a call site is still reported.
    Text that is not a Python traceback is returned as its non-blank
    lines, stripped.
    """

    def __init__(self, internal_paths: tuple[Path, ...] | None = None) -> None:
        """Initialize extractor.

        Args:
            internal_paths: Directories whose frames are dropped.
                None = stdlib, site-packages and this package.
        """
        if internal_paths is None:
            self._internal_paths = _DEFAULT_INTERNAL_PATHS
        else:
            self._internal_paths = tuple(p.resolve() for p in internal_paths)

    def __call__(self, stack: str) -> str:
        """Extract call sites from raw traceback text.

        Args:
            stack: Raw traceback text.

        Returns:
            Call sites most recent first, one per line.
        """
        frames = _parse_frames(stack)
        if not frames:
            return "\n".join(line.strip() for line in stack.splitlines() if line.strip())

        visible = [frame for frame in frames if not self._is_internal(frame.file)]
        selected = visible or frames
        return "\n".join(frame.format() for frame in reversed(selected))

    def _is_internal(self, file: str) -> bool:
        """Check if file lies under one of the internal paths."""
        if file.startswith("<"):
            return False  # <string>, <frozen ...>, <stdin>
        path = Path(file).resolve()
        return any(path.is_relative_to(internal) for internal in self._internal_paths)


def _parse_frames(stack: str) -> list[_Frame]:
    """Parse frames in traceback order (oldest first)."""
    frames: list[_Frame] = []
    for line in stack.splitlines():
        match = _FRAME_PATTERN.match(line)
        if match:
            frames.append(
                _Frame(
                    file=match.group("file"),
                    line=int(match.group("line")),
                    func=match.group("func"),
                )
            )
    return frames


_default_extractor = StackExtractor()


def extract_stack(stack: str) -> str:
    """Extract call sites with the default internal paths.

    Args:
        stack: Raw traceback text.

    Returns:
        Call sites most recent first, one per line.
    """
    return _default_extractor(stack)
