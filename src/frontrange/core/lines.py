# topmark:header:start
#
#   project      : FrontRange
#   file         : lines.py
#   file_relpath : src/frontrange/core/lines.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Line bookkeeping for document text.

[`LineIndex`][frontrange.core.lines.LineIndex] maps character offsets to 1-based
line numbers and extracts line ranges. A line ends at ``\\n``, ``\\r\\n`` or a lone
``\\r``; the terminator belongs to the line it ends.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import Final, NamedTuple

# One line including its terminator; the final match may be empty at end of text.
LINE_RE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\r|\n|\Z)")


def split_lines_keepends(text: str) -> list[str]:
    """Split `text` into lines, keeping terminators (``\\r`` alone counts as one)."""
    lines = [m.group(0) for m in LINE_RE.finditer(text)]
    # The regex yields a trailing empty match at end of text
    return [line for line in lines if line]


def strip_line_break(line: str) -> str:
    """Return `line` without its trailing ``\\r\\n``, ``\\n`` or ``\\r``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


class LineRange(NamedTuple):
    """Inclusive, 1-based line range."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}-{self.end}" if self.start != self.end else str(self.start)


class LineIndex:
    """Offset to line-number lookup for one text.

    Args:
        text (str): The full document text.
    """

    def __init__(self, text: str) -> None:
        self.text: str = text
        self._lines: list[str] = split_lines_keepends(text)
        starts: list[int] = []
        offset = 0
        for line in self._lines:
            starts.append(offset)
            offset += len(line)
        self._starts: list[int] = starts or [0]

    @property
    def line_count(self) -> int:
        """Number of lines; text ending with a line break has no extra empty line."""
        return len(self._lines)

    def line_number(self, offset: int) -> int:
        """Return the 1-based line containing character `offset`.

        Offsets past the end of the text report the last line.
        """
        if offset < 0:
            raise ValueError(f"negative offset: {offset}")
        return bisect_right(self._starts, offset)

    def line_range(self, start: int, end: int) -> LineRange:
        """Return the lines touched by the half-open character span ``[start, end)``."""
        first = self.line_number(start)
        last = self.line_number(max(start, end - 1))
        return LineRange(first, last)

    def lines(self, start: int, end: int | None = None) -> str | None:
        """Return the text of lines `start`..`end` (1-based, inclusive).

        An `end` past the last line is clamped to the end of the text. Returns
        None when the range is invalid (``start < 1`` or ``end < start``) or
        when `start` lies beyond the last line.
        """
        last = self.line_count if end is None else end
        if start < 1 or last < start or start > self.line_count:
            return None
        return "".join(self._lines[start - 1 : min(last, self.line_count)])

    def numbered(self, start: int, end: int | None = None) -> list[tuple[int, str]] | None:
        """Like [`lines`][frontrange.core.lines.LineIndex.lines] but as (number, text) pairs.

        Line breaks are stripped from each returned text.
        """
        if self.lines(start, end) is None:
            return None
        last = min(self.line_count if end is None else end, self.line_count)
        return [(n, strip_line_break(self._lines[n - 1])) for n in range(start, last + 1)]
