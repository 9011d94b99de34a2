"""Regex scanning with row/column ranges for every match."""

from __future__ import annotations

import re
from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass

from aselint.models.diagnostic import Position, Range


@dataclass(frozen=True)
class Match:
    """One regex hit: its document range, character offsets and text."""

    range: Range
    text: str
    start_offset: int
    end_offset: int
    groups: dict[str, str | None]


class LineIndex:
    """Translates character offsets into (row, column) positions."""

    def __init__(self, text: str) -> None:
        self._starts = [0]
        for i, char in enumerate(text):
            if char == "\n":
                self._starts.append(i + 1)
        self._length = len(text)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def position(self, offset: int) -> Position:
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} outside document of length {self._length}")
        row = bisect_right(self._starts, offset) - 1
        return Position(row, offset - self._starts[row])


def scan(
    text: str,
    pattern: str | re.Pattern[str],
    *,
    ignore_case: bool = False,
    index: LineIndex | None = None,
) -> Iterator[Match]:
    """Yield non-overlapping matches of ``pattern`` left to right.

    Zero-width matches are skipped. The generator is single-pass; call again
    to rescan.
    """
    if isinstance(pattern, str):
        flags = re.IGNORECASE if ignore_case else 0
        compiled = re.compile(pattern, flags)
    elif ignore_case:
        compiled = re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    else:
        compiled = pattern
    line_index = index if index is not None else LineIndex(text)

    for hit in compiled.finditer(text):
        start, end = hit.span()
        if start == end:
            continue
        yield Match(
            range=Range(line_index.position(start), line_index.position(end)),
            text=hit.group(0),
            start_offset=start,
            end_offset=end,
            groups=hit.groupdict(),
        )
