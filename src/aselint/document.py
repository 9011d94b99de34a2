"""Document interface consumed by the engine, plus an in-memory adapter."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from aselint.models.diagnostic import Position, Range

ScopeClassifier = Callable[[Position], Sequence[str]]
"""Maps a position to its scope path, outermost first. Must be pure."""


def split_lines(text: str) -> list[str]:
    """Split into lines on ``\\n``, dropping the ``\\r`` of CRLF endings."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


@runtime_checkable
class Document(Protocol):
    """What a host editor supplies for one lint pass."""

    def get_text(self) -> str: ...

    def get_line_count(self) -> int: ...

    def classify_scope(self, position: Position) -> Sequence[str]: ...

    def get_text_in_range(self, span: Range) -> str: ...

    def infer_range(self, row: int, column: int | None = None) -> Range: ...


class TextDocument:
    """A document held in memory with an injected scope classifier."""

    def __init__(
        self,
        text: str,
        classifier: ScopeClassifier,
        path: str | None = None,
    ) -> None:
        self._text = text
        self._lines = split_lines(text)
        self._classifier = classifier
        self.path = path

    def get_text(self) -> str:
        return self._text

    def get_line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        if row < 0 or row >= len(self._lines):
            raise ValueError(f"Row {row} outside document of {len(self._lines)} lines")
        return self._lines[row]

    def classify_scope(self, position: Position) -> Sequence[str]:
        return self._classifier(position)

    def get_text_in_range(self, span: Range) -> str:
        """Text covered by ``span``; columns past a line end are clipped by slicing."""
        if span.start.row == span.end.row:
            return self.line(span.start.row)[span.start.column : span.end.column]
        parts = [self.line(span.start.row)[span.start.column :]]
        for row in range(span.start.row + 1, span.end.row):
            parts.append(self.line(row))
        parts.append(self.line(span.end.row)[: span.end.column])
        return "\n".join(parts)

    def infer_range(self, row: int, column: int | None = None) -> Range:
        """Range from ``column`` (default: first non-blank character) to end of line."""
        text = self.line(row)
        if column is None:
            stripped = text.lstrip(" \t")
            column = len(text) - len(stripped)
        if column < 0 or column > len(text):
            raise ValueError(f"Column {column} outside line {row} of length {len(text)}")
        return Range(Position(row, column), Position(row, len(text)))
