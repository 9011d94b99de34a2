"""Positions, ranges and structured lint diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based (row, column) point in a document. Ordered by row, then column."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.column < 0:
            raise ValueError(f"Position must be non-negative, got ({self.row}, {self.column})")

    def as_list(self) -> list[int]:
        return [self.row, self.column]


@dataclass(frozen=True)
class Range:
    """Half-open span ``[start, end)``. Zero-width ranges are allowed."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")

    @classmethod
    def from_points(cls, start: tuple[int, int], end: tuple[int, int]) -> Range:
        return cls(Position(*start), Position(*end))

    @classmethod
    def single_char(cls, position: Position) -> Range:
        return cls(position, Position(position.row, position.column + 1))

    @classmethod
    def zero_width(cls, position: Position) -> Range:
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, position: Position) -> bool:
        return self.start <= position < self.end

    def as_list(self) -> list[list[int]]:
        return [self.start.as_list(), self.end.as_list()]


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Diagnostic(BaseModel):
    """A single positioned lint message with an optional replacement text."""

    severity: Severity
    message: str
    range: Range
    suggested_replacement: str | None = None
    rule: str | None = None
    file: str | None = None

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """Render in the editor-facing shape: severity, excerpt, location."""
        payload: dict[str, Any] = {
            "severity": self.severity.value,
            "excerpt": self.message,
            "location": {"file": self.file, "position": self.range.as_list()},
        }
        if self.suggested_replacement is not None:
            payload["solutions"] = [
                {"position": self.range.as_list(), "replaceWith": self.suggested_replacement}
            ]
        return payload


class LintResult(BaseModel):
    """Diagnostics of one lint pass plus the rule families skipped for size."""

    diagnostics: list[Diagnostic] = []
    disabled_rules: list[str] = []

    def by_severity(self, severity: Severity) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == severity]

    @property
    def errors(self) -> list[Diagnostic]:
        return self.by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.by_severity(Severity.WARNING)

    @property
    def infos(self) -> list[Diagnostic]:
        return self.by_severity(Severity.INFO)
