"""Per-invocation lint state, passed explicitly to every rule."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cached_property

from aselint import scope
from aselint.document import Document, split_lines
from aselint.models.diagnostic import Position, Range
from aselint.models.table import RuleTable
from aselint.scanner import LineIndex


class ClassifierContractError(Exception):
    """Raised when the document or its classifier violates the input contract."""


@dataclass
class LintContext:
    """Read-only inputs of one lint pass: document, rule table and file path."""

    document: Document
    table: RuleTable
    file_path: str | None = None
    _lines: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lines = split_lines(self.text)

    @cached_property
    def text(self) -> str:
        return self.document.get_text()

    @cached_property
    def line_index(self) -> LineIndex:
        return LineIndex(self.text)

    @property
    def line_count(self) -> int:
        return self.document.get_line_count()

    def line_length(self, row: int) -> int:
        if row < 0 or row >= len(self._lines):
            raise ClassifierContractError(
                f"Row {row} outside document of {len(self._lines)} lines"
            )
        return len(self._lines[row])

    def scopes_at(self, position: Position) -> Sequence[str]:
        """Classify ``position``, failing fast on out-of-range input or output."""
        if position.column > self.line_length(position.row):
            raise ClassifierContractError(
                f"Column {position.column} outside line {position.row} "
                f"of length {self.line_length(position.row)}"
            )
        scopes = self.document.classify_scope(position)
        if isinstance(scopes, str) or not isinstance(scopes, Sequence):
            raise ClassifierContractError(
                f"Classifier returned {type(scopes).__name__} for {position}, "
                f"expected a sequence of scope names"
            )
        if not all(isinstance(name, str) for name in scopes):
            raise ClassifierContractError(f"Classifier returned non-string scope at {position}")
        return scopes

    def is_typical(self, position: Position) -> bool:
        return scope.is_typical(self.scopes_at(position), self.table.root_scope)

    def has_category(self, position: Position, category: str) -> bool:
        return scope.contains_category(self.scopes_at(position), category, self.table.root_scope)

    def char_before(self, span: Range) -> Range | None:
        """One-character range left of ``span`` on the same line, if any."""
        start = span.start
        if start.column == 0:
            return None
        return Range.single_char(Position(start.row, start.column - 1))

    def char_after(self, span: Range) -> Range | None:
        """One-character range right of ``span`` on the same line, if any."""
        end = span.end
        if end.column >= self.line_length(end.row):
            return None
        return Range.single_char(end)
