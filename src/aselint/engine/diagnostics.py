"""Normalizes rule output into Diagnostic records."""

from __future__ import annotations

import logging

from aselint.document import Document
from aselint.models.diagnostic import Diagnostic, Position, Range, Severity

logger = logging.getLogger("aselint.diagnostics")

SUGGESTION_MARKER = "Did you mean: "


def extract_suggestion(message: str) -> str | None:
    """Replacement text following the last ``Did you mean:`` marker, if any."""
    _, marker, suggestion = message.rpartition(SUGGESTION_MARKER)
    if not marker or not suggestion:
        return None
    return suggestion


class DiagnosticBuilder:
    """Appends diagnostics to a caller-owned list.

    Accepts either an explicit ``Range`` or a line number with columns.
    A line with only a start column (or a non-positive end column) gets its
    range from the document's ``infer_range`` helper.
    """

    def __init__(
        self,
        results: list[Diagnostic],
        document: Document,
        rule: str | None = None,
        file_path: str | None = None,
    ) -> None:
        self._results = results
        self._document = document
        self._rule = rule
        self._file_path = file_path

    def _resolve_range(
        self,
        where: Range | int,
        start_column: int | None,
        end_column: int | None,
    ) -> Range:
        if isinstance(where, Range):
            return where
        if start_column is None:
            return self._document.infer_range(where)
        if end_column is not None and end_column > 0:
            return Range(Position(where, start_column), Position(where, end_column))
        return self._document.infer_range(where, start_column)

    def add(
        self,
        severity: Severity,
        message: str,
        where: Range | int,
        start_column: int | None = None,
        end_column: int | None = None,
    ) -> None:
        diagnostic = Diagnostic(
            severity=severity,
            message=message,
            range=self._resolve_range(where, start_column, end_column),
            suggested_replacement=extract_suggestion(message),
            rule=self._rule,
            file=self._file_path,
        )
        logger.debug("Adding %s at %s: %s", severity.value, diagnostic.range.as_list(), message)
        self._results.append(diagnostic)
