"""Unbalanced bracket detection."""

from __future__ import annotations

from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Position, Range, Severity
from aselint.models.table import BracketPair
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry
from aselint.scanner import scan

MISSING_MATCH_MESSAGE = "Missing a matching character"


def _pop_partner(stack: list[Position], close: Position) -> bool:
    """Remove the topmost opener on the same row or column as ``close``.

    Not strict LIFO: an opener sharing a row or column with the closer wins,
    which tolerates reordered pairs on one line.
    """
    for i in range(len(stack) - 1, -1, -1):
        opener = stack[i]
        if opener.column == close.column or opener.row == close.row:
            del stack[i]
            return True
    return False


@RuleRegistry.register
class BracketMatchRule(Rule):
    """Reports openers and closers that have no partner."""

    @property
    def name(self) -> str:
        return "bracket-match"

    @property
    def title(self) -> str:
        return "Bracket Matching"

    def check(self, context: LintContext, out: DiagnosticBuilder) -> None:
        for pair in context.table.brackets:
            for position in self.unmatched(context, pair):
                out.add(Severity.ERROR, MISSING_MATCH_MESSAGE, Range.single_char(position))

    @staticmethod
    def unmatched(context: LintContext, pair: BracketPair) -> list[Position]:
        """Positions of unmatched openers (in stack order) followed by unmatched closers."""
        stack: list[Position] = []
        stray: list[Position] = []

        for match in scan(context.text, pair.pattern, index=context.line_index):
            position = match.range.start
            if not context.is_typical(position):
                continue
            if match.groups["open"] is not None:
                stack.append(position)
            elif not _pop_partner(stack, position):
                stray.append(position)

        return stack + stray
