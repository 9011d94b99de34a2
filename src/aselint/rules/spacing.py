"""Whitespace around operators and other spaced symbols."""

from __future__ import annotations

from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Range, Severity
from aselint.models.table import SpacerRule
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry
from aselint.scanner import Match, scan

SPACING_MESSAGE = "Does not meet spacing standards"

_BLANKS = (" ", "\t")


@RuleRegistry.register
class SpacingRule(Rule):
    """Requires whitespace (or a good-break scope) on both sides of a symbol.

    EXAMPLE: functions
    GOOD: ``itemcount( $sFilterTmp, eoi )``
    BAD: ``itemcount($sFilterTmp, eoi)``
    """

    @property
    def name(self) -> str:
        return "spacing"

    @property
    def title(self) -> str:
        return "Spacing"

    def check(self, context: LintContext, out: DiagnosticBuilder) -> None:
        for spacer in context.table.spacers:
            for match in scan(context.text, spacer.pattern, index=context.line_index):
                if not self._applies(context, spacer, match):
                    continue
                before = context.char_before(match.range)
                after = context.char_after(match.range)
                if not (
                    self._spaced(context, before, spacer.good_break_scope)
                    and self._spaced(context, after, spacer.good_break_scope)
                ):
                    out.add(Severity.WARNING, SPACING_MESSAGE, match.range)

    @staticmethod
    def _applies(context: LintContext, spacer: SpacerRule, match: Match) -> bool:
        start = match.range.start
        if not context.is_typical(start):
            return False
        if spacer.required_scope:
            return context.has_category(start, spacer.required_scope)
        return True

    @staticmethod
    def _spaced(context: LintContext, neighbor: Range | None, good_break: str) -> bool:
        """A missing neighbor, a blank, or a good-break scope all count as spaced."""
        if neighbor is None:
            return True
        char = context.document.get_text_in_range(neighbor)
        if not char or char in _BLANKS:
            return True
        return bool(good_break) and context.has_category(neighbor.start, good_break)
