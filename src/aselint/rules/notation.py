"""Hungarian notation for variable names."""

from __future__ import annotations

from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Severity
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry
from aselint.scanner import scan

VARIABLE_PATTERN = r"\$[A-Za-z0-9]+"
NOTATION_MESSAGE = "Does not follow Hungarian Notation"


def first_capital(name: str) -> int | None:
    """Index where ``name`` first differs from its lower-cased form."""
    lowered = name.lower()
    for i, (original, lower) in enumerate(zip(name, lowered)):
        if original != lower:
            return i
    return None


def is_hungarian(name: str) -> bool:
    """A lowercase type tag followed by at least one capitalized word: ``joNode``."""
    index = first_capital(name)
    return index is not None and index > 0


@RuleRegistry.register
class NotationRule(Rule):
    """Flags ``$variables`` without a lowercase prefix and a capitalized word."""

    @property
    def name(self) -> str:
        return "notation"

    @property
    def title(self) -> str:
        return "Notation"

    def check(self, context: LintContext, out: DiagnosticBuilder) -> None:
        constant = context.table.constant_category
        for match in scan(context.text, VARIABLE_PATTERN, index=context.line_index):
            if is_hungarian(match.text[1:]):
                continue
            start = match.range.start
            if not context.is_typical(start) or context.has_category(start, constant):
                continue
            out.add(Severity.WARNING, NOTATION_MESSAGE, match.range)
