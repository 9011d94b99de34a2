"""Keyword and constant capitalization."""

from __future__ import annotations

import re

from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Severity
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry
from aselint.scanner import scan

BAD_CASE_MESSAGE = "Incorrect capitalization for keyword. Did you mean: "


@RuleRegistry.register
class CasingRule(Rule):
    """Flags keywords written with the wrong capitalization.

    EXAMPLE: constant ``eoi``
    GOOD: ``eoi``
    BAD: ``EOI``, ``eOi``
    """

    @property
    def name(self) -> str:
        return "casing"

    @property
    def title(self) -> str:
        return "Casing"

    def check(self, context: LintContext, out: DiagnosticBuilder) -> None:
        for keyword in context.table.keywords:
            pattern = rf"\b({re.escape(keyword)})\b"
            for match in scan(context.text, pattern, ignore_case=True, index=context.line_index):
                if match.text == keyword:
                    continue
                if not context.is_typical(match.range.start):
                    continue
                out.add(Severity.WARNING, BAD_CASE_MESSAGE + keyword, match.range)
