"""Abstract base for rule families."""

from __future__ import annotations

from abc import ABC, abstractmethod

from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Diagnostic


class Rule(ABC):
    """One family of checks. ``run`` reads the context and returns its diagnostics.

    Rules keep no state between calls; everything transient lives inside ``run``.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def title(self) -> str:
        """Human-readable name used in degradation notices."""

    @abstractmethod
    def check(self, context: LintContext, out: DiagnosticBuilder) -> None:
        """Scan the document and report findings through ``out``."""

    def run(self, context: LintContext) -> list[Diagnostic]:
        results: list[Diagnostic] = []
        out = DiagnosticBuilder(
            results, context.document, rule=self.name, file_path=context.file_path
        )
        self.check(context, out)
        return results

    def exceeds_limit(self, context: LintContext) -> bool:
        """Whether the document is too large for this rule under the table's thresholds."""
        limit = context.table.line_limit(self.name)
        return limit is not None and context.line_count > limit
