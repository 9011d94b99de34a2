"""Orchestrates one lint pass: size policy → rule families → merged diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import aselint.rules  # noqa: F401  (registers the rule families)
from aselint.config.loader import RuleTableLoader, load_default_rule_table
from aselint.document import Document, ScopeClassifier, TextDocument
from aselint.engine.context import LintContext
from aselint.engine.diagnostics import DiagnosticBuilder
from aselint.models.diagnostic import Diagnostic, LintResult, Position, Range, Severity
from aselint.models.table import RuleTable
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry
from aselint.settings import Settings

logger = logging.getLogger("aselint.engine")

DEFAULT_RULES = ("casing", "spacing", "bracket-match", "notation")
BANNER_MESSAGE = "ASE Linter is enabled"


class LintEngine:
    """Runs the configured rule families over a document.

    The engine holds only the rule table and rule instances, both read-only,
    so one engine may lint many documents, in any order or concurrently.
    """

    def __init__(
        self,
        table: RuleTable,
        rules: Sequence[str] | None = None,
        show_banner: bool = False,
    ) -> None:
        self.table = table
        self.show_banner = show_banner
        names = DEFAULT_RULES if rules is None else rules
        self._rules: list[Rule] = [RuleRegistry.get(name) for name in names]
        unknown = set(table.max_lines) - set(RuleRegistry.available())
        if unknown:
            logger.warning("Line thresholds set for unknown rules: %s", ", ".join(sorted(unknown)))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> LintEngine:
        """Build an engine from environment / ``.env`` settings."""
        if settings is None:
            settings = Settings()
        if settings.rules_file is not None:
            table = RuleTableLoader().load_table(settings.rules_file)
        else:
            table = load_default_rule_table()
        table = table.with_line_limits(settings.max_lines_override)
        return cls(table, rules=settings.enabled_rules, show_banner=settings.show_banner)

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def lint(self, document: Document, file_path: str | None = None) -> LintResult:
        """Lint ``document`` and return its diagnostics in emission order."""
        context = LintContext(document=document, table=self.table, file_path=file_path)

        active: list[Rule] = []
        disabled: list[Rule] = []
        for rule in self._rules:
            (disabled if rule.exceeds_limit(context) else active).append(rule)

        diagnostics: list[Diagnostic] = []
        notices = DiagnosticBuilder(diagnostics, document, file_path=file_path)
        if disabled:
            titles = ", ".join(rule.title for rule in disabled)
            logger.info(
                "Document has %d lines; disabled rules: %s", context.line_count, titles
            )
            notices.add(
                Severity.INFO,
                f"Disabled for large documents ({context.line_count} lines): {titles}",
                Range.zero_width(Position(0, 0)),
            )
        if self.show_banner:
            notices.add(Severity.INFO, BANNER_MESSAGE, Range.zero_width(Position(0, 0)))

        for rule in active:
            found = rule.run(context)
            logger.debug("Rule %s produced %d diagnostics", rule.name, len(found))
            diagnostics.extend(found)

        return LintResult(
            diagnostics=diagnostics,
            disabled_rules=[rule.name for rule in disabled],
        )


def lint_text(
    text: str,
    classifier: ScopeClassifier,
    table: RuleTable | None = None,
    file_path: str | None = None,
) -> LintResult:
    """One-shot helper: lint ``text`` with the given classifier and table."""
    engine = LintEngine(table if table is not None else load_default_rule_table())
    return engine.lint(TextDocument(text, classifier, path=file_path), file_path=file_path)
