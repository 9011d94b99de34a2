"""Shared test fixtures for the ASE linter."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from aselint.config.loader import RuleTableLoader, load_default_rule_table
from aselint.document import TextDocument
from aselint.engine.context import LintContext
from aselint.engine.pipeline import LintEngine
from aselint.models.diagnostic import LintResult, Position, Range
from aselint.models.table import RuleTable
from aselint.scanner import LineIndex, scan

ROOT = "source.ase"

# Canned token classes standing in for the editor's grammar. Earlier entries win.
ASE_SCOPES: dict[str, list[str]] = {
    r"//[^\n]*": ["comment.line.double-slash.ase"],
    r"/\*.*?\*/": ["comment.block.ase"],
    r'"[^"\n]*"': ["string.quoted.double.ase"],
    r"`[^`]*`": ["meta.embedded.inlinecode.ase"],
    r"\$[A-Z][A-Z0-9_]*\b": ["constant.other.ase"],
    r"[+\-*/=<>]": ["keyword.operator.aseOperator.ase"],
}


class RegionClassifier:
    """Fake scope classifier: fixed regions map to scope paths below the root."""

    def __init__(self, regions: Sequence[tuple[Range, Sequence[str]]] = (), root: str = ROOT):
        self.regions = list(regions)
        self.root = root
        self.calls = 0

    def __call__(self, position: Position) -> list[str]:
        self.calls += 1
        for span, scopes in self.regions:
            if span.contains(position):
                return [self.root, *scopes]
        return [self.root]


def classify(text: str, patterns: dict[str, list[str]] | None = None) -> RegionClassifier:
    """Build a RegionClassifier from regex -> scope path pairs applied to ``text``."""
    index = LineIndex(text)
    regions: list[tuple[Range, Sequence[str]]] = []
    for pattern, scopes in (patterns if patterns is not None else ASE_SCOPES).items():
        for match in scan(text, pattern, index=index):
            regions.append((match.range, scopes))
    return RegionClassifier(regions)


def make_document(text: str, path: str | None = None) -> TextDocument:
    return TextDocument(text, classify(text), path=path)


@pytest.fixture
def loader() -> RuleTableLoader:
    return RuleTableLoader()


@pytest.fixture
def default_table() -> RuleTable:
    return load_default_rule_table()


@pytest.fixture
def lint(default_table: RuleTable) -> Callable[..., LintResult]:
    """Lint ``text`` with the canned classifier; optional table and rule subset."""

    def _lint(
        text: str,
        table: RuleTable | None = None,
        rules: Sequence[str] | None = None,
    ) -> LintResult:
        engine = LintEngine(table if table is not None else default_table, rules=rules)
        return engine.lint(make_document(text))

    return _lint


@pytest.fixture
def context_for(default_table: RuleTable) -> Callable[..., LintContext]:
    def _context(text: str, table: RuleTable | None = None) -> LintContext:
        return LintContext(
            document=make_document(text),
            table=table if table is not None else default_table,
        )

    return _context


SAMPLE_RULES_YAML = """\
keywords:
  - eoi
  - NullObject

spacers:
  - pattern: '[\\+=]'
    goodBreakScope: aseOperator

brackets:
  - open: '\\('
    close: '\\)'

maxLines:
  spacing: 100
"""
