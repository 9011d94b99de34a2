"""ASE style linter: casing, spacing, bracket and notation checks driven by a rule table."""

from aselint.config.loader import RuleTableError, RuleTableLoader, load_default_rule_table
from aselint.document import Document, ScopeClassifier, TextDocument
from aselint.engine.context import ClassifierContractError, LintContext
from aselint.engine.pipeline import LintEngine, lint_text
from aselint.models.diagnostic import Diagnostic, LintResult, Position, Range, Severity
from aselint.models.table import RuleTable
from aselint.rules.registry import UnsupportedRuleError

__version__ = "0.1.0"

__all__ = [
    "ClassifierContractError",
    "Diagnostic",
    "Document",
    "LintContext",
    "LintEngine",
    "LintResult",
    "Position",
    "Range",
    "RuleTable",
    "RuleTableError",
    "RuleTableLoader",
    "ScopeClassifier",
    "Severity",
    "TextDocument",
    "UnsupportedRuleError",
    "__version__",
    "lint_text",
]
