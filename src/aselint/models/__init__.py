"""Pydantic and dataclass domain models for the ASE linter."""

from aselint.models.diagnostic import Diagnostic, LintResult, Position, Range, Severity
from aselint.models.table import BracketPair, RuleTable, SpacerRule

__all__ = [
    "BracketPair",
    "Diagnostic",
    "LintResult",
    "Position",
    "Range",
    "RuleTable",
    "Severity",
    "SpacerRule",
]
