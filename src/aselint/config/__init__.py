"""Rule-table configuration loading."""

from aselint.config.loader import (
    ConfigIssue,
    RuleTableError,
    RuleTableLoader,
    RuleTableSafetyError,
    SourceMap,
    SourceSpan,
    load_default_rule_table,
)

__all__ = [
    "ConfigIssue",
    "RuleTableError",
    "RuleTableLoader",
    "RuleTableSafetyError",
    "SourceMap",
    "SourceSpan",
    "load_default_rule_table",
]
