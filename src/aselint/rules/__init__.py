"""Rule families for the ASE linter."""

# Import rules to trigger registration
import aselint.rules.brackets as _brackets  # noqa: F401
import aselint.rules.casing as _casing  # noqa: F401
import aselint.rules.notation as _notation  # noqa: F401
import aselint.rules.spacing as _spacing  # noqa: F401
from aselint.rules.base import Rule
from aselint.rules.registry import RuleRegistry, UnsupportedRuleError

__all__ = [
    "Rule",
    "RuleRegistry",
    "UnsupportedRuleError",
]
