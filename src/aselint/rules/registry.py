"""Rule family registry: register and look up rule implementations by name."""

from __future__ import annotations

from aselint.rules.base import Rule


class UnsupportedRuleError(Exception):
    """Raised when a requested rule family is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.rule_name = name
        self.available = available
        super().__init__(f"Unsupported rule '{name}'. Available: {', '.join(available)}")


class RuleRegistry:
    """Registry for rule families."""

    _rules: dict[str, type[Rule]] = {}

    @classmethod
    def register(cls, rule_class: type[Rule]) -> type[Rule]:
        """Register a rule class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = rule_class()
        cls._rules[instance.name] = rule_class
        return rule_class

    @classmethod
    def get(cls, name: str) -> Rule:
        """Get an instance of the named rule family."""
        if name not in cls._rules:
            raise UnsupportedRuleError(name, available=cls.available())
        return cls._rules[name]()

    @classmethod
    def available(cls) -> list[str]:
        """List registered rule names."""
        return sorted(cls._rules.keys())
