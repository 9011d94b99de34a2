"""Rule table: keyword lists, spacing rules, bracket pairs and size thresholds."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_ROOT_SCOPE = "source.ase"


def _compile(pattern: str) -> str:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"Invalid pattern {pattern!r}: {exc}") from exc
    return pattern


class SpacerRule(BaseModel):
    """A symbol that must be surrounded by whitespace or a good-break scope.

    ``required_scope`` empty means any typical scope qualifies.
    """

    pattern: str
    required_scope: str = Field("", alias="requiredScope")
    good_break_scope: str = Field("", alias="goodBreakScope")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("pattern")
    @classmethod
    def _valid_pattern(cls, value: str) -> str:
        if not value:
            raise ValueError("Spacer pattern must not be empty")
        return _compile(value)


class BracketPair(BaseModel):
    """Opening and closing patterns that must balance."""

    open: str
    close: str

    model_config = {"frozen": True}

    @field_validator("open", "close")
    @classmethod
    def _valid_pattern(cls, value: str) -> str:
        if not value:
            raise ValueError("Bracket pattern must not be empty")
        return _compile(value)

    @model_validator(mode="after")
    def _valid_combined_pattern(self) -> BracketPair:
        _compile(self.pattern)
        return self

    @property
    def pattern(self) -> str:
        """One alternation matching either side; group numbers shift inside it."""
        return f"(?P<open>{self.open})|(?P<close>{self.close})"


class RuleTable(BaseModel):
    """Immutable lint configuration, decoupled from the rule algorithms."""

    keywords: list[str] = []
    spacers: list[SpacerRule] = []
    brackets: list[BracketPair] = []
    max_lines: dict[str, int] = Field(default_factory=lambda: {"spacing": 2000}, alias="maxLines")
    root_scope: str = Field(DEFAULT_ROOT_SCOPE, alias="rootScope")
    constant_category: str = Field("constant", alias="constantCategory")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("keywords")
    @classmethod
    def _valid_keywords(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        for keyword in value:
            if not keyword.strip():
                raise ValueError("Keywords must not be empty")
            if keyword in seen:
                raise ValueError(f"Duplicate keyword '{keyword}'")
            seen.add(keyword)
        return value

    @field_validator("max_lines")
    @classmethod
    def _positive_thresholds(cls, value: dict[str, int]) -> dict[str, int]:
        for name, limit in value.items():
            if limit <= 0:
                raise ValueError(f"Line threshold for '{name}' must be positive, got {limit}")
        return value

    def line_limit(self, rule_name: str) -> int | None:
        return self.max_lines.get(rule_name)

    def with_line_limits(self, overrides: dict[str, int]) -> RuleTable:
        """Return a copy whose thresholds are updated with ``overrides``."""
        if not overrides:
            return self
        merged = {**self.max_lines, **overrides}
        return RuleTable.model_validate({**self.model_dump(), "max_lines": merged})
