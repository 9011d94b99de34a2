"""YAML rule-table loader with position tracking for configuration errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from aselint.models.table import RuleTable

logger = logging.getLogger("aselint.config")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 1_000_000  # 1M characters
_MAX_DEPTH = 20

DEFAULT_RULES_RESOURCE = "defaults.yaml"


class SourceSpan(BaseModel):
    """Points to a location in the rule-table YAML source."""

    file: str
    line: int
    column: int


class ConfigIssue(BaseModel):
    """One problem found while loading a rule table."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class RuleTableError(Exception):
    """Raised when a rule table cannot be loaded; nothing is linted with it."""

    def __init__(self, issues: list[ConfigIssue]) -> None:
        self.issues = issues
        lines = []
        for issue in issues:
            where = ""
            if issue.span:
                where = f" ({issue.span.file}:{issue.span.line}:{issue.span.column})"
            lines.append(f"{issue.path or '<root>'}: {issue.message}{where}")
        super().__init__("Invalid rule table:\n  " + "\n  ".join(lines))


class RuleTableSafetyError(Exception):
    """Raised when rule-table YAML exceeds the size or nesting limits."""


@dataclass
class SourceMap:
    """Maps YAML key paths to their source positions for error reporting."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


def _error_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``spacers[0].pattern``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


class RuleTableLoader:
    """Loads a ``RuleTable`` from YAML, reporting errors at their source line.

    Uses ruamel.yaml which preserves line/column info on every parsed node.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.max_depth = _MAX_DEPTH

    @staticmethod
    def _check_size(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise RuleTableSafetyError(
                f"Rule table exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def load_string(
        self, content: str, filename: str = "<string>"
    ) -> tuple[dict[str, Any], SourceMap]:
        """Parse YAML text into a plain dict and its source map."""
        self._check_size(content)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise RuleTableError(
                [ConfigIssue(code="YAML_PARSE_ERROR", message=str(exc))]
            ) from exc
        if data is None:
            return {}, SourceMap()
        if not isinstance(data, CommentedMap):
            raise RuleTableError(
                [
                    ConfigIssue(
                        code="RULE_TABLE_NOT_MAPPING",
                        message="Rule table must be a YAML mapping",
                    )
                ]
            )
        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        return self._to_plain_value(data), source_map

    def load(self, path: Path) -> tuple[dict[str, Any], SourceMap]:
        """Parse a YAML file into a plain dict and its source map."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def build(self, raw: dict[str, Any], source_map: SourceMap | None = None) -> RuleTable:
        """Validate a raw mapping into a ``RuleTable``; every pattern is compiled once."""
        try:
            table = RuleTable.model_validate(raw)
        except ValidationError as exc:
            issues = []
            for error in exc.errors():
                path = _error_path(error["loc"])
                issues.append(
                    ConfigIssue(
                        code="INVALID_RULE_TABLE",
                        message=error["msg"],
                        path=path,
                        span=self._closest_span(source_map, path),
                    )
                )
            raise RuleTableError(issues) from exc
        logger.debug(
            "Loaded rule table: %d keywords, %d spacers, %d bracket pairs",
            len(table.keywords),
            len(table.spacers),
            len(table.brackets),
        )
        return table

    def load_table(self, path: Path) -> RuleTable:
        raw, source_map = self.load(path)
        return self.build(raw, source_map)

    def load_table_string(self, content: str, filename: str = "<string>") -> RuleTable:
        raw, source_map = self.load_string(content, filename)
        return self.build(raw, source_map)

    # -- helpers ---------------------------------------------------------------

    @staticmethod
    def _closest_span(source_map: SourceMap | None, path: str) -> SourceSpan | None:
        """Span of ``path`` or of its nearest recorded ancestor."""
        if source_map is None:
            return None
        candidate = path
        while candidate:
            span = source_map.get(candidate)
            if span is not None:
                return span
            cut = max(candidate.rfind("."), candidate.rfind("["))
            if cut <= 0:
                break
            candidate = candidate[:cut]
        return None

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    key_positions = data.lc.key(key)
                    if key_positions:
                        line, col = key_positions
                        source_map.add(
                            key_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}[{i}]"
                try:
                    item_pos = data.lc.item(i)
                    if item_pos:
                        line, col = item_pos
                        source_map.add(
                            item_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        return data


def load_default_rule_table() -> RuleTable:
    """Load the rule table shipped with the package."""
    content = resources.files("aselint.config").joinpath(DEFAULT_RULES_RESOURCE).read_text(
        encoding="utf-8"
    )
    return RuleTableLoader().load_table_string(content, filename=DEFAULT_RULES_RESOURCE)
