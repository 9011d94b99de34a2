"""Tests for scope predicates."""

from __future__ import annotations

import pytest

from aselint.scope import (
    contains_category,
    is_comment,
    is_inline_code,
    is_root,
    is_string,
    is_typical,
)

ROOT = "source.ase"


class TestIsRoot:
    def test_root_first(self) -> None:
        assert is_root([ROOT, "comment.line.ase"])

    def test_other_language(self) -> None:
        assert not is_root(["text.html.basic", ROOT])

    def test_empty_path(self) -> None:
        assert not is_root([])

    def test_custom_root(self) -> None:
        assert is_root(["source.ase2"], root="source.ase2")
        assert not is_root([ROOT], root="source.ase2")


class TestContainsCategory:
    def test_requires_two_entries(self) -> None:
        assert not contains_category([ROOT], "source")

    def test_segment_match_anywhere(self) -> None:
        scopes = [ROOT, "meta.function.ase", "keyword.operator.aseOperator.ase"]
        assert contains_category(scopes, "aseOperator")
        assert contains_category(scopes, "function")

    def test_whole_segment_only(self) -> None:
        assert not contains_category([ROOT, "keyword.operator.ase"], "oper")

    def test_not_root(self) -> None:
        assert not contains_category(["source.js", "comment.line.js"], "comment")

    def test_inline_code_masks_nested_scopes(self) -> None:
        scopes = [ROOT, "meta.embedded.inlinecode.ase", "string.quoted.double.js"]
        assert contains_category(scopes, "inlinecode")
        assert not contains_category(scopes, "quoted")
        assert not contains_category(scopes, "string")

    def test_comment_masks_nested_scopes(self) -> None:
        scopes = [ROOT, "comment.block.ase", "keyword.operator.aseOperator.ase"]
        assert contains_category(scopes, "comment")
        assert not contains_category(scopes, "aseOperator")

    def test_masked_scope_own_segments_do_not_match(self) -> None:
        inline = [ROOT, "meta.embedded.inlinecode.ase"]
        assert not contains_category(inline, "embedded")
        assert not contains_category(inline, "ase")
        comment = [ROOT, "comment.line.double-slash.ase"]
        assert not contains_category(comment, "line")
        assert not contains_category(comment, "double-slash")

    def test_root_entry_not_counted(self) -> None:
        assert not contains_category([ROOT, "keyword.operator.ase"], "source")

    def test_comment_deeper_still_counts(self) -> None:
        assert contains_category([ROOT, "meta.block.ase", "comment.line.ase"], "comment")


class TestTypical:
    @pytest.mark.parametrize(
        "scopes",
        [
            [ROOT],
            [ROOT, "keyword.operator.aseOperator.ase"],
            [ROOT, "meta.function-call.ase", "variable.other.ase"],
        ],
    )
    def test_code_is_typical(self, scopes: list[str]) -> None:
        assert is_typical(scopes)

    @pytest.mark.parametrize(
        "scopes",
        [
            [ROOT, "comment.line.double-slash.ase"],
            [ROOT, "comment.block.ase"],
            [ROOT, "string.quoted.double.ase"],
            [ROOT, "meta.embedded.inlinecode.ase"],
            [ROOT, "meta.call.ase", "string.quoted.single.ase"],
            ["text.plain"],
            [],
        ],
    )
    def test_excluded_scopes(self, scopes: list[str]) -> None:
        assert not is_typical(scopes)

    def test_category_helpers(self) -> None:
        assert is_comment([ROOT, "comment.line.ase"])
        assert is_string([ROOT, "string.unquoted.heredoc.ase"])
        assert is_inline_code([ROOT, "meta.embedded.inlinecode.ase"])
        assert not is_comment([ROOT, "string.quoted.double.ase"])
