"""Scope predicates over classifier output (outermost scope first)."""

from __future__ import annotations

from collections.abc import Sequence

from aselint.models.table import DEFAULT_ROOT_SCOPE

COMMENT = "comment"
QUOTED = "quoted"
STRING = "string"
INLINE_CODE = "inlinecode"

_COMMENT_KINDS = ("line", "block")


def _segments(scope: str) -> list[str]:
    return scope.split(".")


def is_root(scopes: Sequence[str], root: str = DEFAULT_ROOT_SCOPE) -> bool:
    """True iff the outermost scope is the language root."""
    return len(scopes) > 0 and scopes[0] == root


def is_inline_code_scope(scope: str) -> bool:
    return INLINE_CODE in _segments(scope)


def is_comment_scope(scope: str) -> bool:
    segments = _segments(scope)
    return COMMENT in segments and any(kind in segments for kind in _COMMENT_KINDS)


def contains_category(
    scopes: Sequence[str], category: str, root: str = DEFAULT_ROOT_SCOPE
) -> bool:
    """Whether any scope below the root carries ``category`` as a dotted segment.

    An inline-code or comment scope directly under the root masks everything
    nested inside it: only the ``inlinecode`` or ``comment`` category matches.
    """
    if not is_root(scopes, root) or len(scopes) < 2:
        return False

    outer = scopes[1]
    if is_inline_code_scope(outer):
        return category == INLINE_CODE
    if is_comment_scope(outer):
        return category == COMMENT

    return any(category in _segments(scope) for scope in scopes[1:])


def is_comment(scopes: Sequence[str], root: str = DEFAULT_ROOT_SCOPE) -> bool:
    return contains_category(scopes, COMMENT, root)


def is_string(scopes: Sequence[str], root: str = DEFAULT_ROOT_SCOPE) -> bool:
    return contains_category(scopes, QUOTED, root) or contains_category(scopes, STRING, root)


def is_inline_code(scopes: Sequence[str], root: str = DEFAULT_ROOT_SCOPE) -> bool:
    return contains_category(scopes, INLINE_CODE, root)


def is_typical(scopes: Sequence[str], root: str = DEFAULT_ROOT_SCOPE) -> bool:
    """A lintable position: ASE code outside comments, strings and inline code."""
    return (
        is_root(scopes, root)
        and not is_inline_code(scopes, root)
        and not is_comment(scopes, root)
        and not is_string(scopes, root)
    )
