"""Structural equality of signatures.

Two signatures are equal when they parse to the same type tree. Parsing
already discards whitespace and redundant parentheses at every level, and
the arrow is right-associative, so::

    CInt->String -> SkBuff -> Action SkBuff
    (( CInt -> (String) -> (SkBuff -> (Action SkBuff)) ))

are the same signature, while ``Maybe CInt``, ``MaybeCInt`` and
``Maybe -> CInt`` are three different ones.
"""

from __future__ import annotations

from collections.abc import Iterable

from .grammar import DEFAULT_CONSTRUCTORS, Apply, Arrow, Extent, TypeExpr, TypeName, parse
from .view import StringView, make_view
from .wraps import strip_outer_wraps


def same_tree(a: TypeExpr, b: TypeExpr) -> bool:
    # Explicit work list: trees can be as deep as the input is long.
    pending: list[tuple[TypeExpr, TypeExpr]] = [(a, b)]
    while pending:
        match pending.pop():
            case Arrow() as x, Arrow() as y:
                pending.append((x.param, y.param))
                pending.append((x.result, y.result))
            case Apply() as x, Apply() as y:
                if not x.ctor.same_text(y.ctor):
                    return False
                pending.append((x.arg, y.arg))
            case Extent() as x, Extent() as y:
                pending.append((x.elem, y.elem))
            case TypeName() as x, TypeName() as y:
                if not x.token.same_text(y.token):
                    return False
            case _:
                return False
    return True


def equal(
    lhs: str | StringView,
    rhs: str | StringView,
    *,
    constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
) -> bool:
    """True iff ``lhs`` and ``rhs`` denote the same type.

    Empty signatures (blank or ``()``) are equal to each other only. A span
    the grammar rejects is equal only to a span with the same canonical
    text, so equality stays reflexive on every input.
    """
    a_view = strip_outer_wraps(make_view(lhs))
    b_view = strip_outer_wraps(make_view(rhs))
    if a_view.is_empty or b_view.is_empty:
        return a_view.is_empty and b_view.is_empty

    ctors = frozenset(constructors)
    a_tree = parse(a_view, constructors=ctors)
    b_tree = parse(b_view, constructors=ctors)
    if a_tree is None or b_tree is None:
        return a_tree is None and b_tree is None and a_view.same_text(b_view)
    return same_tree(a_tree, b_tree)
