"""Canonicalization of signature views.

Redundant enclosing parentheses carry no meaning: ``((CInt -> Bool))`` is
``CInt -> Bool``. Every higher-level operation starts from the view returned
by ``strip_outer_wraps``.

An array extent ``[T]`` is a different thing: it is stripped only on request
(``remove_extent``) and only one level deep.
"""

from __future__ import annotations

from .brackets import match_close, pairs
from .view import WHITESPACE, StringView, make_view


def _trim(view: StringView, lo: int, hi: int) -> tuple[int, int]:
    while lo < hi and view[lo] in WHITESPACE:
        lo += 1
    while hi > lo and view[hi - 1] in WHITESPACE:
        hi -= 1
    return lo, hi


def unwrap_range(
    view: StringView, lo: int, hi: int, matches: dict[int, int]
) -> tuple[int, int, int]:
    """Strip every layer wrapping ``view[lo:hi]``.

    ``matches`` is ``pairs(view)``. Returns the trimmed interior bounds and
    the number of layers removed. The bounds only move inward, so the cost
    is linear however many layers there are.
    """
    lo, hi = _trim(view, lo, hi)
    wraps = 0
    while hi - lo >= 2 and view[lo] == "(" and matches.get(lo) == hi - 1:
        lo, hi = _trim(view, lo + 1, hi - 1)
        wraps += 1
    return lo, hi, wraps


def _unwrap(view: StringView) -> tuple[StringView, int]:
    lo, hi, wraps = unwrap_range(view, 0, len(view), pairs(view))
    return view.sub(lo, hi - lo), wraps


def count_outer_wraps(text: str | StringView) -> int:
    """Number of parenthesis layers enclosing the whole trimmed view.

    >>> count_outer_wraps("  ((CInt -> Bool) )")
    2
    """
    return _unwrap(make_view(text))[1]


def strip_outer_wraps(text: str | StringView) -> StringView:
    """The trimmed interior left after removing every enclosing layer."""
    return _unwrap(make_view(text))[0]


simplify = strip_outer_wraps


def remove_extent(text: str | StringView) -> StringView:
    """Strip a single ``[...]`` pair enclosing the whole trimmed view."""
    view = make_view(text).trim()
    if view.length >= 2 and view[0] == "[" and match_close(view, 0) == view.length - 1:
        return view.sub(1, view.length - 2).trim()
    return view
