"""Arrow splitting and curried application.

A function signature ``A -> B -> C`` is split at its top-level arrows into
ordered segments ``[A, B, C]``: the arguments followed by the result. The
arrow is right-associative, so parentheses around a trailing function type
are redundant and are looked through::

    CInt -> (Maybe SkBuff -> (Action SkBuff))

has the segments ``CInt``, ``Maybe SkBuff`` and ``(Action SkBuff)`` and
arity 2.

Segments are trimmed views into the caller's buffer; inner parentheses of an
argument (``((Maybe SkBuff))``) are kept as written.
"""

from __future__ import annotations

from dataclasses import dataclass

from .brackets import is_balanced, pairs, walk
from .view import StringView, make_view
from .wraps import unwrap_range

ARROW = "->"


@dataclass(frozen=True)
class _Segment:
    view: StringView
    # buffer offset where the arrow chain holding this segment ends
    chain_end: int


def _chain(text: str | StringView) -> list[_Segment]:
    view = make_view(text)
    if not is_balanced(view):
        return []
    matches = pairs(view)
    lo, hi, depth = unwrap_range(view, 0, len(view), matches)
    if lo >= hi:
        return []

    # An arrow at depth d is top level in any balanced range whose own
    # contents sit at depth d.
    arrows: dict[int, list[int]] = {}
    for offset, d in walk(view):
        if view.startswith(ARROW, offset):
            arrows.setdefault(d, []).append(offset)

    found: list[_Segment] = []
    tail: _Segment | None = None
    while True:
        cuts = [c for c in arrows.get(depth, ()) if lo <= c and c + len(ARROW) <= hi]
        if not cuts:
            if tail is None:
                tail = _Segment(view.sub(lo, hi - lo), view.start + hi)
            found.append(tail)
            return found
        end = view.start + hi
        seg_lo = lo
        for cut in cuts:
            found.append(_Segment(view.sub(seg_lo, cut - seg_lo).trim(), end))
            seg_lo = cut + len(ARROW)
        tail = _Segment(view.sub(seg_lo, hi - seg_lo).trim(), end)
        # Descend into a parenthesized tail; depth only grows, so each
        # bucket of arrows is filtered once.
        lo, hi, wraps = unwrap_range(view, seg_lo, hi, matches)
        if wraps == 0 or lo >= hi:
            found.append(tail)
            return found
        depth += wraps


def segments(text: str | StringView) -> tuple[StringView, ...]:
    """Argument types followed by the result type.

    Empty for a blank, empty-parens or unbalanced signature.
    """
    return tuple(seg.view for seg in _chain(text))


def arity(text: str | StringView) -> int | None:
    """Number of curried arguments; None when the signature is empty."""
    chain = _chain(text)
    if not chain:
        return None
    return len(chain) - 1


def is_function(text: str | StringView) -> bool:
    n = arity(text)
    return n is not None and n >= 1


def arg(text: str | StringView, n: int) -> StringView:
    """The ``n``-th argument type, or an empty view if there is none."""
    view = make_view(text)
    chain = _chain(view)
    if not 0 <= n < len(chain) - 1:
        return view.nothing()
    return chain[n].view


def bind(text: str | StringView, n: int) -> StringView:
    """The signature left after applying the first ``n`` arguments.

    ``bind(s, 0)`` is the canonical signature, ``bind(s, arity(s))`` the
    result type. Over-application yields an empty view.
    """
    view = make_view(text)
    chain = _chain(view)
    if not 0 <= n < len(chain):
        return view.nothing()
    seg = chain[n]
    return StringView(view.buffer, seg.view.start, seg.chain_end - seg.view.start).trim()
