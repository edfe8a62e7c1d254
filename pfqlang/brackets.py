"""Bracket-depth scanning.

``(`` and ``[`` share a single depth counter: callers only care how deeply a
character is nested, not by which kind of bracket. An opening bracket is
reported at the depth outside it, and its matching close at the same depth.

Every function makes a single pass, linear in the view length, and never index outside the view.
Unbalanced input is a scan failure (``None`` / ``False``), never an exception.
"""

from __future__ import annotations

from collections.abc import Iterator

from .view import StringView

OPEN = frozenset("([")
CLOSE = frozenset(")]")


def walk(view: StringView) -> Iterator[tuple[int, int]]:
    """Yield ``(offset, depth)`` for every character of ``view``.

    Depth may go negative on unbalanced input; check ``is_balanced`` first
    when that matters.
    """
    depth = 0
    for offset in range(len(view)):
        ch = view[offset]
        if ch in CLOSE:
            depth -= 1
        yield offset, depth
        if ch in OPEN:
            depth += 1


def is_balanced(view: StringView) -> bool:
    depth = 0
    for offset in range(len(view)):
        ch = view[offset]
        if ch in OPEN:
            depth += 1
        elif ch in CLOSE:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def depths(view: StringView) -> tuple[int, ...] | None:
    """Depth at each offset of ``view``, or None if the brackets don't balance."""
    if not is_balanced(view):
        return None
    return tuple(depth for _, depth in walk(view))


def match_close(view: StringView, offset: int) -> int | None:
    """Offset of the bracket closing the one opened at ``offset``.

    Returns None when ``offset`` does not hold an opening bracket or the
    bracket is never closed.
    """
    if not 0 <= offset < len(view) or view[offset] not in OPEN:
        return None
    depth = 0
    for pos in range(offset, len(view)):
        ch = view[pos]
        if ch in OPEN:
            depth += 1
        elif ch in CLOSE:
            depth -= 1
            if depth == 0:
                return pos
    return None


def pairs(view: StringView) -> dict[int, int]:
    """Map each opening bracket that gets closed to its matching close.

    One pass over the view; ``pairs(view).get(offset)`` agrees with
    ``match_close(view, offset)`` for every offset.
    """
    found: dict[int, int] = {}
    stack: list[int] = []
    for offset, ch in enumerate(str(view)):
        if ch in OPEN:
            stack.append(offset)
        elif ch in CLOSE and stack:
            found[stack.pop()] = offset
    return found


def top_level_offsets(view: StringView, token: str) -> list[int]:
    """Offsets where ``token`` starts at depth 0, left to right.

    Occurrences do not overlap.
    """
    found: list[int] = []
    skip_until = 0
    for offset, depth in walk(view):
        if offset < skip_until or depth != 0:
            continue
        if view.startswith(token, offset):
            found.append(offset)
            skip_until = offset + len(token)
    return found
