"""Top-down parsing of pfq-lang type signatures.

Grammar::

    Type  ::= Base "->" Type          (right-associative)
            | Base
    Base  ::= "(" Type ")"
            | "[" Type "]"            (array extent)
            | Ctor Base               (Maybe, Action, ...)
            | Ident

Identifiers are maximal runs of ASCII alphanumerics. Whitespace is
insignificant except between a constructor and an identifier argument,
where it is the only thing telling ``Maybe CInt`` from ``MaybeCInt``.

Parentheses build no node: they only group, so the tree of ``((CInt))`` is
the tree of ``CInt``. Leaves keep views into the parsed buffer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .view import IDENT_CHARS, WHITESPACE, StringView, make_view

logger = logging.getLogger(__name__)

DEFAULT_CONSTRUCTORS: frozenset[str] = frozenset({"Maybe", "Action"})


# ---------------------------------------------------------------------------
# Type tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypeName:
    """A base type (``CInt``, ``SkBuff``) or a type variable (``a``)."""

    token: StringView

    @property
    def is_variable(self) -> bool:
        return self.token[0].islower()


@dataclass(frozen=True)
class Apply:
    """A single-argument constructor application: ``Maybe SkBuff``."""

    ctor: StringView
    arg: TypeExpr


@dataclass(frozen=True)
class Extent:
    """An array type: ``[CInt]``."""

    elem: TypeExpr


@dataclass(frozen=True)
class Arrow:
    """A function type ``param -> result``; ``result`` may itself be an Arrow."""

    param: TypeExpr
    result: TypeExpr


TypeExpr = TypeName | Apply | Extent | Arrow


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


@dataclass
class _Group:
    # None for the whole signature, otherwise "(" or "["
    opener: str | None
    params: list[TypeExpr] = field(default_factory=list)

    def fold(self, result: TypeExpr) -> TypeExpr:
        # the arrow is right-associative
        for param in reversed(self.params):
            result = Arrow(param, result)
        return result


@dataclass(frozen=True)
class _Pending:
    ctor: StringView


class _Parser:
    """Shift-reduce parser over an explicit stack.

    The stack holds open groups (``_Group``) and constructors still waiting
    for their argument (``_Pending``), so nesting depth is bounded by memory
    rather than by the interpreter stack.
    """

    def __init__(self, view: StringView, constructors: frozenset[str]) -> None:
        self.view = view
        self.constructors = constructors
        self.pos = 0
        self.error: str | None = None

    def fail(self, message: str) -> None:
        if self.error is None:
            self.error = f"{message} at offset {self.pos}"

    def skip_ws(self) -> None:
        while self.pos < len(self.view) and self.view[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self) -> str | None:
        if self.pos < len(self.view):
            return self.view[self.pos]
        return None

    def at_end(self) -> bool:
        self.skip_ws()
        return self.pos >= len(self.view)

    def parse_type(self) -> TypeExpr | None:
        stack: list[_Group | _Pending] = [_Group(opener=None)]
        while True:
            value = self.parse_operand(stack)
            if value is None:
                return None
            # Reduce until a frame needs another operand.
            while True:
                top = stack[-1]
                if isinstance(top, _Pending):
                    stack.pop()
                    value = Apply(top.ctor, value)
                    continue
                self.skip_ws()
                if self.view.startswith("->", self.pos):
                    self.pos += 2
                    top.params.append(value)
                    break
                value = top.fold(value)
                stack.pop()
                if top.opener is None:
                    return value
                closer = ")" if top.opener == "(" else "]"
                if self.peek() != closer:
                    self.fail(f"expected {closer!r}")
                    return None
                self.pos += 1
                if top.opener == "[":
                    value = Extent(value)

    def parse_operand(self, stack: list[_Group | _Pending]) -> TypeExpr | None:
        """Push groups and constructors until a name completes an operand."""
        while True:
            self.skip_ws()
            ch = self.peek()
            if ch is None:
                self.fail("unexpected end of signature")
                return None
            if ch == "(" or ch == "[":
                self.pos += 1
                stack.append(_Group(opener=ch))
                continue
            if ch not in IDENT_CHARS:
                self.fail(f"unexpected {ch!r}")
                return None
            start = self.pos
            while self.pos < len(self.view) and self.view[self.pos] in IDENT_CHARS:
                self.pos += 1
            token = self.view.sub(start, self.pos - start)
            if str(token) not in self.constructors:
                return TypeName(token)
            stack.append(_Pending(token))


def parse(
    text: str | StringView,
    *,
    constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
) -> TypeExpr | None:
    """Parse a non-empty signature into its type tree.

    Returns None for blank input and for anything the grammar rejects.
    """
    view = make_view(text).trim()
    if view.is_empty:
        return None
    parser = _Parser(view, frozenset(constructors))
    tree = parser.parse_type()
    if tree is not None and not parser.at_end():
        parser.fail("trailing input")
        tree = None
    if tree is None:
        logger.debug("Rejected signature %r: %s", str(view), parser.error)
    return tree


def check(
    text: str | StringView,
    *,
    constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
) -> bool:
    """True iff ``text`` is a well-formed signature. The empty signature is."""
    view = make_view(text).trim()
    if view.is_empty:
        return True
    return parse(view, constructors=constructors) is not None
