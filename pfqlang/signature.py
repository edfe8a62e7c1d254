"""Signatures of pfq-lang functions.

A signature is a type written in the pfq-lang type grammar, such as::

    CInt -> (Maybe SkBuff) -> Action SkBuff

Signature wraps a StringView and exposes the whole signature algebra as
methods. Every view-valued method returns a Signature over the same buffer.

The constructor set is a closed list; operations that parse take it from
the Signature, so a Signature built with a custom set stays consistent.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from . import arrows, equality, grammar, wraps
from .grammar import DEFAULT_CONSTRUCTORS, TypeExpr
from .view import StringView, make_view


@dataclass(frozen=True)
class Signature:
    """A borrowed view of a type signature.

    Examples:
        Signature.of("SkBuff -> Action SkBuff").arity          → 1
        Signature.of("CInt -> SkBuff -> Bool").arg(0)          → CInt
        Signature.of("CInt -> SkBuff -> Bool").bind(1)         → SkBuff -> Bool
        Signature.of("(CInt)").equals("CInt")                  → True
    """

    view: StringView
    constructors: frozenset[str] = field(default=DEFAULT_CONSTRUCTORS, compare=False)

    @classmethod
    def of(
        cls,
        text: str | StringView,
        constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
    ) -> Signature:
        return cls(make_view(text), frozenset(constructors))

    def _derive(self, view: StringView) -> Signature:
        return Signature(view, self.constructors)

    @property
    def text(self) -> str:
        return str(self.view)

    def __str__(self) -> str:
        return self.text

    @property
    def is_empty(self) -> bool:
        return self.view.trim().is_empty

    # -- canonical form -----------------------------------------------------

    @property
    def outer_wraps(self) -> int:
        return wraps.count_outer_wraps(self.view)

    def simplify(self) -> Signature:
        return self._derive(wraps.strip_outer_wraps(self.view))

    def remove_extent(self) -> Signature:
        return self._derive(wraps.remove_extent(self.view))

    # -- arrows -------------------------------------------------------------

    @property
    def arity(self) -> int | None:
        return arrows.arity(self.view)

    @property
    def is_function(self) -> bool:
        return arrows.is_function(self.view)

    @property
    def segments(self) -> tuple[Signature, ...]:
        return tuple(self._derive(v) for v in arrows.segments(self.view))

    def arg(self, n: int) -> Signature:
        return self._derive(arrows.arg(self.view, n))

    def bind(self, n: int) -> Signature:
        return self._derive(arrows.bind(self.view, n))

    @property
    def result(self) -> Signature:
        """The type left once every argument is applied."""
        n = self.arity
        if n is None:
            return self._derive(self.view.nothing())
        return self.bind(n)

    # -- grammar ------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return grammar.check(self.view, constructors=self.constructors)

    def tree(self) -> TypeExpr | None:
        return grammar.parse(self.view, constructors=self.constructors)

    @property
    def is_extent(self) -> bool:
        canonical = self.simplify()
        return canonical.remove_extent().view != canonical.view

    def element(self) -> Signature:
        """Element type of an extent, looking through redundant parentheses.

        A signature that is not an extent is returned in canonical form.
        """
        return self.simplify().remove_extent().simplify()

    @property
    def is_variable(self) -> bool:
        """True for a bare type variable such as ``a``."""
        match self.tree():
            case grammar.TypeName() as name:
                return name.is_variable
            case _:
                return False

    def equals(self, other: Signature | str | StringView) -> bool:
        if isinstance(other, Signature):
            other = other.view
        return equality.equal(self.view, other, constructors=self.constructors)
