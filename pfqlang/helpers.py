"""Builder helpers for pfq-lang terms.

These are the public API for writing computations; prefer them to
constructing Lit/Fun/Composition nodes directly.
"""

from pfqlang.terms import Arg, Composition, Fun, Lit, Scalar


def fn(name: str, *args: Arg) -> Fun:
    return Fun(name=name, args=tuple(args))


def lit(value: Scalar | tuple[Scalar, ...], signature: str) -> Lit:
    return Lit(value=value, signature=signature)


def cint(value: int) -> Lit:
    return Lit(value=value, signature="CInt")


def culong(value: int) -> Lit:
    return Lit(value=value, signature="CULong")


def cushort(value: int) -> Lit:
    return Lit(value=value, signature="CUShort")


def string(value: str) -> Lit:
    return Lit(value=value, signature="String")


def array(values: list[Scalar], elem: str) -> Lit:
    """An extent literal: ``array([1, 2], "CInt")`` has signature ``[CInt]``."""
    return Lit(value=tuple(values), signature=f"[{elem}]")


def compose(*stages: Fun) -> Composition:
    """``compose(f, g, h)`` is ``f >-> g >-> h``."""
    return Composition(stages=tuple(stages))
