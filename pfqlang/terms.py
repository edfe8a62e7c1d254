"""Terms of pfq-lang.

A term is a function symbol applied, curried, to arguments:

  - Lit: a data argument carrying its own signature (``CInt``, ``[CInt]``)
  - Fun: a function symbol applied to zero or more arguments
  - Composition: monadic functions chained with ``>->``

Terms are built here, checked by ``pfqlang.check`` and flattened into the
engine descriptor by ``pfqlang.serialization``.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Term AST
# ---------------------------------------------------------------------------

Scalar = int | str


@dataclass(frozen=True)
class Lit:
    """A data argument.

    Example: 42 : CInt          — Lit(42, "CInt")
    Example: "eth0" : String    — Lit("eth0", "String")
    Example: [1, 2] : [CInt]    — Lit((1, 2), "[CInt]")
    """

    value: Scalar | tuple[Scalar, ...]
    signature: str


@dataclass(frozen=True)
class Fun:
    """Application of a function symbol to arguments.

    Example: ip                       — Fun("ip", ())
    Example: forward "eth1"           — Fun("forward", (Lit("eth1", "String"),))
    Example: when is_udp steer_flow   — Fun("when", (Fun("is_udp", ()), Fun("steer_flow", ())))
    """

    name: str
    args: tuple[Arg, ...] = ()


Arg = Lit | Fun


@dataclass(frozen=True)
class Composition:
    """Kleisli composition of monadic functions.

    Example: ip >-> udp >-> steer_flow
    """

    stages: tuple[Fun, ...]

    def __str__(self) -> str:
        return " >-> ".join(render(s) for s in self.stages)


Term = Fun | Composition


def render(term: Arg | Composition) -> str:
    """Haskell-style rendering, for diagnostics."""
    match term:
        case Lit(value=tuple() as values):
            return "[" + ", ".join(repr(v) for v in values) + "]"
        case Lit(value=value):
            return repr(value)
        case Fun(name=name, args=()):
            return name
        case Fun(name=name, args=args):
            parts = [name]
            for a in args:
                text = render(a)
                parts.append(f"({text})" if isinstance(a, Fun) and a.args else text)
            return " ".join(parts)
        case Composition():
            return str(term)
    raise TypeError(f"Unknown term type: {type(term)}")


# ---------------------------------------------------------------------------
# Data types a Lit may carry: name → (Python type, size in bytes).
# String has no fixed size.
# ---------------------------------------------------------------------------

DATA_TYPES: dict[str, tuple[type, int]] = {
    "CChar": (int, 1),
    "CUChar": (int, 1),
    "CShort": (int, 2),
    "CUShort": (int, 2),
    "CInt": (int, 4),
    "CUInt": (int, 4),
    "CLong": (int, 8),
    "CULong": (int, 8),
    "Word8": (int, 1),
    "Word16": (int, 2),
    "Word32": (int, 4),
    "Word64": (int, 8),
    "String": (str, 0),
}
