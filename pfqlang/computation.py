"""Computations written as strings.

Only compositions of argument-less monadic functions are supported::

    ip >-> udp >-> steer_flow

Each stage is looked up in the symbol table; type checking is left to
``pfqlang.check`` (or ``serialize``, which checks before flattening).
"""

from __future__ import annotations

from .result import Err, Ok, Result
from .symbols import SymbolTable
from .terms import Composition, Fun
from .view import IDENT_CHARS

KLEISLI = ">->"


def parse_computation(text: str, table: SymbolTable) -> Result[Composition, ValueError]:
    stages: list[Fun] = []
    for i, part in enumerate(text.split(KLEISLI)):
        name = part.strip()
        match name:
            case "":
                return Err(ValueError(f"Stage {i} of {text!r} is empty"))
            case str() if not all(c in IDENT_CHARS or c == "_" for c in name):
                return Err(
                    ValueError(f"Stage {i} ({name!r}) is not a bare function name")
                )
            case str() if name not in table:
                return Err(ValueError(f"Stage {i}: unknown function '{name}'"))
            case _:
                stages.append(Fun(name))
    return Ok(Composition(tuple(stages)))
