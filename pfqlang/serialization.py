"""Serialization of checked terms into the engine's computation descriptor.

A computation is flattened into a list of function descriptors:

    entry_point      index of the first stage (always 0)
    functions[i]     symbol, declared signature, MAX_ARGS argument slots,
                     and ``next``: the index of the following stage, -1 at
                     the end of the composition

A data argument fills its slot with the value, the size of one element in
bytes and ``nelem`` (-1 for a scalar, the element count for an extent). A
function argument is serialized after the function that takes it and its
slot holds that descriptor's index.

Every descriptor serializes to a dict with a "type" discriminator field.
Round-trip: from_json(to_json(x)) == x for all x.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .check import check_term
from .grammar import DEFAULT_CONSTRUCTORS
from .signature import Signature
from .symbols import SymbolTable, builtin_table
from .terms import DATA_TYPES, Composition, Fun, Lit, Scalar, Term

logger = logging.getLogger(__name__)

MAX_ARGS = 8


class ArgKind(Enum):
    EMPTY = "empty"
    DATA = "data"
    FUNCTION = "function"


@dataclass(frozen=True)
class ArgDescr:
    kind: ArgKind = ArgKind.EMPTY
    value: Scalar | tuple[Scalar, ...] | None = None
    size: int = 0
    nelem: int = 0


@dataclass(frozen=True)
class FunctionDescr:
    symbol: str
    signature: str
    args: tuple[ArgDescr, ...]
    next: int = -1


@dataclass(frozen=True)
class ComputationDescr:
    entry_point: int
    functions: tuple[FunctionDescr, ...]

    @property
    def size(self) -> int:
        return len(self.functions)


# ---------------------------------------------------------------------------
# Term → descriptor
# ---------------------------------------------------------------------------


def _data_size(lit: Lit) -> int:
    elem = Signature.of(lit.signature).element().text
    match DATA_TYPES.get(elem):
        case (_, 0):
            # variable length: the longest string, NUL terminated
            values = lit.value if isinstance(lit.value, tuple) else (lit.value,)
            return max((len(str(v).encode()) + 1 for v in values), default=1)
        case (_, size):
            return size
        case None:
            return 0
    return 0


class _Layout:
    def __init__(self, table: SymbolTable) -> None:
        self.table = table
        self.functions: list[FunctionDescr | None] = []

    def place(self, fun: Fun, next_index: int = -1) -> int:
        index = len(self.functions)
        self.functions.append(None)

        slots: list[ArgDescr] = []
        for a in fun.args:
            match a:
                case Lit(value=tuple() as values):
                    slots.append(ArgDescr(ArgKind.DATA, values, _data_size(a), len(values)))
                case Lit(value=value):
                    slots.append(ArgDescr(ArgKind.DATA, value, _data_size(a), -1))
                case Fun():
                    slots.append(ArgDescr(ArgKind.FUNCTION, self.place(a), 0, -1))
        slots.extend(ArgDescr() for _ in range(MAX_ARGS - len(slots)))

        sym = self.table.get(fun.name)
        assert sym is not None
        self.functions[index] = FunctionDescr(fun.name, sym.signature, tuple(slots), next_index)
        return index

    def place_stages(self, stages: tuple[Fun, ...]) -> None:
        # next indices are only known once the following stage is placed
        previous: int | None = None
        for stage in stages:
            index = self.place(stage)
            if previous is not None:
                prev = self.functions[previous]
                assert prev is not None
                self.functions[previous] = FunctionDescr(
                    prev.symbol, prev.signature, prev.args, index
                )
            previous = index


def _too_many_args(fun: Fun) -> Fun | None:
    if len(fun.args) > MAX_ARGS:
        return fun
    for a in fun.args:
        if isinstance(a, Fun) and (bad := _too_many_args(a)) is not None:
            return bad
    return None


def serialize(
    term: Term,
    table: SymbolTable | None = None,
    *,
    constructors: frozenset[str] = DEFAULT_CONSTRUCTORS,
) -> ComputationDescr:
    """Check ``term`` and flatten it into a ComputationDescr.

    Raises ValueError when the term is ill-typed or does not fit the
    descriptor.
    """
    table = table if table is not None else builtin_table()
    result = check_term(term, table, constructors=constructors)
    if not result.is_well_typed:
        messages = "; ".join(f"[{d.check}] {d.message}" for d in result.errors)
        raise ValueError(f"Cannot serialize ill-typed term '{result.term}': {messages}")

    stages = term.stages if isinstance(term, Composition) else (term,)
    for stage in stages:
        bad = _too_many_args(stage)
        if bad is not None:
            raise ValueError(f"Function '{bad.name}' has more than {MAX_ARGS} arguments")

    layout = _Layout(table)
    layout.place_stages(stages)
    functions = tuple(f for f in layout.functions if f is not None)
    logger.debug("Serialized '%s' into %d descriptors", result.term, len(functions))
    return ComputationDescr(entry_point=0, functions=functions)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def arg_to_json(a: ArgDescr) -> dict[str, Any]:
    value = list(a.value) if isinstance(a.value, tuple) else a.value
    return {
        "type": "arg",
        "kind": a.kind.value,
        "value": value,
        "size": a.size,
        "nelem": a.nelem,
    }


def arg_from_json(d: dict[str, Any]) -> ArgDescr:
    if d.get("type") != "arg":
        raise ValueError(f"Unknown argument type: {d.get('type')}")
    value = d["value"]
    return ArgDescr(
        kind=ArgKind(d["kind"]),
        value=tuple(value) if isinstance(value, list) else value,
        size=d["size"],
        nelem=d["nelem"],
    )


def function_to_json(f: FunctionDescr) -> dict[str, Any]:
    return {
        "type": "function",
        "symbol": f.symbol,
        "signature": f.signature,
        "args": [arg_to_json(a) for a in f.args],
        "next": f.next,
    }


def function_from_json(d: dict[str, Any]) -> FunctionDescr:
    if d.get("type") != "function":
        raise ValueError(f"Unknown function type: {d.get('type')}")
    args = tuple(arg_from_json(a) for a in d["args"])
    if len(args) != MAX_ARGS:
        raise ValueError(f"Function '{d['symbol']}' has {len(args)} slots, expected {MAX_ARGS}")
    return FunctionDescr(
        symbol=d["symbol"],
        signature=d["signature"],
        args=args,
        next=d["next"],
    )


def computation_to_json(c: ComputationDescr) -> dict[str, Any]:
    return {
        "type": "computation",
        "entry_point": c.entry_point,
        "functions": [function_to_json(f) for f in c.functions],
    }


def computation_from_json(d: dict[str, Any]) -> ComputationDescr:
    if d.get("type") != "computation":
        raise ValueError(f"Unknown computation type: {d.get('type')}")
    return ComputationDescr(
        entry_point=d["entry_point"],
        functions=tuple(function_from_json(f) for f in d["functions"]),
    )


def dumps(c: ComputationDescr) -> str:
    return json.dumps(computation_to_json(c), indent=2)


def loads(s: str) -> ComputationDescr:
    return computation_from_json(json.loads(s))
