"""Type checking of pfq-lang terms against a symbol table.

Arguments are curried into a function one at a time: the i-th argument is
checked against ``arg(signature, i)`` and the term's type is what
``bind(signature, len(args))`` leaves. Checking never raises; every problem
is reported as a Diagnostic.

There is no type inference. A parameter that is a bare type variable
accepts any well-formed argument and is reported as a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .grammar import DEFAULT_CONSTRUCTORS
from .signature import Signature
from .symbols import MONADIC, SymbolTable
from .terms import DATA_TYPES, Composition, Fun, Lit, Term, render

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    check: str
    severity: Severity
    symbol: str | None
    message: str
    path: str | None


@dataclass(frozen=True)
class CheckResult:
    term: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def is_well_typed(self) -> bool:
        return len(self.errors) == 0


@dataclass
class CheckContext:
    table: SymbolTable
    constructors: frozenset[str] = DEFAULT_CONSTRUCTORS
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def error(self, check: str, symbol: str | None, message: str, path: str) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.ERROR, symbol, message, path))

    def warning(self, check: str, symbol: str | None, message: str, path: str) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.WARNING, symbol, message, path))

    def signature(self, text: str) -> Signature:
        return Signature.of(text, self.constructors)


def check_fun(fun: Fun, ctx: CheckContext, path: str) -> Signature | None:
    """Check an application and return its residual signature."""
    sym = ctx.table.get(fun.name)
    if sym is None:
        ctx.error("symbol_declared", fun.name, f"Function '{fun.name}' is not declared", path)
        return None

    sig = ctx.signature(sym.signature)
    if sig.is_empty or not sig.is_valid:
        ctx.error(
            "signature_valid",
            fun.name,
            f"Function '{fun.name}' has malformed signature '{sym.signature}'",
            path,
        )
        return None

    for i, a in enumerate(fun.args):
        param = sig.arg(i)
        if param.is_empty:
            ctx.error(
                "over_application",
                fun.name,
                f"Function '{fun.name}' takes {sig.arity} argument(s), got {len(fun.args)}",
                f"{path}.args[{i}]",
            )
            return None
        check_arg(a, param, fun.name, i, ctx, f"{path}.args[{i}]")

    residual = sig.bind(len(fun.args))
    logger.debug("%s : %s", render(fun), residual)
    return residual


def check_lit(lit: Lit, param: Signature, fn_name: str, ctx: CheckContext, path: str) -> Signature | None:
    lit_sig = ctx.signature(lit.signature)
    if lit_sig.is_empty or not lit_sig.is_valid:
        ctx.error(
            "literal_signature_valid",
            fn_name,
            f"Literal {render(lit)} has malformed signature '{lit.signature}'",
            path,
        )
        return None

    if param.is_extent:
        if not isinstance(lit.value, tuple):
            ctx.error(
                "extent_value",
                fn_name,
                f"Parameter '{param}' expects a sequence, got {render(lit)}",
                path,
            )
            return lit_sig
        elem = param.element().text
        expected = DATA_TYPES.get(elem)
        if expected is not None:
            for j, v in enumerate(lit.value):
                if not isinstance(v, expected[0]):
                    ctx.error(
                        "extent_value",
                        fn_name,
                        f"Element {j} of {render(lit)} is not a {elem}",
                        f"{path}[{j}]",
                    )
    elif isinstance(lit.value, tuple):
        ctx.error(
            "extent_value",
            fn_name,
            f"Parameter '{param}' is not an extent, got {render(lit)}",
            path,
        )
    else:
        expected = DATA_TYPES.get(lit_sig.simplify().text)
        if expected is not None and not isinstance(lit.value, expected[0]):
            ctx.error(
                "literal_value",
                fn_name,
                f"Literal {render(lit)} is not a {lit_sig.simplify()}",
                path,
            )
    return lit_sig


def check_arg(a: Lit | Fun, param: Signature, fn_name: str, index: int, ctx: CheckContext, path: str) -> None:
    if isinstance(a, Lit):
        actual = check_lit(a, param, fn_name, ctx, path)
    else:
        actual = check_fun(a, ctx, path)
    if actual is None:
        return

    if param.is_variable:
        ctx.warning(
            "polymorphic_param",
            fn_name,
            f"Argument {index} of '{fn_name}' binds type variable '{param}' to '{actual}' unchecked",
            path,
        )
        return

    if not actual.equals(param):
        ctx.error(
            "arg_type",
            fn_name,
            f"Argument {index} of '{fn_name}' expected '{param}', got '{actual}'",
            path,
        )


def check_term(
    term: Term,
    table: SymbolTable,
    *,
    expect: str | None = MONADIC,
    constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
) -> CheckResult:
    """Check ``term`` and, unless ``expect`` is None, that each stage has that type."""
    ctx = CheckContext(table=table, constructors=frozenset(constructors))

    stages = term.stages if isinstance(term, Composition) else (term,)
    if not stages:
        ctx.error("stage_monadic", None, "Composition has no stages", "stages")

    for i, stage in enumerate(stages):
        path = f"stages[{i}]" if isinstance(term, Composition) else "term"
        residual = check_fun(stage, ctx, path)
        if residual is None or expect is None:
            continue
        if not residual.equals(expect):
            ctx.error(
                "stage_monadic",
                stage.name,
                f"'{render(stage)}' has type '{residual}', expected '{expect}'",
                path,
            )

    # errors first, then by check name
    def sort_key(d: Diagnostic) -> tuple[int, str, str]:
        severity_order = 0 if d.severity == Severity.ERROR else 1
        return (severity_order, d.check, d.path or "")

    return CheckResult(render(term), tuple(sorted(ctx.diagnostics, key=sort_key)))
