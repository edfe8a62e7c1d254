"""pfqlang: the type-signature algebra of pfq-lang."""

from .view import StringView, make_view
from .brackets import depths, is_balanced, match_close, pairs, top_level_offsets, walk
from .wraps import count_outer_wraps, remove_extent, simplify, strip_outer_wraps
from .arrows import arg, arity, bind, is_function, segments
from .grammar import (
    DEFAULT_CONSTRUCTORS,
    Apply,
    Arrow,
    Extent,
    TypeExpr,
    TypeName,
    check,
    parse,
)
from .equality import equal
from .signature import Signature
from .symbols import BUILTIN_SYMBOLS, FnSymbol, SymbolTable, builtin_table
from .terms import Composition, Fun, Lit, Term
from .helpers import array, cint, compose, culong, cushort, fn, lit, string
from .check import CheckResult, Diagnostic, Severity, check_term
from .serialization import ComputationDescr, FunctionDescr, serialize, dumps, loads
from .computation import parse_computation
from .result import Ok, Err, Result

__all__ = [
    # Views
    "StringView", "make_view",
    # Brackets
    "depths", "is_balanced", "match_close", "pairs", "top_level_offsets", "walk",
    # Canonical form
    "count_outer_wraps", "remove_extent", "simplify", "strip_outer_wraps",
    # Arrows
    "arg", "arity", "bind", "is_function", "segments",
    # Grammar
    "DEFAULT_CONSTRUCTORS", "Apply", "Arrow", "Extent", "TypeExpr", "TypeName",
    "check", "parse",
    # Equality
    "equal",
    # Signature
    "Signature",
    # Symbols
    "BUILTIN_SYMBOLS", "FnSymbol", "SymbolTable", "builtin_table",
    # Terms
    "Composition", "Fun", "Lit", "Term",
    # Helpers
    "array", "cint", "compose", "culong", "cushort", "fn", "lit", "string",
    # Checking
    "CheckResult", "Diagnostic", "Severity", "check_term",
    # Serialization
    "ComputationDescr", "FunctionDescr", "serialize", "dumps", "loads",
    "parse_computation",
    # Result
    "Ok", "Err", "Result",
]
