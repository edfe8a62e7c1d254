"""Markdown language reference for pfq-lang signatures.

Run: python -m pfqlang.reference > LANGUAGE_REFERENCE.md
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import jinja2

from .grammar import DEFAULT_CONSTRUCTORS
from .symbols import SymbolTable, builtin_table

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def generate_reference(
    table: SymbolTable | None = None,
    constructors: Iterable[str] = DEFAULT_CONSTRUCTORS,
) -> str:
    table = table if table is not None else builtin_table()
    ctors = frozenset(constructors)
    rows = []
    for sym in sorted(table, key=lambda s: s.name):
        sig = sym.sig
        rows.append(
            {
                "name": sym.name,
                "signature": sym.signature,
                "arity": sig.arity,
                "result": sig.result.text,
            }
        )
    return _env.get_template("reference.md.j2").render(
        constructors=sorted(ctors),
        symbols=rows,
        invalid=[s.name for s in table.validate(ctors)],
    )


if __name__ == "__main__":
    print(generate_reference(), end="")
