import argparse
import logging
import sys
from collections.abc import Sequence

from pfqlang.computation import parse_computation
from pfqlang.config import LangConfig
from pfqlang.reference import generate_reference
from pfqlang.result import Err, Ok
from pfqlang.serialization import dumps, serialize
from pfqlang.signature import Signature
from pfqlang.symbols import builtin_table


def handle_check(signatures: Sequence[str], config: LangConfig) -> int:
    """Print one verdict line per signature; fail if any is malformed."""
    failures = 0
    for text in signatures:
        ok = Signature.of(text, config.constructors).is_valid
        print(f"{'ok ' if ok else 'BAD'}  {text}")
        if not ok:
            failures += 1
    return 1 if failures else 0


def handle_inspect(text: str, config: LangConfig) -> int:
    sig = Signature.of(text, config.constructors)
    arity = sig.arity
    print(f"signature:   {text}")
    print(f"valid:       {'yes' if sig.is_valid else 'no'}")
    print(f"canonical:   {sig.simplify()}")
    print(f"outer wraps: {sig.outer_wraps}")
    print(f"arity:       {arity if arity is not None else 'undefined'}")
    for i, seg in enumerate(sig.segments):
        label = "result" if arity is not None and i == arity else f"arg {i}"
        print(f"  {label:<8} {seg}")
    return 0 if sig.is_valid else 1


def handle_equal(lhs: str, rhs: str, config: LangConfig) -> int:
    same = Signature.of(lhs, config.constructors).equals(rhs)
    print("equal" if same else "different")
    return 0 if same else 1


def handle_bind(text: str, n: int, config: LangConfig) -> int:
    residual = Signature.of(text, config.constructors).bind(n)
    if residual.is_empty:
        print(f"Cannot bind {n} argument(s) to '{text}'", file=sys.stderr)
        return 1
    print(residual)
    return 0


def handle_compile(program: str, config: LangConfig, *, as_json: bool) -> int:
    table = builtin_table()
    match parse_computation(program, table):
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return 1
        case Ok(comp):
            pass

    try:
        descr = serialize(comp, table, constructors=config.constructors)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(dumps(descr))
        return 0

    print(f"{comp}  ({descr.size} function(s), entry point {descr.entry_point})")
    for i, f in enumerate(descr.functions):
        nxt = f"-> {f.next}" if f.next >= 0 else "end"
        print(f"  [{i}] {f.symbol:<16} :: {f.signature:<40} {nxt}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pfqlang",
        description="Inspect and check pfq-lang type signatures",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log debug output (overrides PFQ_LANG_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check", help="Validate one or more signatures against the type grammar."
    )
    check_parser.add_argument("signatures", nargs="+", metavar="SIG")

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the canonical form, arity and segments of a signature."
    )
    inspect_parser.add_argument("signature", metavar="SIG")

    equal_parser = subparsers.add_parser(
        "equal", help="Compare two signatures structurally."
    )
    equal_parser.add_argument("lhs", metavar="A")
    equal_parser.add_argument("rhs", metavar="B")

    bind_parser = subparsers.add_parser(
        "bind", help="Print the signature left after binding N arguments."
    )
    bind_parser.add_argument("signature", metavar="SIG")
    bind_parser.add_argument("n", type=int, metavar="N")

    compile_parser = subparsers.add_parser(
        "compile",
        help="Type check a computation such as 'ip >-> udp >-> steer_flow' and print its descriptor.",
    )
    compile_parser.add_argument("program", metavar="PROG")
    compile_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the descriptor as JSON.",
    )

    subparsers.add_parser(
        "reference",
        help="Print the Markdown language reference.",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match LangConfig.from_env():
        case Ok(config):
            pass
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "check":
            return handle_check(args.signatures, config)
        case "inspect":
            return handle_inspect(args.signature, config)
        case "equal":
            return handle_equal(args.lhs, args.rhs, config)
        case "bind":
            return handle_bind(args.signature, args.n, config)
        case "compile":
            return handle_compile(args.program, config, as_json=args.json)
        case "reference":
            print(generate_reference(constructors=config.constructors), end="")
            return 0
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
