"""pfq-lang function symbols.

A symbol is a function name together with its declared signature. The
symbol table is what the term checker consults when it curries arguments
into a function one at a time.

The builtin catalog mirrors the default pfq-lang library:

    monadic functions   SkBuff -> Action SkBuff     (ip, udp, steer_flow, ...)
    predicates          SkBuff -> Bool              (is_ip, is_tcp, ...)
    parametric          CInt -> SkBuff -> ...       (mark, has_port, ...)
    combinators         (SkBuff -> Bool) -> ...     (filter, when, ...)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .signature import Signature

MONADIC = "SkBuff -> Action SkBuff"
PREDICATE = "SkBuff -> Bool"
PROPERTY = "SkBuff -> CULong"


@dataclass(frozen=True)
class FnSymbol:
    """A pfq-lang function.

    Examples:
        ip       : SkBuff -> Action SkBuff
        has_port : CUShort -> SkBuff -> Bool
        when     : (SkBuff -> Bool) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff
    """

    name: str
    signature: str

    @property
    def sig(self) -> Signature:
        return Signature.of(self.signature)

    @property
    def arity(self) -> int | None:
        return self.sig.arity


@dataclass(frozen=True)
class SymbolTable:
    """Function symbols keyed by name."""

    symbols: Mapping[str, FnSymbol]

    @classmethod
    def from_symbols(cls, symbols: Iterable[FnSymbol]) -> SymbolTable:
        return cls(MappingProxyType({s.name: s for s in symbols}))

    def get(self, name: str) -> FnSymbol | None:
        return self.symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __iter__(self) -> Iterator[FnSymbol]:
        return iter(self.symbols.values())

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self.symbols.keys())

    def validate(self, constructors: Iterable[str] | None = None) -> tuple[FnSymbol, ...]:
        """Symbols whose declared signature is not well-formed."""
        bad = []
        for sym in self:
            sig = sym.sig if constructors is None else Signature.of(sym.signature, constructors)
            if not sig.is_valid or sig.is_empty:
                bad.append(sym)
        return tuple(bad)


def _monadic(*names: str) -> list[FnSymbol]:
    return [FnSymbol(n, MONADIC) for n in names]


def _predicates(*names: str) -> list[FnSymbol]:
    return [FnSymbol(n, PREDICATE) for n in names]


BUILTIN_SYMBOLS: tuple[FnSymbol, ...] = (
    # protocol filters
    *_monadic("ip", "ip6", "udp", "tcp", "icmp", "vlan", "flow", "rtp", "no_frag", "no_more_frag"),
    # steering
    *_monadic(
        "steer_rrobin", "steer_link", "steer_vlan", "steer_ip", "steer_ip6",
        "steer_flow", "steer_rtp", "steer_mac",
    ),
    # forwarding and sinks
    *_monadic("kernel", "broadcast", "drop", "unit", "log_packet", "log_buff"),
    FnSymbol("forward", "String -> SkBuff -> Action SkBuff"),
    FnSymbol("forwardIO", "String -> SkBuff -> Action SkBuff"),
    FnSymbol("bridge", "String -> SkBuff -> Action SkBuff"),
    FnSymbol("tee", "String -> (SkBuff -> Bool) -> SkBuff -> Action SkBuff"),
    FnSymbol("tap", "String -> (SkBuff -> Bool) -> SkBuff -> Action SkBuff"),
    FnSymbol("log_msg", "String -> SkBuff -> Action SkBuff"),
    # classes, marks and counters
    FnSymbol("class", "CInt -> SkBuff -> Action SkBuff"),
    FnSymbol("deliver", "CInt -> SkBuff -> Action SkBuff"),
    FnSymbol("mark", "CULong -> SkBuff -> Action SkBuff"),
    FnSymbol("put_state", "CULong -> SkBuff -> Action SkBuff"),
    FnSymbol("inc", "CInt -> SkBuff -> Action SkBuff"),
    FnSymbol("dec", "CInt -> SkBuff -> Action SkBuff"),
    FnSymbol("vlan_id_filter", "[CInt] -> SkBuff -> Action SkBuff"),
    FnSymbol("steer_net", "Word32 -> CInt -> CInt -> SkBuff -> Action SkBuff"),
    FnSymbol("steer_field", "CInt -> CInt -> SkBuff -> Action SkBuff"),
    # predicates
    *_predicates(
        "is_ip", "is_ip6", "is_udp", "is_tcp", "is_icmp", "is_flow", "is_frag",
        "is_first_frag", "is_more_frag", "has_vlan",
    ),
    FnSymbol("has_port", "CUShort -> SkBuff -> Bool"),
    FnSymbol("has_src_port", "CUShort -> SkBuff -> Bool"),
    FnSymbol("has_dst_port", "CUShort -> SkBuff -> Bool"),
    FnSymbol("has_vid", "CInt -> SkBuff -> Bool"),
    FnSymbol("has_mark", "CULong -> SkBuff -> Bool"),
    FnSymbol("is_l3_proto", "CUShort -> SkBuff -> Bool"),
    FnSymbol("is_l4_proto", "CUChar -> SkBuff -> Bool"),
    FnSymbol("has_addr", "Word32 -> CInt -> SkBuff -> Bool"),
    # properties
    FnSymbol("get_mark", PROPERTY),
    FnSymbol("get_state", PROPERTY),
    FnSymbol("ip_tos", PROPERTY),
    FnSymbol("ip_ttl", PROPERTY),
    # combinators
    FnSymbol("not", "(SkBuff -> Bool) -> SkBuff -> Bool"),
    FnSymbol("and", "(SkBuff -> Bool) -> (SkBuff -> Bool) -> SkBuff -> Bool"),
    FnSymbol("or", "(SkBuff -> Bool) -> (SkBuff -> Bool) -> SkBuff -> Bool"),
    FnSymbol("xor", "(SkBuff -> Bool) -> (SkBuff -> Bool) -> SkBuff -> Bool"),
    FnSymbol("filter", "(SkBuff -> Bool) -> SkBuff -> Action SkBuff"),
    FnSymbol("inv", "(SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff"),
    FnSymbol(
        "par",
        "(SkBuff -> Action SkBuff) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff",
    ),
    FnSymbol("when", "(SkBuff -> Bool) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff"),
    FnSymbol("unless", "(SkBuff -> Bool) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff"),
    FnSymbol(
        "conditional",
        "(SkBuff -> Bool) -> (SkBuff -> Action SkBuff) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff",
    ),
    FnSymbol("id", "a -> a"),
)


def builtin_table() -> SymbolTable:
    return SymbolTable.from_symbols(BUILTIN_SYMBOLS)
