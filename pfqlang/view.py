"""Non-owning views into signature text.

A StringView is a (buffer, start, length) triple. Every result produced by
the signature algebra is a view into the same buffer the caller passed in;
nothing below ever slices the buffer to build a new signature.

The empty view (length 0) is a legal value meaning "no information":
nothing was bound, the input was blank, there is no such argument.
"""

from __future__ import annotations

from dataclasses import dataclass

# Signatures use a fixed ASCII alphabet.
WHITESPACE = frozenset(" \t\n\r\v\f")
IDENT_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


@dataclass(frozen=True)
class StringView:
    """A borrowed span of ``buffer`` starting at ``start``.

    Two views compare equal (``==``) only when they denote the same span of
    the same buffer. Use ``same_text`` to compare contents and
    ``pfqlang.equality.equal`` to compare signatures.
    """

    buffer: str
    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(f"Invalid view ({self.start}, {self.length})")
        if self.start + self.length > len(self.buffer):
            raise ValueError(
                f"View ({self.start}, {self.length}) exceeds buffer of {len(self.buffer)}"
            )

    @property
    def end(self) -> int:
        """Offset in the buffer one past the last character."""
        return self.start + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, offset: int) -> str:
        if not 0 <= offset < self.length:
            raise IndexError(f"Offset {offset} outside view of length {self.length}")
        return self.buffer[self.start + offset]

    def __str__(self) -> str:
        return self.buffer[self.start : self.end]

    def startswith(self, token: str, offset: int = 0) -> bool:
        if offset < 0 or offset + len(token) > self.length:
            return False
        return self.buffer.startswith(token, self.start + offset)

    def sub(self, offset: int, length: int) -> StringView:
        """Sub-view relative to this view, clamped to its bounds."""
        offset = min(max(offset, 0), self.length)
        length = min(max(length, 0), self.length - offset)
        return StringView(self.buffer, self.start + offset, length)

    def nothing(self) -> StringView:
        """The empty view anchored at this view's start."""
        return StringView(self.buffer, self.start, 0)

    def trim(self) -> StringView:
        """Maximal sub-view without leading or trailing whitespace."""
        lo, hi = self.start, self.end
        while lo < hi and self.buffer[lo] in WHITESPACE:
            lo += 1
        while hi > lo and self.buffer[hi - 1] in WHITESPACE:
            hi -= 1
        return StringView(self.buffer, lo, hi - lo)

    def same_text(self, other: StringView) -> bool:
        if self.length != other.length:
            return False
        return self.buffer.startswith(str(other), self.start)


def make_view(text: str | StringView) -> StringView:
    """Wrap ``text`` as a view over the whole string; views pass through."""
    if isinstance(text, StringView):
        return text
    return StringView(text, 0, len(text))
