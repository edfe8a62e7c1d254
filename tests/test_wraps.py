"""Tests for outer-wrap canonicalization and extent removal."""

from __future__ import annotations

import time

import pytest

from pfqlang.view import make_view
from pfqlang.wraps import count_outer_wraps, remove_extent, simplify, strip_outer_wraps

SIGNATURES = [
    # (text, outer wraps, canonical)
    ("", 0, ""),
    ("  CInt", 0, "CInt"),
    ("   CInt - Error", 0, "CInt - Error"),
    ("  CInt -> Bool   ", 0, "CInt -> Bool"),
    ("    CInt -> ( CInt-> CShort ) -> SkBuff", 0, "CInt -> ( CInt-> CShort ) -> SkBuff"),
    ("()", 1, ""),
    ("(CInt)", 1, "CInt"),
    ("(CInt - Error)", 1, "CInt - Error"),
    ("(CInt -> Bool)   ", 1, "CInt -> Bool"),
    ("(CInt -> ( CInt-> CShort ) -> SkBuff)    ", 1, "CInt -> ( CInt-> CShort ) -> SkBuff"),
    ("(Int -> (CInt-> CShort) ) -> SkBuff  ", 0, "(Int -> (CInt-> CShort) ) -> SkBuff"),
    (
        "  ((CInt -> ( CInt-> CShort )) -> CInt -> SkBuff)",
        1,
        "(CInt -> ( CInt-> CShort )) -> CInt -> SkBuff",
    ),
    (
        "(  ((CInt -> ( CInt-> CShort )) -> CInt -> SkBuff) )",
        2,
        "(CInt -> ( CInt-> CShort )) -> CInt -> SkBuff",
    ),
    ("(    Action SkBuff )", 1, "Action SkBuff"),
    ("CInt -> (String) -> ((Maybe   SkBuff )) -> (Action SkBuff)  ", 0,
     "CInt -> (String) -> ((Maybe   SkBuff )) -> (Action SkBuff)"),
    ("(Action SkBuff", 0, "(Action SkBuff"),
    ("((( a )))", 3, "a"),
]


@pytest.mark.parametrize("text, wraps, canonical", SIGNATURES)
def test_count_and_strip(text: str, wraps: int, canonical: str) -> None:
    assert count_outer_wraps(text) == wraps
    assert str(strip_outer_wraps(text)) == canonical


@pytest.mark.parametrize("text", [s[0] for s in SIGNATURES])
def test_strip_is_idempotent(text: str) -> None:
    assert count_outer_wraps(strip_outer_wraps(text)) == 0


def test_empty_parens_strip_to_empty() -> None:
    assert count_outer_wraps("  ( )  ") == 1
    assert strip_outer_wraps("  ( )  ").is_empty


def test_extent_bracket_is_not_a_wrap() -> None:
    assert count_outer_wraps("[CInt]") == 0


def test_strip_returns_view_into_same_buffer() -> None:
    text = "  ((Maybe CInt))"
    view = strip_outer_wraps(text)
    assert view.buffer is text
    assert view.start == 4
    assert view.length == len("Maybe CInt")


def test_simplify_alias() -> None:
    assert simplify is strip_outer_wraps


def test_works_on_sub_views() -> None:
    view = make_view("xx(CInt)yy").sub(2, 6)
    assert count_outer_wraps(view) == 1
    assert str(strip_outer_wraps(view)) == "CInt"


# ---------------------------------------------------------------------------
# Extents
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[ Int]", "Int"),
        ("[Int]", "Int"),
        ("  [  CInt   ]  ", "CInt"),
        ("Maybe Int", "Maybe Int"),
        ("  Maybe Int", "Maybe Int"),
        ("[[CInt]]", "[CInt]"),
        ("[a] -> [b]", "[a] -> [b]"),
        ("(CInt)", "(CInt)"),
        ("", ""),
        ("[CInt", "[CInt"),
    ],
)
def test_remove_extent(text: str, expected: str) -> None:
    assert str(remove_extent(text)) == expected


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

LAYERS = 100_000


def test_many_layers_strip_in_linear_time() -> None:
    text = "(" * LAYERS + " a " + ")" * LAYERS
    started = time.perf_counter()
    assert count_outer_wraps(text) == LAYERS
    assert str(strip_outer_wraps(text)) == "a"
    assert time.perf_counter() - started < 2.0


def test_many_layers_around_part_of_the_span() -> None:
    text = "(" * LAYERS + "a" + ")" * LAYERS
    assert count_outer_wraps(text + " -> b") == 0
    assert count_outer_wraps("(" + text + " ) ") == LAYERS + 1
