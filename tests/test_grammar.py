"""Tests for the signature grammar validator and parser."""

from __future__ import annotations

import logging

import pytest

from pfqlang.grammar import Apply, Arrow, Extent, TypeName, check, parse


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "CInt",
        "a",
        "[CInt]",
        "[  CInt   ]",
        "[a]",
        "CInt -> CInt ",
        "(CInt -> CInt ) -> Bool",
        "Action CInt",
        "Action a",
        "Action [CInt]",
        "Action [a]",
        "Action SkBuff",
        "Maybe(CInt)",
        "CInt -> (String) -> ((Maybe   SkBuff )) -> (Action SkBuff)  ",
        "(SkBuff -> Bool) -> (SkBuff -> Action SkBuff) -> SkBuff -> Action SkBuff",
        "[CInt -> CInt]",
        "Word32",
    ],
)
def test_accepts(text: str) -> None:
    assert check(text)


@pytest.mark.parametrize(
    "text",
    [
        "(Action SkBuff",
        "Action SkBuff)",
        "()",
        "[]",
        "CInt ->",
        "-> CInt",
        "CInt -> -> Bool",
        "CInt - Error",
        "Foo Bar",
        "CInt CInt",
        "Maybe",
        "Maybe -> CInt",
        "(a]",
        "[a)",
        "CInt,",
        "Skb_uff",
    ],
)
def test_rejects(text: str) -> None:
    assert not check(text)


def test_constructor_set_is_closed() -> None:
    assert not check("List CInt")
    assert check("List CInt", constructors={"List"})
    assert not check("Maybe CInt", constructors={"List"})


DEEP = 5000


def test_deep_redundant_parens() -> None:
    assert check("(" * DEEP + "CInt" + ")" * DEEP)
    assert check("CInt -> " + "(" * DEEP + "Bool" + ")" * DEEP)
    tree = parse("(" * DEEP + "CInt" + ")" * DEEP)
    assert isinstance(tree, TypeName)
    assert str(tree.token) == "CInt"


def test_deep_structural_nesting() -> None:
    assert check("[" * DEEP + "CInt" + "]" * DEEP)
    assert check("Maybe " * DEEP + "a")
    assert check("Maybe (" * DEEP + "a" + ")" * DEEP)
    left = "a"
    for _ in range(DEEP):
        left = f"({left} -> a)"
    assert check(left)


def test_deep_right_nested_tail() -> None:
    text = "".join("CInt -> (" for _ in range(DEEP)) + "SkBuff" + ")" * DEEP
    tree = parse(text)
    assert isinstance(tree, Arrow)


def test_deep_nesting_errors_are_rejections() -> None:
    assert not check("(" * DEEP + "a" + ")" * (DEEP - 1))
    assert not check("Maybe " * DEEP)
    assert not check("[" * DEEP + "a" + ")" * DEEP)


def test_long_arrow_chain() -> None:
    assert check(" -> ".join(["a"] * 5000))


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pfqlang.grammar"):
        assert not check("Foo Bar")
    assert "trailing input" in caplog.text


class TestParseTree:
    def test_blank_has_no_tree(self) -> None:
        assert parse("  ") is None

    def test_name(self) -> None:
        tree = parse(" (CInt) ")
        assert isinstance(tree, TypeName)
        assert str(tree.token) == "CInt"
        assert not tree.is_variable

    def test_variable(self) -> None:
        tree = parse("a")
        assert isinstance(tree, TypeName)
        assert tree.is_variable

    def test_arrow_folds_right(self) -> None:
        tree = parse("Maybe CInt -> [a] -> Bool")
        assert isinstance(tree, Arrow)
        assert isinstance(tree.param, Apply)
        assert str(tree.param.ctor) == "Maybe"
        assert isinstance(tree.result, Arrow)
        assert isinstance(tree.result.param, Extent)
        assert isinstance(tree.result.result, TypeName)

    def test_function_argument(self) -> None:
        tree = parse("(A -> B) -> C")
        assert isinstance(tree, Arrow)
        assert isinstance(tree.param, Arrow)
        assert isinstance(tree.result, TypeName)

    def test_leaves_view_the_input(self) -> None:
        text = "Action SkBuff"
        tree = parse(text)
        assert isinstance(tree, Apply)
        assert isinstance(tree.arg, TypeName)
        assert tree.arg.token.buffer is text
        assert tree.arg.token.start == 7
