from pfqlang.brackets import depths, is_balanced, match_close, pairs, top_level_offsets, walk
from pfqlang.view import make_view


def test_walk_reports_depth_of_opener_on_close() -> None:
    assert list(walk(make_view("(a)"))) == [(0, 0), (1, 1), (2, 0)]


def test_depths_shares_counter_between_kinds() -> None:
    assert depths(make_view("a(b[c])")) == (0, 0, 1, 1, 2, 1, 0)


def test_depths_unbalanced() -> None:
    assert depths(make_view("(a")) is None
    assert depths(make_view(")(")) is None
    assert depths(make_view("a)")) is None


def test_is_balanced() -> None:
    assert is_balanced(make_view(""))
    assert is_balanced(make_view("(CInt -> [a]) -> b"))
    assert not is_balanced(make_view("(Action SkBuff"))
    assert not is_balanced(make_view("CInt)("))


def test_match_close() -> None:
    v = make_view("(a(b))c")
    assert match_close(v, 0) == 5
    assert match_close(v, 2) == 4
    assert match_close(v, 1) is None
    assert match_close(v, 99) is None
    assert match_close(make_view("(a"), 0) is None


def test_match_close_within_sub_view() -> None:
    v = make_view("xx(a)yy").sub(2, 3)
    assert match_close(v, 0) == 2


def test_pairs_agree_with_match_close() -> None:
    for text in ["(a(b))c", "(a", "a)(b)", ")(", "[a (b] c)", "((x)) )(("]:
        v = make_view(text)
        found = pairs(v)
        for offset in range(len(v)):
            assert found.get(offset) == match_close(v, offset), (text, offset)


def test_pairs_within_sub_view() -> None:
    v = make_view("(xx(a)yy").sub(3, 3)
    assert pairs(v) == {0: 2}


def test_top_level_offsets() -> None:
    v = make_view("A -> (B -> C) -> D")
    assert top_level_offsets(v, "->") == [2, 14]
    assert top_level_offsets(make_view("(A -> B)"), "->") == []
    assert top_level_offsets(make_view("[A -> B] -> C"), "->") == [9]
