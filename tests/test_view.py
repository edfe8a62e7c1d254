import pytest

from pfqlang.view import StringView, make_view


def test_make_view_covers_whole_string() -> None:
    v = make_view("CInt")
    assert (v.start, v.length) == (0, 4)
    assert str(v) == "CInt"
    assert make_view(v) is v


def test_trim() -> None:
    v = make_view("  \tCInt -> Bool \n").trim()
    assert str(v) == "CInt -> Bool"
    assert v.start == 3


def test_trim_blank_is_empty() -> None:
    assert make_view("").trim().is_empty
    assert make_view("   \t ").trim().is_empty
    assert not make_view("   \t ").trim()


def test_trim_shares_buffer() -> None:
    text = "  (CInt)  "
    v = make_view(text).trim()
    assert v.buffer is text


def test_sub_is_clamped() -> None:
    v = make_view("abcdef").sub(2, 3)
    assert str(v) == "cde"
    assert str(v.sub(1, 100)) == "de"
    assert v.sub(10, 1).is_empty


def test_getitem_bounds() -> None:
    v = make_view("xabcx").sub(1, 3)
    assert v[0] == "a"
    assert v[2] == "c"
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1]


def test_startswith_stays_inside_view() -> None:
    v = make_view("a->b").sub(0, 2)
    assert v.startswith("a-")
    assert not v.startswith("->", 1)


def test_same_text() -> None:
    a = make_view("CInt -> CInt").sub(0, 4)
    b = make_view("CInt -> CInt").sub(8, 4)
    assert a.same_text(b)
    assert a != b
    assert not a.same_text(make_view("CIn"))


def test_invalid_view_rejected() -> None:
    with pytest.raises(ValueError):
        StringView("abc", 2, 5)
    with pytest.raises(ValueError):
        StringView("abc", -1, 1)
