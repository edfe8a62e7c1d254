from pfqlang.signature import Signature

F15 = "CInt -> (String) -> ((Maybe   SkBuff )) -> (Action SkBuff)  "


def test_testable_properties() -> None:
    sig = Signature.of(F15)
    assert sig.arity == 3
    assert sig.is_function
    assert sig.arg(0).text == "CInt"
    assert sig.arg(2).equals("Maybe SkBuff")
    assert sig.arg(3).is_empty
    assert sig.bind(3).equals("Action SkBuff")
    assert sig.bind(5).is_empty


def test_result() -> None:
    assert Signature.of(F15).result.equals("Action SkBuff")
    assert Signature.of("CInt").result.text == "CInt"
    assert Signature.of("").result.is_empty


def test_segments_are_signatures() -> None:
    segs = Signature.of("CInt -> Bool").segments
    assert [s.text for s in segs] == ["CInt", "Bool"]
    assert all(isinstance(s, Signature) for s in segs)


def test_canonical_form() -> None:
    sig = Signature.of("  ((Maybe CInt)) ")
    assert sig.outer_wraps == 2
    assert str(sig.simplify()) == "Maybe CInt"
    assert sig.simplify().outer_wraps == 0


def test_extent() -> None:
    sig = Signature.of(" [ CInt ] ")
    assert sig.is_extent
    assert sig.remove_extent().text == "CInt"
    assert not Signature.of("CInt").is_extent
    assert not Signature.of("Maybe Int").is_extent


def test_extent_behind_redundant_parens() -> None:
    sig = Signature.of(" (( [ CInt ] )) ")
    assert sig.is_extent
    assert sig.element().text == "CInt"
    assert Signature.of("(CInt)").element().text == "CInt"
    assert not Signature.of("([CInt] -> Bool)").is_extent


def test_variable() -> None:
    assert Signature.of("(a)").is_variable
    assert not Signature.of("CInt").is_variable
    assert not Signature.of("a -> a").is_variable
    assert not Signature.of("").is_variable


def test_equals_accepts_signatures_and_text() -> None:
    a = Signature.of("CInt -> Bool")
    assert a.equals(Signature.of("((CInt) -> Bool)"))
    assert a.equals("(CInt -> Bool)")
    assert not a.equals("Bool -> CInt")


def test_validity() -> None:
    assert Signature.of("").is_valid
    assert Signature.of("").is_empty
    assert not Signature.of("(Action SkBuff").is_valid
    assert Signature.of("Action SkBuff").tree() is not None


def test_constructors_follow_derived_signatures() -> None:
    sig = Signature.of("CInt -> (Option SkBuff)", {"Option"})
    assert sig.is_valid
    assert sig.bind(1).is_valid
    assert sig.bind(1).equals("Option SkBuff")
    assert not Signature.of("Option SkBuff").is_valid


def test_equality_of_signatures_is_positional() -> None:
    text = "CInt"
    assert Signature.of(text) == Signature.of(text)
    assert Signature.of(text) == Signature.of(text, {"Other"})
