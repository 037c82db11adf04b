import pytest

from romaja import InvalidComponent, Syllable
from romaja.domain.hangul_unicode import HANGUL_BASE, HANGUL_LAST
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant, Vowel


def test_from_character_decomposes():
    s = Syllable.from_character("각")
    assert s.codepoint == 0xAC01
    assert s.initial is InitialConsonant.GIYEOK
    assert s.vowel is Vowel.A
    assert s.final is FinalConsonant.GIYEOK
    assert s.is_decomposed
    assert str(s) == "각"


def test_from_character_passes_through_non_hangul():
    for ch in ("A", " ", "!", "ㄱ", "漢"):
        s = Syllable.from_character(ch)
        assert not s.is_decomposed
        assert s.initial is None and s.vowel is None and s.final is None
        assert s.character == ch
        assert s.romanize() == ch


def test_from_character_requires_single_character():
    with pytest.raises(ValueError):
        Syllable.from_character("가나")
    with pytest.raises(ValueError):
        Syllable.from_character("")


def test_round_trip_over_whole_block():
    for cp in range(HANGUL_BASE, HANGUL_LAST + 1):
        s = Syllable.from_codepoint(cp)
        rebuilt = Syllable.from_components(s.initial, s.vowel, s.final)
        assert rebuilt.codepoint == cp


def test_from_components_accepts_jamo_strings():
    assert Syllable.from_components("ㅎ", "ㅏ", "ㄴ").character == "한"
    assert Syllable.from_components("ㄱ", "ㅏ", "").character == "가"
    assert Syllable.from_components(
        InitialConsonant.GIYEOK, Vowel.A, FinalConsonant.NONE
    ) == Syllable.from_character("가")


@pytest.mark.parametrize("components", [
    (None, Vowel.A, FinalConsonant.NONE),
    (InitialConsonant.GIYEOK, None, FinalConsonant.NONE),
    (InitialConsonant.GIYEOK, Vowel.A, None),
    (None, None, None),
])
def test_from_components_missing_raises(components):
    with pytest.raises(InvalidComponent):
        Syllable.from_components(*components)


def test_from_components_unknown_jamo_raises():
    with pytest.raises(InvalidComponent):
        Syllable.from_components("x", "ㅏ", "")
    with pytest.raises(InvalidComponent):
        Syllable.from_components("ㄱ", "ㄱ", "")
    with pytest.raises(InvalidComponent):
        Syllable.from_components(Vowel.A, Vowel.A, FinalConsonant.NONE)


def test_invalid_component_is_a_value_error():
    with pytest.raises(ValueError):
        Syllable.from_components(None, Vowel.A, FinalConsonant.NONE)


def test_direct_construction_checks_components():
    with pytest.raises(InvalidComponent):
        Syllable(HANGUL_BASE, InitialConsonant.GIYEOK)
    with pytest.raises(InvalidComponent):
        Syllable(HANGUL_BASE, InitialConsonant.GIYEOK, Vowel.A, FinalConsonant.GIYEOK)


def test_identity_is_the_codepoint():
    a = Syllable.from_character("가")
    b = Syllable.from_components("ㄱ", "ㅏ", "")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Syllable.from_character("나")}) == 2
    assert a != Syllable.from_character("각")


def test_ordering_is_by_codepoint():
    items = [Syllable.from_character(ch) for ch in "나가a"]
    assert [s.character for s in sorted(items)] == ["a", "가", "나"]
    assert Syllable.from_character("가") < Syllable.from_character("각")


def test_immutable():
    s = Syllable.from_character("가")
    with pytest.raises(AttributeError):
        s.codepoint = 0  # type: ignore[misc]


def test_romanize_method():
    han = Syllable.from_character("한")
    guk = Syllable.from_character("국")
    eo = Syllable.from_character("어")
    assert han.romanize() == "han"
    assert guk.romanize() == "guk"
    assert guk.romanize(han, eo) == "-gu"
    assert guk.romanize(previous=han, following=eo) == "-gu"
