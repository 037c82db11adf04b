import itertools

import pytest

from romaja.domain.assimilation_rules import (
    FINAL_RULES,
    INITIAL_RULES,
    RuleContext,
    final_label,
    initial_label,
    needs_hyphen,
)
from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant

C = InitialConsonant
J = FinalConsonant

GENERIC = RuleContext(AssimilationDirection.PROGRESSIVE, WordClass.GENERIC, palatal=False)

ALL_CONTEXTS = [
    RuleContext(d, w, p)
    for d, w, p in itertools.product(AssimilationDirection, WordClass, (False, True))
]


def _ctx(**kwargs) -> RuleContext:
    base = {"direction": AssimilationDirection.PROGRESSIVE, "word_class": WordClass.GENERIC, "palatal": False}
    base.update(kwargs)
    return RuleContext(**base)


def test_every_adjacency_resolves_to_a_label():
    for ctx in ALL_CONTEXTS:
        for initial, final in itertools.product(InitialConsonant, FinalConsonant):
            assert isinstance(initial_label(initial, final, ctx), str)
            assert isinstance(final_label(final, initial, ctx), str)


def test_missing_adjacency_is_default():
    assert C.MIEUM not in INITIAL_RULES
    assert initial_label(C.MIEUM, J.GIYEOK, GENERIC) == "m"
    assert J.IEUNG not in FINAL_RULES
    assert final_label(J.IEUNG, C.RIEUL, GENERIC) == "ng"
    assert final_label(J.NIEUN, C.BIEUP, GENERIC) == "n"


@pytest.mark.rules
def test_nasalization():
    assert final_label(J.GIYEOK, C.MIEUM, GENERIC) == "ng"
    assert final_label(J.BIEUP, C.NIEUN, GENERIC) == "m"
    assert final_label(J.DIGEUT, C.NIEUN, GENERIC) == "n"
    assert final_label(J.RIEUL_BIEUP, C.NIEUN, GENERIC) == "m"
    assert initial_label(C.RIEUL, J.GIYEOK, GENERIC) == "n"
    assert initial_label(C.RIEUL, J.IEUNG, GENERIC) == "n"


@pytest.mark.rules
@pytest.mark.parametrize("final", [J.NIEUN, J.NIEUN_JIEUT, J.NIEUN_HIEUT, J.DIGEUT, J.SIOT, J.HIEUT])
def test_liquid_assimilation_follows_direction(final):
    progressive = _ctx(direction=AssimilationDirection.PROGRESSIVE)
    regressive = _ctx(direction=AssimilationDirection.REGRESSIVE)
    assert final_label(final, C.RIEUL, progressive) == "n"
    assert final_label(final, C.RIEUL, regressive) == "l"


@pytest.mark.rules
def test_liquid_assimilation_unambiguous():
    for direction in AssimilationDirection:
        ctx = _ctx(direction=direction)
        assert initial_label(C.RIEUL, J.RIEUL, ctx) == "l"
        assert initial_label(C.NIEUN, J.RIEUL, ctx) == "l"
        assert final_label(J.TIEUT, C.RIEUL, ctx) == "l"


@pytest.mark.rules
def test_aspiration_fusion():
    assert initial_label(C.HIEUT, J.GIYEOK, GENERIC) == ""
    assert initial_label(C.HIEUT, J.BIEUP, GENERIC) == "p"
    assert initial_label(C.GIYEOK, J.HIEUT, GENERIC) == "k"
    assert initial_label(C.JIEUT, J.HIEUT, GENERIC) == "ch"
    assert final_label(J.HIEUT, C.DIGEUT, GENERIC) == ""


@pytest.mark.rules
def test_substantive_suppresses_fusion():
    ctx = _ctx(word_class=WordClass.SUBSTANTIVE)
    assert initial_label(C.HIEUT, J.GIYEOK, ctx) == "h"
    assert initial_label(C.HIEUT, J.BIEUP, ctx) == "h"
    assert initial_label(C.HIEUT, J.DIGEUT, _ctx(word_class=WordClass.SUBSTANTIVE, palatal=True)) == "h"
    assert final_label(J.BIEUP, C.HIEUT, ctx) == "p"
    assert final_label(J.DIGEUT, C.IEUNG, ctx) == "t"
    assert final_label(J.SIOT, C.TIEUT, ctx) == "t"


@pytest.mark.rules
def test_palatalization():
    palatal = _ctx(palatal=True)
    assert initial_label(C.IEUNG, J.DIGEUT, palatal) == "j"
    assert initial_label(C.IEUNG, J.DIGEUT, GENERIC) == "d"
    assert initial_label(C.IEUNG, J.TIEUT, palatal) == "ch"
    assert initial_label(C.TIEUT, J.JIEUT, palatal) == "ch"
    assert initial_label(C.HIEUT, J.DIGEUT, palatal) == "ch"
    assert initial_label(C.HIEUT, J.DIGEUT, GENERIC) == "t"


@pytest.mark.rules
def test_compound_palatal_insertion():
    compound = _ctx(word_class=WordClass.COMPOUND, palatal=True)
    assert initial_label(C.IEUNG, J.GIYEOK, compound) == "n"
    assert initial_label(C.IEUNG, J.IEUNG, compound) == "n"
    assert initial_label(C.IEUNG, J.RIEUL, compound) == "l"
    assert final_label(J.GIYEOK, C.IEUNG, compound) == "ng"
    assert final_label(J.RIEUL, C.IEUNG, compound) == "l"
    # without a palatalizing vowel the compound hint changes nothing
    plain_compound = _ctx(word_class=WordClass.COMPOUND)
    assert initial_label(C.IEUNG, J.GIYEOK, plain_compound) == "g"
    assert final_label(J.RIEUL, C.IEUNG, plain_compound) == ""


@pytest.mark.rules
def test_coda_moves_to_zero_onset():
    assert final_label(J.GIYEOK, C.IEUNG, GENERIC) == ""
    assert initial_label(C.IEUNG, J.GIYEOK, GENERIC) == "g"
    assert final_label(J.MIEUM, C.IEUNG, GENERIC) == ""
    assert initial_label(C.IEUNG, J.MIEUM, GENERIC) == "m"
    assert initial_label(C.IEUNG, J.BIEUP_SIOT, GENERIC) == "s"
    assert initial_label(C.IEUNG, J.NONE, GENERIC) == ""


@pytest.mark.rules
def test_tensification():
    assert initial_label(C.GIYEOK, J.RIEUL_GIYEOK, GENERIC) == "kk"
    assert initial_label(C.DIGEUT, J.RIEUL_TIEUT, GENERIC) == "tt"
    assert initial_label(C.BIEUP, J.RIEUL_TIEUT, GENERIC) == "pp"
    assert initial_label(C.IEUNG, J.SSANGSIOT, GENERIC) == "ss"
    assert initial_label(C.IEUNG, J.SSANGGIYEOK, GENERIC) == "kk"


def test_hyphen_rules():
    assert needs_hyphen(C.GIYEOK, "han", "g")
    assert not needs_hyphen(C.GIYEOK, "hak", "g")
    assert needs_hyphen(C.IEUNG, "gang", "")
    assert not needs_hyphen(C.IEUNG, "saeng", "n")
    assert needs_hyphen(C.TIEUT, "got", "t")
    assert needs_hyphen(C.PIEUP, "ip", "p")
    assert needs_hyphen(C.HIEUT, "neop", "p")
    assert not needs_hyphen(C.HIEUT, "chuk", "")
    assert not needs_hyphen(C.MIEUM, "gam", "m")
